from dataclasses import dataclass, field

from pr_labeler.core.domain.pull_request.ci_status import CIStatus


@dataclass(frozen=True, kw_only=True)
class PRContext:
    """Optional signals beyond the diff: CI outcome and commit subjects."""

    ci_status: CIStatus | None = None
    commit_subjects: list[str] = field(default_factory=list)
