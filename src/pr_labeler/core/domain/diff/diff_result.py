from dataclasses import dataclass, field
from enum import StrEnum

from pr_labeler.core.domain.diff.changed_file import ChangedFile


class DiffStrategy(StrEnum):
    LOCAL_GIT = "local-git"
    GITHUB_API = "github-api"


@dataclass(frozen=True, kw_only=True)
class DiffResult:
    files: list[ChangedFile] = field(default_factory=list)
    strategy: DiffStrategy
