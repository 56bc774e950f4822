from pr_labeler.core.domain.pull_request.change_type import ChangeType, detect_change_type
from pr_labeler.core.domain.pull_request.ci_status import CICheckStatus, CIStatus
from pr_labeler.core.domain.pull_request.pr_context import PRContext
from pr_labeler.core.domain.pull_request.pr_metrics import PRMetrics
from pr_labeler.core.domain.pull_request.pull_request_ref import PullRequestRef

__all__ = [
    "CICheckStatus",
    "CIStatus",
    "ChangeType",
    "PRContext",
    "PRMetrics",
    "PullRequestRef",
    "detect_change_type",
]
