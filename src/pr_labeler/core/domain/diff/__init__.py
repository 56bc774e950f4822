from pr_labeler.core.domain.diff.changed_file import ChangedFile, ChangeStatus
from pr_labeler.core.domain.diff.diff_result import DiffResult, DiffStrategy

__all__ = ["ChangeStatus", "ChangedFile", "DiffResult", "DiffStrategy"]
