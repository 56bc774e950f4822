from dataclasses import dataclass
from enum import StrEnum


class ChangeStatus(StrEnum):
    ADDED = "added"
    MODIFIED = "modified"
    RENAMED = "renamed"
    COPIED = "copied"


@dataclass(frozen=True, kw_only=True)
class ChangedFile:
    """One file touched by the pull request. Deletions are never represented."""

    path: str
    additions: int
    deletions: int
    status: ChangeStatus
