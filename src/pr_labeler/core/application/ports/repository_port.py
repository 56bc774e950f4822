from abc import ABC, abstractmethod
from typing import Any

from pr_labeler.core.domain.pull_request.pull_request_ref import PullRequestRef


class RepositoryPort(ABC):
    """Remote hosting API. Failures raise ``APIError``."""

    # ── Diff & content ──

    @abstractmethod
    async def list_pull_request_files(self, pr: PullRequestRef, page: int, per_page: int = 100) -> list[dict[str, Any]]:
        """One page of the PR file listing. Each entry has filename, status, additions, deletions."""
        pass

    @abstractmethod
    async def get_file_size(self, pr: PullRequestRef, path: str) -> int | None:
        """Byte size of ``path`` at the head commit, or None when it is not a regular file."""
        pass

    # ── Labels ──

    @abstractmethod
    async def list_labels(self, pr: PullRequestRef) -> list[str]:
        pass

    @abstractmethod
    async def add_labels(self, pr: PullRequestRef, labels: list[str]) -> None:
        pass

    @abstractmethod
    async def remove_label(self, pr: PullRequestRef, label: str) -> None:
        pass

    # ── Context ──

    @abstractmethod
    async def list_check_runs(self, pr: PullRequestRef) -> list[dict[str, Any]]:
        """Check runs attached to the head commit, each with name, status, conclusion."""
        pass

    @abstractmethod
    async def list_commit_subjects(self, pr: PullRequestRef) -> list[str]:
        """First line of every commit message in the PR."""
        pass
