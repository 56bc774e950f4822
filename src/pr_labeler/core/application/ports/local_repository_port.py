from abc import ABC, abstractmethod


class LocalRepositoryPort(ABC):
    """Checked-out working tree. ``numstat_diff`` raises ``LocalCommandError``; the
    measurement calls return None instead of raising."""

    @abstractmethod
    async def numstat_diff(self, base_sha: str, head_sha: str) -> str:
        """Raw ``git diff --numstat`` output between the merge base and head."""
        pass

    @abstractmethod
    async def object_size(self, path: str) -> int | None:
        """Blob size recorded in HEAD for ``path``."""
        pass

    @abstractmethod
    async def count_lines(self, path: str) -> int | None:
        """Newline count reported by ``wc -l``."""
        pass
