from abc import ABC, abstractmethod
from typing import Any

from pr_labeler.core.domain.pull_request import PullRequestRef


class BaseWorkflow(ABC):
    """Abstract base for pipelines run against one pull request."""

    @abstractmethod
    async def execute(self, pr: PullRequestRef) -> Any:
        """Run the full pipeline for the given pull request."""
