from unittest.mock import AsyncMock

import pytest

from pr_labeler.core.application.policies.retry_policy import RateLimitRetryPolicy
from pr_labeler.core.application.ports import LocalRepositoryPort, RepositoryPort
from pr_labeler.core.domain.pull_request import PullRequestRef


@pytest.fixture()
def pr() -> PullRequestRef:
    return PullRequestRef(owner="acme", repo="widgets", number=42, base_sha="base123", head_sha="head456")


@pytest.fixture()
def mock_remote() -> AsyncMock:
    return AsyncMock(spec=RepositoryPort)


@pytest.fixture()
def mock_local() -> AsyncMock:
    return AsyncMock(spec=LocalRepositoryPort)


@pytest.fixture()
def no_wait_retry() -> RateLimitRetryPolicy:
    return RateLimitRetryPolicy(initial_delay=0, max_delay=0)
