from unittest.mock import AsyncMock

import pytest

from pr_labeler.core.application.exceptions import APIError
from pr_labeler.core.application.policies.retry_policy import RateLimitRetryPolicy


class TestRateLimitRetryPolicy:
    @pytest.mark.asyncio
    async def test_returns_result_on_first_success(self, no_wait_retry: RateLimitRetryPolicy) -> None:
        fn = AsyncMock(return_value="ok")

        assert await no_wait_retry.run(fn) == "ok"
        fn.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_retries_rate_limited_calls(self, no_wait_retry: RateLimitRetryPolicy) -> None:
        fn = AsyncMock(side_effect=[APIError("slow down", status=429, rate_limited=True), "ok"])

        assert await no_wait_retry.run(fn) == "ok"
        assert fn.await_count == 2

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self, no_wait_retry: RateLimitRetryPolicy) -> None:
        fn = AsyncMock(side_effect=APIError("slow down", status=429, rate_limited=True))

        with pytest.raises(APIError) as exc_info:
            await no_wait_retry.run(fn)

        assert exc_info.value.rate_limited
        assert fn.await_count == 3

    @pytest.mark.asyncio
    async def test_other_errors_are_not_retried(self, no_wait_retry: RateLimitRetryPolicy) -> None:
        fn = AsyncMock(side_effect=APIError("Forbidden", status=403))

        with pytest.raises(APIError):
            await no_wait_retry.run(fn)

        fn.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_non_api_errors_propagate(self, no_wait_retry: RateLimitRetryPolicy) -> None:
        fn = AsyncMock(side_effect=ValueError("bad payload"))

        with pytest.raises(ValueError, match="bad payload"):
            await no_wait_retry.run(fn)

    @pytest.mark.asyncio
    async def test_custom_attempt_count(self) -> None:
        policy = RateLimitRetryPolicy(max_attempts=5, initial_delay=0, max_delay=0)
        fn = AsyncMock(side_effect=APIError("slow down", status=429, rate_limited=True))

        with pytest.raises(APIError):
            await policy.run(fn)

        assert fn.await_count == 5
