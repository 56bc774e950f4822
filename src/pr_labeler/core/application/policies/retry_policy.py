from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

import structlog
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    RetryError,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from pr_labeler.core.application.exceptions.labeler_exceptions import APIError

logger = structlog.get_logger()

_T = TypeVar("_T")


def _rate_limited(exc: BaseException) -> bool:
    return isinstance(exc, APIError) and exc.rate_limited


def _log_backoff(state: RetryCallState) -> None:
    logger.warning(
        "Rate limited, backing off",
        attempt=state.attempt_number,
        sleep_seconds=state.next_action.sleep if state.next_action else None,
    )


@dataclass(frozen=True)
class RateLimitRetryPolicy:
    """Retries a call only while the API keeps answering with a rate-limit signal.

    Delays double from ``initial_delay`` (1 s, 2 s, ...). Every other error,
    permission refusals included, propagates on the first attempt.
    """

    max_attempts: int = 3
    initial_delay: float = 1.0
    max_delay: float = 30.0

    async def run(self, fn: Callable[[], Awaitable[_T]]) -> _T:
        try:
            return await self._retrying()(fn)
        except RetryError as err:
            raise err.last_attempt.result()  # type: ignore[misc]

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            retry=retry_if_exception(_rate_limited),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self.initial_delay, min=0, max=self.max_delay),
            before_sleep=_log_backoff,
            reraise=True,
        )
