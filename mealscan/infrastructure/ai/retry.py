"""Retry policy shared by every explicitly retried sub-call.

One small object (attempt ceiling, exponential backoff, retryable
predicate) drives per-model attempts in the provider cascade, the AI
nutrition generation sub-call and the barcode lookup, so all of them honour
the same contract. Execution is delegated to tenacity.
"""

import logging
from dataclasses import dataclass, replace
from typing import Awaitable, Callable, TypeVar

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from mealscan.domain.errors import is_retryable_error

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """
    Capped retry with exponential backoff.

    Delays start at base_delay_s and double on every attempt, capped at
    max_delay_s. Only exceptions accepted by `retryable` are retried; any
    other exception, or the last retryable one, is re-raised unchanged.

    Example:
        >>> policy = RetryPolicy(max_attempts=3, base_delay_s=0.5)
        >>> result = await policy.run(lambda: client.fetch("..."))
    """

    max_attempts: int = 3
    base_delay_s: float = 0.5
    max_delay_s: float = 8.0
    retryable: Callable[[BaseException], bool] = is_retryable_error

    def __post_init__(self) -> None:
        """Validate invariants after initialization."""
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.base_delay_s < 0 or self.max_delay_s < 0:
            raise ValueError("Retry delays must be non-negative")

    def with_attempts(self, max_attempts: int) -> "RetryPolicy":
        return replace(self, max_attempts=max_attempts)

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self.base_delay_s, min=self.base_delay_s, max=self.max_delay_s),
            retry=retry_if_exception(self.retryable),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )

    async def run(self, func: Callable[[], Awaitable[T]]) -> T:
        """Call `func` until it succeeds, fails permanently or attempts run out."""
        async for attempt in self._retrying():
            with attempt:
                result = await func()
        return result
