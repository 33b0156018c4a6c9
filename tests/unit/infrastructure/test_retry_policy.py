"""Unit tests for RetryPolicy."""

import asyncio

import httpx
import pytest

from mealscan.domain.errors import StructuralProviderError, TransientProviderError
from mealscan.infrastructure.ai.retry import RetryPolicy


class FlakyCall:
    """Raise the queued exceptions, then return "ok"."""

    def __init__(self, *errors: BaseException):
        self.errors = list(errors)
        self.calls = 0

    async def __call__(self) -> str:
        self.calls += 1
        if self.errors:
            raise self.errors.pop(0)
        return "ok"


class TestRetryPolicy:
    """Attempts, predicate and re-raise behaviour."""

    @pytest.mark.asyncio
    async def test_retries_transient_errors(self, fast_retry: RetryPolicy) -> None:
        call = FlakyCall(TransientProviderError("p", "overloaded"), asyncio.TimeoutError())

        assert await fast_retry.run(call) == "ok"
        assert call.calls == 3

    @pytest.mark.asyncio
    async def test_network_errors_are_retryable(self, fast_retry: RetryPolicy) -> None:
        call = FlakyCall(httpx.ConnectError("refused"))

        assert await fast_retry.run(call) == "ok"
        assert call.calls == 2

    @pytest.mark.asyncio
    async def test_structural_errors_are_not_retried(self, fast_retry: RetryPolicy) -> None:
        call = FlakyCall(StructuralProviderError("p", "unauthorized"))

        with pytest.raises(StructuralProviderError):
            await fast_retry.run(call)
        assert call.calls == 1

    @pytest.mark.asyncio
    async def test_last_error_is_reraised(self, fast_retry: RetryPolicy) -> None:
        call = FlakyCall(*(TransientProviderError("p", f"attempt {i}") for i in range(5)))

        with pytest.raises(TransientProviderError, match="attempt 2"):
            await fast_retry.run(call)
        assert call.calls == 3

    @pytest.mark.asyncio
    async def test_with_attempts(self, fast_retry: RetryPolicy) -> None:
        policy = fast_retry.with_attempts(1)
        call = FlakyCall(TransientProviderError("p", "busy"))

        with pytest.raises(TransientProviderError):
            await policy.run(call)
        assert call.calls == 1
        assert fast_retry.max_attempts == 3

    @pytest.mark.asyncio
    async def test_custom_predicate(self) -> None:
        policy = RetryPolicy(
            max_attempts=2, base_delay_s=0, max_delay_s=0, retryable=lambda e: isinstance(e, KeyError)
        )
        call = FlakyCall(KeyError("x"))

        assert await policy.run(call) == "ok"

    def test_invalid_configuration(self) -> None:
        with pytest.raises(ValueError):
            RetryPolicy(max_attempts=0)
        with pytest.raises(ValueError):
            RetryPolicy(base_delay_s=-1)
