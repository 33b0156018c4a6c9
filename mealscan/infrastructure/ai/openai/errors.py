"""Map OpenAI SDK exceptions onto the pipeline's provider errors."""

from openai import (
    APIConnectionError,
    APIError,
    APIStatusError,
    APITimeoutError,
    RateLimitError,
)

from mealscan.domain.errors import (
    ProviderError,
    StructuralProviderError,
    TransientProviderError,
)

# Overloaded / unavailable / throttled: worth another attempt.
TRANSIENT_STATUS_CODES = frozenset({408, 409, 429, 500, 502, 503, 504, 529})


def classify_openai_error(exc: BaseException, provider: str) -> ProviderError:
    """
    Convert an OpenAI SDK exception into a transient or structural error.

    Timeouts, connection failures, rate limits and 5xx-style status codes
    are transient; authentication, permission, bad request and anything
    unrecognised are structural.
    """
    if isinstance(exc, APITimeoutError):
        return TransientProviderError(provider, "timeout")
    if isinstance(exc, APIConnectionError):
        return TransientProviderError(provider, f"connection: {exc}")
    if isinstance(exc, RateLimitError):
        return TransientProviderError(provider, "rate limited")
    if isinstance(exc, APIStatusError):
        if exc.status_code in TRANSIENT_STATUS_CODES:
            return TransientProviderError(provider, f"status {exc.status_code}")
        return StructuralProviderError(provider, f"status {exc.status_code}: {exc.message}")
    if isinstance(exc, APIError):
        return StructuralProviderError(provider, str(exc))
    return StructuralProviderError(provider, f"{type(exc).__name__}: {exc}")
