"""Exceptions for the meal scanning pipeline.

All pipeline exceptions inherit from MealScanError so the application
layer can catch them uniformly. Only ImageEncodingError and the barcode
errors are ever surfaced to callers; everything else is absorbed by the
provider cascade.
"""

import asyncio

import httpx


class MealScanError(Exception):
    """Base exception for the meal scanning pipeline."""

    pass


class ImageEncodingError(MealScanError):
    """Raised when an image cannot be encoded, neither optimized nor raw."""

    pass


class ParseError(MealScanError):
    """Raised when model output yields no recognizable food item.

    Carries a short machine-readable code (e.g. NO_JSON_OBJECT,
    NO_FOOD_FOUND) for logging and metrics.
    """

    def __init__(self, code: str, message: str = "") -> None:
        super().__init__(f"{code}: {message}" if message else code)
        self.code = code


class ProviderError(MealScanError):
    """Raised when an external AI provider call fails."""

    def __init__(self, provider: str, reason: str) -> None:
        super().__init__(f"{provider}: {reason}")
        self.provider = provider
        self.reason = reason


class TransientProviderError(ProviderError):
    """Provider overloaded, rate limited, unavailable, timed out or empty.

    Retried with backoff and handled by model rotation.
    """

    pass


class StructuralProviderError(ProviderError):
    """Authorization failure, malformed request, content block or truncation.

    Never retried at the same tier.
    """

    pass


class BarcodeError(MealScanError):
    """Base class for barcode lookup failures."""

    pass


class BarcodeNotFoundError(BarcodeError):
    """Raised when the product database has no entry for a barcode."""

    def __init__(self, barcode: str) -> None:
        super().__init__(f"Could not find product information for barcode: {barcode}")
        self.barcode = barcode


class BarcodeLookupError(BarcodeError):
    """Raised when the product database cannot be reached after retries."""

    pass


class InvalidBarcodeError(BarcodeError, ValueError):
    """Raised for empty or non-alphanumeric barcodes."""

    pass


def is_retryable_error(exc: BaseException) -> bool:
    """Classify an exception as transient (worth another attempt)."""
    if isinstance(exc, TransientProviderError):
        return True
    if isinstance(exc, asyncio.TimeoutError):
        return True
    if isinstance(exc, (httpx.TimeoutException, httpx.TransportError)):
        return True
    return False
