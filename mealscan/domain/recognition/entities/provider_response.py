"""Tagged provider responses.

Every provider adapter reduces its vendor envelope to one of these
variants before any parsing happens, so downstream code never inspects
vendor-specific shapes. Transient failures are raised instead
(TransientProviderError) so the retry policy can see them.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Success:
    """Provider produced text (JSON or free-form) for the extractor."""

    text: str
    confidence: Optional[float] = None


@dataclass(frozen=True)
class StructuralFailure:
    """Non-retryable failure: content filter, truncation, auth, bad request."""

    reason: str


@dataclass(frozen=True)
class Empty:
    """Provider answered without usable output."""

    reason: str = "empty output"


ProviderResponse = Union[Success, StructuralFailure, Empty]
