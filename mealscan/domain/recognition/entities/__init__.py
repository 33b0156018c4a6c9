"""Recognition domain entities."""

from mealscan.domain.recognition.entities.detected_item import DetectedItem
from mealscan.domain.recognition.entities.provider_response import (
    Empty,
    ProviderResponse,
    StructuralFailure,
    Success,
)
from mealscan.domain.recognition.entities.provider_result import ProviderResult

__all__ = [
    "DetectedItem",
    "Empty",
    "ProviderResponse",
    "ProviderResult",
    "StructuralFailure",
    "Success",
]
