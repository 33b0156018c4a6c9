"""Recognition domain ports (interfaces)."""

from mealscan.domain.recognition.ports.vision_provider import (
    ILabelProvider,
    IVisionModelProvider,
)

__all__ = ["ILabelProvider", "IVisionModelProvider"]
