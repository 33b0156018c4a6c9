"""ProviderResult - what the provider cascade hands to the aggregation step."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .detected_item import DetectedItem


@dataclass(frozen=True)
class ProviderResult:
    """
    Entity: items detected by the provider that won the cascade.

    Attributes:
        provider: Human readable provider label (e.g. "OpenAI gpt-4o-mini")
        items: Detected items (at least one)
        confidence: Overall recognition confidence (0.0 - 1.0)
        allow_generation: Whether unresolved items may use AI generation
        is_estimate: True for the deterministic fallback
        method: Fixed method label, overrides the derived one when set
        dish_name: Fixed report name, overrides the derived one when set
        category: Fixed report category, overrides the derived one when set
        tips: Fixed report tips, overrides the derived ones when set
    """

    provider: str
    items: Tuple[DetectedItem, ...]
    confidence: float
    allow_generation: bool = True
    is_estimate: bool = False
    method: Optional[str] = None
    dish_name: Optional[str] = None
    category: Optional[str] = None
    tips: Optional[str] = None
    attempts: Tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        """Validate invariants after initialization."""
        if not self.items:
            raise ValueError("ProviderResult must contain at least one item")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(
                f"Confidence must be between 0.0 and 1.0, got {self.confidence}"
            )
