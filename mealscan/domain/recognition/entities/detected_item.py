"""DetectedItem entity - one food reported by a recognition provider."""

from dataclasses import dataclass
from typing import Optional

MIN_VISIBLE_COUNT = 1
MAX_VISIBLE_COUNT = 20


@dataclass(frozen=True)
class DetectedItem:
    """
    Entity: food name and visible piece count as reported by a provider.

    The name is kept exactly as the provider wrote it; the resolver decides
    how it maps to catalog data.

    Example:
        DetectedItem(food_name="Chapati", visible_count=2, per_unit_weight_hint="50g")
    """

    food_name: str
    visible_count: int = 1
    per_unit_weight_hint: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate invariants after initialization."""
        if not self.food_name or not self.food_name.strip():
            raise ValueError("Food name must be non-empty")
        if not MIN_VISIBLE_COUNT <= self.visible_count <= MAX_VISIBLE_COUNT:
            raise ValueError(
                f"Visible count must be within [{MIN_VISIBLE_COUNT}, {MAX_VISIBLE_COUNT}], "
                f"got {self.visible_count}"
            )
