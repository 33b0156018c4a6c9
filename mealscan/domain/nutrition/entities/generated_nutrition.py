"""GeneratedNutrition - per-unit nutrition produced by the AI sub-call."""

from dataclasses import dataclass
from typing import Optional, Tuple

from .nutrition_vector import NutritionVector


@dataclass(frozen=True)
class GeneratedNutrition:
    """Per-piece nutrition and metadata for a food missing from the catalog."""

    per_unit_nutrition: NutritionVector
    weight_grams: Optional[int] = None
    category: str = "Food Item"
    health_score: float = 6.0
    ingredients: Tuple[str, ...] = ("mixed ingredients",)
    tips: str = "Enjoy as part of a balanced diet"

    def __post_init__(self) -> None:
        """Validate invariants after initialization."""
        if not 1 <= self.health_score <= 10:
            raise ValueError(
                f"Health score must be within [1, 10], got {self.health_score}"
            )
