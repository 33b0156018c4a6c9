"""CatalogEntry entity - one known food in the local nutrition catalog."""

import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .nutrition_vector import NutritionVector

DEFAULT_WEIGHT_GRAMS = 100

_LEADING_INT = re.compile(r"^\s*(\d+)")


def parse_weight(value: Optional[Union[str, int, float]], default: int = DEFAULT_WEIGHT_GRAMS) -> int:
    """
    Parse a per-unit weight like "70g" into grams.

    Only a leading integer is honoured ("70g" -> 70, "150 g" -> 150,
    "1.5kg" -> 1). Anything without a leading integer, or a zero weight,
    yields the default.

    Example:
        >>> parse_weight("70g")
        70
        >>> parse_weight("about 2 pieces")
        100
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        grams = int(value)
        return grams if grams > 0 else default
    match = _LEADING_INT.match(value)
    if not match:
        return default
    grams = int(match.group(1))
    return grams if grams > 0 else default


@dataclass(frozen=True)
class CatalogEntry:
    """
    Entity: known food with per-unit nutrition.

    Invariants:
    - key is lowercase with no surrounding whitespace
    - weight_grams is positive
    - health_score is within [1, 10]
    """

    key: str
    display_name: str
    weight_grams: int
    per_unit_nutrition: NutritionVector
    category: str
    health_score: float
    ingredients: Tuple[str, ...]
    tips: str

    def __post_init__(self) -> None:
        """Validate invariants after initialization."""
        if not self.key or self.key != self.key.strip().lower():
            raise ValueError(f"Catalog key must be normalized lowercase, got {self.key!r}")
        if self.weight_grams <= 0:
            raise ValueError(f"Weight must be positive, got {self.weight_grams}")
        if not 1 <= self.health_score <= 10:
            raise ValueError(f"Health score must be within [1, 10], got {self.health_score}")

    @property
    def weight_label(self) -> str:
        return f"{self.weight_grams}g"
