"""NutritionVector value object - ten nutrient fields for a food amount.

Rounding follows the mobile client: calories, sodium and calcium are whole
numbers, every other field keeps one decimal. Rounding is half-up so that
2.25 becomes 2.3 (Python's round() would give 2.2).
"""

from dataclasses import dataclass, fields
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, Mapping

INTEGER_FIELDS = frozenset({"calories", "sodium", "calcium"})

# snake_case field -> camelCase key used by UI collaborators
_CAMEL = {"vitamin_c": "vitaminC"}


def round_field(name: str, value: float) -> float:
    """Round a single nutrient value with its field-specific rule."""
    quantum = Decimal("1") if name in INTEGER_FIELDS else Decimal("0.1")
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    if name in INTEGER_FIELDS:
        return float(int(rounded))
    return float(rounded)


def _coerce(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if number != number or number < 0:  # NaN or negative
        return 0.0
    return number


@dataclass(frozen=True)
class NutritionVector:
    """
    Value Object: nutrient amounts (g for macros, mg for minerals/vitamins).

    Example:
        >>> paratha = NutritionVector(calories=180, protein=4.0, carbs=28)
        >>> paratha.scale(3).calories
        540.0
    """

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0
    iron: float = 0.0
    calcium: float = 0.0
    vitamin_c: float = 0.0

    def __post_init__(self) -> None:
        """Validate invariants after initialization."""
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise ValueError(f"{f.name} must be non-negative, got {value}")

    @classmethod
    def field_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "NutritionVector":
        """
        Build a vector from a loosely typed mapping (model output, JSON).

        Missing or invalid values become 0 and negatives are clamped to 0.
        Accepts both `vitamin_c` and `vitaminC` keys.
        """
        values: Dict[str, float] = {}
        for name in cls.field_names():
            raw = data.get(name)
            if raw is None and name in _CAMEL:
                raw = data.get(_CAMEL[name])
            values[name] = _coerce(raw)
        return cls(**values)

    def rounded(self) -> "NutritionVector":
        return NutritionVector(
            **{name: round_field(name, getattr(self, name)) for name in self.field_names()}
        )

    def scale(self, count: float) -> "NutritionVector":
        """Multiply every field by count and apply field rounding."""
        if count < 0:
            raise ValueError(f"Scale factor must be non-negative, got {count}")
        return NutritionVector(
            **{
                name: round_field(name, getattr(self, name) * count)
                for name in self.field_names()
            }
        )

    def __add__(self, other: "NutritionVector") -> "NutritionVector":
        if not isinstance(other, NutritionVector):
            return NotImplemented
        return NutritionVector(
            **{
                name: getattr(self, name) + getattr(other, name)
                for name in self.field_names()
            }
        )

    @classmethod
    def sum(cls, vectors: Iterable["NutritionVector"]) -> "NutritionVector":
        """Field-wise sum of vectors, rounded with the field rules."""
        total = cls()
        for vector in vectors:
            total = total + vector
        return total.rounded()

    def to_dict(self) -> Dict[str, float]:
        out: Dict[str, float] = {}
        for name in self.field_names():
            value = getattr(self, name)
            if name in INTEGER_FIELDS:
                out[_CAMEL.get(name, name)] = int(value)
            else:
                out[_CAMEL.get(name, name)] = value
        return out
