"""Report entities - resolved items and the final recognition report.

`to_dict()` renders the camelCase shape the mobile UI consumes.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from mealscan.domain.nutrition.entities.nutrition_vector import NutritionVector


class NutritionSource(str, Enum):
    """Where an item's per-unit nutrition came from."""

    CATALOG = "catalog"
    AI_GENERATED = "ai-generated"
    HEURISTIC_FALLBACK = "heuristic-fallback"
    BARCODE_DB = "barcode-db"


class PortionSize(str, Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


def pieces_label(count: int) -> str:
    return f"{count} piece{'s' if count != 1 else ''}"


@dataclass(frozen=True)
class Portion:
    """Portion descriptor shown next to each item."""

    size: PortionSize
    quantity: str
    weight: str

    @classmethod
    def for_count(cls, count: int, per_unit_weight_grams: int) -> "Portion":
        """
        count > 3 is Large, count > 1 is Medium, otherwise Small.

        Example:
            >>> Portion.for_count(3, 70)
            Portion(size=<PortionSize.MEDIUM: 'Medium'>, quantity='3 pieces', weight='210g')
        """
        if count > 3:
            size = PortionSize.LARGE
        elif count > 1:
            size = PortionSize.MEDIUM
        else:
            size = PortionSize.SMALL
        return cls(
            size=size,
            quantity=pieces_label(count),
            weight=f"{per_unit_weight_grams * count}g",
        )

    def to_dict(self) -> Dict[str, str]:
        return {"size": self.size.value, "quantity": self.quantity, "weight": self.weight}


@dataclass(frozen=True)
class ResolvedItem:
    """
    Entity: detected item with concrete nutrition.

    Invariants:
    - total_nutrition == per_unit_nutrition.scale(visible_count)
    - total_weight_grams == per_unit_weight_grams * visible_count
    """

    name: str
    detected_name: str
    visible_count: int
    per_unit_weight_grams: int
    per_unit_nutrition: NutritionVector
    total_nutrition: NutritionVector
    source: NutritionSource
    category: str
    health_score: float
    ingredients: Tuple[str, ...]
    tips: str
    portion: Portion
    user_provided: bool = False

    @classmethod
    def build(
        cls,
        *,
        name: str,
        detected_name: str,
        visible_count: int,
        per_unit_weight_grams: int,
        per_unit_nutrition: NutritionVector,
        source: NutritionSource,
        category: str,
        health_score: float,
        ingredients: Tuple[str, ...],
        tips: str,
        user_provided: bool = False,
    ) -> "ResolvedItem":
        """Create an item, deriving totals and the portion from the count."""
        per_unit = per_unit_nutrition.rounded()
        return cls(
            name=name,
            detected_name=detected_name,
            visible_count=visible_count,
            per_unit_weight_grams=per_unit_weight_grams,
            per_unit_nutrition=per_unit,
            total_nutrition=per_unit.scale(visible_count),
            source=source,
            category=category,
            health_score=health_score,
            ingredients=tuple(ingredients),
            tips=tips,
            portion=Portion.for_count(visible_count, per_unit_weight_grams),
            user_provided=user_provided,
        )

    @property
    def total_weight_grams(self) -> int:
        return self.per_unit_weight_grams * self.visible_count

    @property
    def generated_by_ai(self) -> bool:
        return self.source == NutritionSource.AI_GENERATED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "detectedName": self.detected_name,
            "visibleCount": self.visible_count,
            "perUnitWeight": f"{self.per_unit_weight_grams}g",
            "totalWeight": f"{self.total_weight_grams}g",
            "perUnitNutrition": self.per_unit_nutrition.to_dict(),
            "totalNutrition": self.total_nutrition.to_dict(),
            "source": self.source.value,
            "generatedByAI": self.generated_by_ai,
            "userProvided": self.user_provided,
            "category": self.category,
            "healthScore": self.health_score,
            "ingredients": list(self.ingredients),
            "tips": self.tips,
            "portion": self.portion.to_dict(),
        }


@dataclass(frozen=True)
class DietaryInfo:
    is_vegetarian: bool
    is_vegan: bool
    is_gluten_free: bool
    is_high_protein: bool
    is_balanced: bool = False
    is_low_carb: Optional[bool] = None

    def to_dict(self) -> Dict[str, bool]:
        out = {
            "isVegetarian": self.is_vegetarian,
            "isVegan": self.is_vegan,
            "isGlutenFree": self.is_gluten_free,
            "isHighProtein": self.is_high_protein,
            "isBalanced": self.is_balanced,
        }
        if self.is_low_carb is not None:
            out["isLowCarb"] = self.is_low_carb
        return out


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class RecognitionReport:
    """
    Entity: complete output of one recognition request.

    Invariants:
    - nutrition is the rounded field-wise sum of item totals
    - health_score is within [1, 10]
    - ingredients holds at most 8 unique entries
    """

    food_name: str
    items: Tuple[ResolvedItem, ...]
    confidence: float
    category: str
    serving_size: str
    nutrition: NutritionVector
    health_score: float
    dietary_info: DietaryInfo
    ingredients: Tuple[str, ...]
    tips: str
    method: str
    provider: str
    timestamp: datetime
    user_assisted: bool = False
    is_estimate: bool = False
    user_hint: Optional[str] = None
    brand: Optional[str] = None
    barcode: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate invariants after initialization."""
        if not self.items:
            raise ValueError("Report must contain at least one item")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be between 0.0 and 1.0, got {self.confidence}")
        if not 1 <= self.health_score <= 10:
            raise ValueError(f"Health score must be within [1, 10], got {self.health_score}")
        if len(self.ingredients) > 8:
            raise ValueError("Report ingredients are limited to 8 entries")

    @property
    def is_combo_meal(self) -> bool:
        return len(self.items) > 1

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def total_food_pieces(self) -> int:
        return sum(item.visible_count for item in self.items)

    @property
    def has_ai_generated_nutrition(self) -> bool:
        return any(item.generated_by_ai for item in self.items)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "foodName": self.food_name,
            "isComboMeal": self.is_combo_meal,
            "itemCount": self.item_count,
            "totalFoodPieces": self.total_food_pieces,
            "individualItems": [item.to_dict() for item in self.items],
            "confidence": self.confidence,
            "category": self.category,
            "servingSize": self.serving_size,
            "nutrition": self.nutrition.to_dict(),
            "healthScore": self.health_score,
            "dietaryInfo": self.dietary_info.to_dict(),
            "ingredients": list(self.ingredients),
            "tips": self.tips,
            "method": self.method,
            "usedModel": self.provider,
            "timestamp": self.timestamp.isoformat(),
            "userAssisted": self.user_assisted,
            "hasAIGeneratedNutrition": self.has_ai_generated_nutrition,
            "isEstimate": self.is_estimate,
        }
        if self.user_hint is not None:
            out["userInput"] = self.user_hint
        if self.brand is not None:
            out["brand"] = self.brand
        if self.barcode is not None:
            out["barcode"] = self.barcode
        return out
