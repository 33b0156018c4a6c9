"""Nutrition aggregation engine.

Merges resolved items into one RecognitionReport: grand totals, combined
name, serving description, health score, dietary flags, ingredients and
tips. A separate path formats barcode products into the same shape.
"""

import logging
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional, Pattern, Sequence, Tuple

from mealscan.domain.barcode.entities.packaged_product import PackagedProduct
from mealscan.domain.nutrition.entities.nutrition_vector import NutritionVector
from mealscan.domain.report.entities.report import (
    DietaryInfo,
    NutritionSource,
    RecognitionReport,
    ResolvedItem,
    pieces_label,
    utc_now,
)

logger = logging.getLogger(__name__)

MAX_INGREDIENTS = 8
MAX_NAMED_COMBO_ITEMS = 3

DEFAULT_CATEGORY = "Food Item"
COMBO_CATEGORY = "Combo Meal"
DEFAULT_TIPS = "Enjoy your meal!"

BARCODE_CONFIDENCE = 0.95
BARCODE_CATEGORY = "Packaged Food"
BARCODE_METHOD = "Barcode Recognition"
BARCODE_TIPS = "Check product label for complete nutritional information"
BARCODE_PROVIDER = "OpenFoodFacts"


def _term_pattern(terms: Iterable[str]) -> Pattern[str]:
    alternatives = "|".join(re.escape(t) for t in terms)
    return re.compile(rf"\b(?:{alternatives})s?\b", re.IGNORECASE)


MEAT_TERMS = _term_pattern(
    ("chicken", "mutton", "meat", "egg", "fish", "lamb", "beef", "pork", "prawn", "shrimp")
)
DAIRY_TERMS = _term_pattern(
    ("butter", "ghee", "cream", "milk", "cheese", "paneer", "yogurt", "curd")
)
GLUTEN_TERMS = _term_pattern(("wheat", "flour", "bread"))


def round_half(value: float) -> float:
    """Round to the nearest 0.5 (half-up)."""
    doubled = Decimal(repr(float(value))) * 2
    return float(doubled.quantize(Decimal("1"), rounding=ROUND_HALF_UP) / 2)


def calculate_health_score(nutrition: Optional[NutritionVector]) -> float:
    """
    Meal health score on [1, 10] with half-point granularity.

    Example:
        >>> calculate_health_score(NutritionVector(protein=16, fiber=9))
        8.0
    """
    if nutrition is None:
        return 6.0
    score = 6.0
    if nutrition.protein > 15:
        score += 1
    if nutrition.fiber > 8:
        score += 1
    if nutrition.iron > 3:
        score += 0.5
    if nutrition.vitamin_c > 10:
        score += 0.5

    if nutrition.sodium > 800:
        score -= 1
    if nutrition.calories > 800:
        score -= 0.5
    if nutrition.fat > 30:
        score -= 0.5
    if nutrition.sugar > 25:
        score -= 0.5

    return max(1.0, min(10.0, round_half(score)))


def calculate_packaged_health_score(per_100g: NutritionVector) -> float:
    """Packaged-food score on a 5-point base (sodium in mg per 100g)."""
    score = 5
    if per_100g.protein > 10:
        score += 1
    if per_100g.fiber > 5:
        score += 1
    if per_100g.sodium < 300:
        score += 1
    if per_100g.sugar > 15:
        score -= 1
    if per_100g.fat > 20:
        score -= 1
    if per_100g.sodium > 800:
        score -= 2
    return float(max(1, min(10, score)))


def combined_food_name(items: Sequence[ResolvedItem]) -> str:
    """
    "Paratha" / "3 Parathas" for one item, "Combo: A x2 + B x1" otherwise.

    Only the first three items are named; the rest collapse into "+ more".
    """
    if len(items) == 1:
        item = items[0]
        if item.visible_count > 1:
            return f"{item.visible_count} {item.name}s"
        return item.name
    parts = [f"{item.name} x{item.visible_count}" for item in items[:MAX_NAMED_COMBO_ITEMS]]
    name = "Combo: " + " + ".join(parts)
    if len(items) > MAX_NAMED_COMBO_ITEMS:
        name += " + more"
    return name


def serving_description(items: Sequence[ResolvedItem]) -> str:
    pieces = sum(item.visible_count for item in items)
    weight = sum(item.total_weight_grams for item in items)
    return f"{pieces_label(pieces)} total ({weight}g)"


def combo_category(items: Sequence[ResolvedItem]) -> str:
    if len(items) == 1:
        return items[0].category or DEFAULT_CATEGORY
    return COMBO_CATEGORY


def _mentions(items: Sequence[ResolvedItem], pattern: Pattern[str]) -> bool:
    return any(pattern.search(ing) for item in items for ing in item.ingredients)


def dietary_info(items: Sequence[ResolvedItem], total: NutritionVector) -> DietaryInfo:
    has_meat = _mentions(items, MEAT_TERMS)
    has_dairy = _mentions(items, DAIRY_TERMS)
    has_gluten = _mentions(items, GLUTEN_TERMS)
    return DietaryInfo(
        is_vegetarian=not has_meat,
        is_vegan=not has_meat and not has_dairy,
        is_gluten_free=not has_gluten,
        is_high_protein=total.protein > 20,
        is_balanced=len(items) >= 2,
    )


def merge_ingredients(groups: Iterable[Iterable[str]], limit: int = MAX_INGREDIENTS) -> Tuple[str, ...]:
    """Ordered union of ingredient lists, case-insensitive dedup, capped."""
    seen = set()
    merged: List[str] = []
    for group in groups:
        for ingredient in group:
            key = ingredient.strip().lower()
            if not key or key in seen:
                continue
            seen.add(key)
            merged.append(ingredient.strip())
            if len(merged) >= limit:
                return tuple(merged)
    return tuple(merged)


def quantity_tips(items: Sequence[ResolvedItem], total: NutritionVector) -> str:
    tips: List[str] = []
    pieces = sum(item.visible_count for item in items)

    if pieces >= 6:
        tips.append("Large meal - consider sharing or saving some for later")
    elif pieces >= 3:
        tips.append("Good portion size for a satisfying meal")

    if total.protein > 20:
        tips.append(f"High protein content ({total.protein:g}g) - great for muscle building")

    if total.calories > 600:
        tips.append("High-calorie meal - balance with lighter foods during the day")

    if any(item.generated_by_ai for item in items):
        tips.append("Nutrition data enhanced with AI analysis")

    if not tips:
        return DEFAULT_TIPS
    return ". ".join(tips) + "."


class NutritionAggregator:
    """Build RecognitionReports from resolved items."""

    def aggregate(
        self,
        items: Sequence[ResolvedItem],
        confidence: float,
        user_provided: bool = False,
        *,
        method: str,
        provider: str,
        user_hint: Optional[str] = None,
        is_estimate: bool = False,
        dish_name: Optional[str] = None,
        category: Optional[str] = None,
        tips: Optional[str] = None,
    ) -> RecognitionReport:
        """
        Aggregate items into a report.

        Args:
            items: Resolved items (at least one)
            confidence: Recognition confidence (0.0 - 1.0)
            user_provided: Items were identified with a user hint
            method: Method label shown to the user
            provider: Provider that produced the items
            user_hint: Original hint text, echoed back
            is_estimate: Result comes from the deterministic fallback
            dish_name: Overrides the derived combined name
            category: Overrides the derived category
            tips: Overrides the derived tips

        Raises:
            ValueError: If items is empty
        """
        if not items:
            raise ValueError("Cannot aggregate an empty item list")

        total = NutritionVector.sum(item.total_nutrition for item in items)

        report = RecognitionReport(
            food_name=dish_name or combined_food_name(items),
            items=tuple(items),
            confidence=confidence,
            category=category or combo_category(items),
            serving_size=serving_description(items),
            nutrition=total,
            health_score=calculate_health_score(total),
            dietary_info=dietary_info(items, total),
            ingredients=merge_ingredients(item.ingredients for item in items),
            tips=tips or quantity_tips(items, total),
            method=method,
            provider=provider,
            timestamp=utc_now(),
            user_assisted=user_provided,
            is_estimate=is_estimate,
            user_hint=user_hint,
        )

        logger.debug(
            "Report aggregated",
            extra={
                "food_name": report.food_name,
                "items": report.item_count,
                "calories": total.calories,
                "health_score": report.health_score,
            },
        )
        return report

    def format_barcode_product(self, product: PackagedProduct) -> RecognitionReport:
        """Format a barcode product as a single-item report (per 100g)."""
        per_100g = product.nutrition_per_100g.rounded()
        health = calculate_packaged_health_score(per_100g)
        ingredients = product.ingredient_list(MAX_INGREDIENTS)

        item = ResolvedItem.build(
            name=product.name,
            detected_name=product.barcode,
            visible_count=1,
            per_unit_weight_grams=100,
            per_unit_nutrition=per_100g,
            source=NutritionSource.BARCODE_DB,
            category=BARCODE_CATEGORY,
            health_score=health,
            ingredients=ingredients,
            tips=BARCODE_TIPS,
        )

        dietary = DietaryInfo(
            is_vegetarian=product.has_label("vegetarian") or product.has_label("vegan"),
            is_vegan=product.has_label("vegan"),
            is_gluten_free=product.has_label("gluten-free") or product.has_label("no-gluten"),
            is_high_protein=per_100g.protein > 15,
            is_balanced=False,
            is_low_carb=per_100g.carbs < 10,
        )

        return RecognitionReport(
            food_name=product.name,
            items=(item,),
            confidence=BARCODE_CONFIDENCE,
            category=BARCODE_CATEGORY,
            serving_size="100g",
            nutrition=per_100g,
            health_score=health,
            dietary_info=dietary,
            ingredients=ingredients,
            tips=BARCODE_TIPS,
            method=BARCODE_METHOD,
            provider=BARCODE_PROVIDER,
            timestamp=utc_now(),
            brand=product.brand or "Unknown Brand",
            barcode=product.barcode,
        )
