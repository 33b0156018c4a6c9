"""Category based nutrition estimate for foods nothing else could resolve.

Keyword classification mirrors the regex token maps used for meal
categorisation: first matching category wins, `default` otherwise.
Values are representative per-unit figures, not measurements.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Pattern, Tuple

from ..entities.nutrition_vector import NutritionVector
from .resolver import estimate_weight

FALLBACK_CATEGORY = "Food Item"
FALLBACK_HEALTH_SCORE = 6.0
FALLBACK_INGREDIENTS: Tuple[str, ...] = ("mixed ingredients",)
FALLBACK_TIPS = "Nutrition estimated based on similar foods"

# Ordered: "dal makhani rice" is rice, "paneer butter masala" is dairy.
TOKEN_MAP: List[Tuple[str, Pattern[str]]] = [
    ("fast-food", re.compile(r"\b(pizza|burger|sandwich|fries|pasta|noodles|hot ?dog|wrap|nuggets?)\b")),
    ("rice", re.compile(r"\b(rice|biryani|pulao|khichdi|risotto)\b")),
    ("dal", re.compile(r"\b(dal|daal|dhal|lentils?|sambar|rajma|chana|chole)\b")),
    ("meat", re.compile(r"\b(chicken|mutton|lamb|beef|pork|fish|prawns?|shrimp|keema|egg|eggs|meat)\b")),
    ("dairy", re.compile(r"\b(paneer|cheese|curd|yogurt|yoghurt|raita|lassi|milk|kheer)\b")),
    ("chutney", re.compile(r"\b(chutney|sauce|dip|salsa|ketchup)\b")),
    ("pickle", re.compile(r"\b(pickle|achar|achaar)\b")),
    ("fat", re.compile(r"\b(butter|ghee|oil|cream|mayonnaise|mayo)\b")),
    ("curry", re.compile(r"\b(curry|masala|sabzi|sabji|gravy|korma|kofta|bhaji|stew)\b")),
]

CATEGORY_NUTRITION: Dict[str, NutritionVector] = {
    "rice": NutritionVector(
        calories=190, protein=4.0, carbs=38, fat=2.5, fiber=1.0,
        sugar=0.5, sodium=200, iron=1.2, calcium=20, vitamin_c=0,
    ),
    "dal": NutritionVector(
        calories=165, protein=10.5, carbs=23, fat=4.5, fiber=8.0,
        sugar=3, sodium=320, iron=4.0, calcium=50, vitamin_c=3,
    ),
    "curry": NutritionVector(
        calories=170, protein=5.0, carbs=18, fat=8.5, fiber=4.5,
        sugar=6, sodium=350, iron=2.2, calcium=60, vitamin_c=18,
    ),
    "chutney": NutritionVector(
        calories=45, protein=1.0, carbs=8, fat=1.2, fiber=1.5,
        sugar=5, sodium=190, iron=0.6, calcium=15, vitamin_c=10,
    ),
    "pickle": NutritionVector(
        calories=30, protein=0.3, carbs=2, fat=2.5, fiber=0.8,
        sugar=1, sodium=480, iron=0.4, calcium=8, vitamin_c=2,
    ),
    "dairy": NutritionVector(
        calories=220, protein=12.0, carbs=10, fat=15, fiber=1.0,
        sugar=6, sodium=280, iron=0.8, calcium=250, vitamin_c=2,
    ),
    "fat": NutritionVector(
        calories=90, protein=0.1, carbs=0, fat=10, fiber=0,
        sugar=0, sodium=40, iron=0, calcium=3, vitamin_c=0,
    ),
    "meat": NutritionVector(
        calories=240, protein=22.0, carbs=6, fat=14, fiber=1.0,
        sugar=2, sodium=420, iron=2.5, calcium=35, vitamin_c=4,
    ),
    "fast-food": NutritionVector(
        calories=280, protein=12.0, carbs=31, fat=12, fiber=2.0,
        sugar=4, sodium=520, iron=2.4, calcium=120, vitamin_c=2,
    ),
    "default": NutritionVector(
        calories=200, protein=8.0, carbs=28, fat=7, fiber=3.0,
        sugar=5, sodium=300, iron=1.8, calcium=60, vitamin_c=5,
    ),
}


def classify_food(food_name: str) -> str:
    """Return the fallback category for a food name."""
    text = (food_name or "").lower()
    for category, pattern in TOKEN_MAP:
        if pattern.search(text):
            return category
    return "default"


@dataclass(frozen=True)
class CategoryEstimate:
    """Per-unit estimate produced by the category fallback."""

    display_name: str
    food_type: str
    weight_grams: int
    per_unit_nutrition: NutritionVector
    category: str = FALLBACK_CATEGORY
    health_score: float = FALLBACK_HEALTH_SCORE
    ingredients: Tuple[str, ...] = FALLBACK_INGREDIENTS
    tips: str = FALLBACK_TIPS


def estimate_by_category(food_name: str) -> CategoryEstimate:
    food_type = classify_food(food_name)
    return CategoryEstimate(
        display_name=food_name,
        food_type=food_type,
        weight_grams=estimate_weight(food_name or ""),
        per_unit_nutrition=CATEGORY_NUTRITION[food_type],
    )
