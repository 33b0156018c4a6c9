"""Unit tests for the nutrition aggregation engine."""

from typing import Tuple

import pytest

from mealscan.domain.nutrition.catalog import default_catalog
from mealscan.domain.nutrition.entities.nutrition_vector import NutritionVector
from mealscan.domain.report.entities.report import NutritionSource, PortionSize, ResolvedItem
from mealscan.domain.report.services.aggregation import (
    NutritionAggregator,
    calculate_health_score,
    combined_food_name,
    merge_ingredients,
    quantity_tips,
)


def catalog_item(key: str, count: int) -> ResolvedItem:
    entry = default_catalog().get(key)
    assert entry is not None
    return ResolvedItem.build(
        name=entry.display_name,
        detected_name=entry.display_name,
        visible_count=count,
        per_unit_weight_grams=entry.weight_grams,
        per_unit_nutrition=entry.per_unit_nutrition,
        source=NutritionSource.CATALOG,
        category=entry.category,
        health_score=entry.health_score,
        ingredients=entry.ingredients,
        tips=entry.tips,
    )


def custom_item(
    name: str,
    count: int = 1,
    ingredients: Tuple[str, ...] = ("mixed ingredients",),
    source: NutritionSource = NutritionSource.HEURISTIC_FALLBACK,
    **nutrition: float,
) -> ResolvedItem:
    return ResolvedItem.build(
        name=name,
        detected_name=name,
        visible_count=count,
        per_unit_weight_grams=100,
        per_unit_nutrition=NutritionVector(**nutrition),
        source=source,
        category="Food Item",
        health_score=6.0,
        ingredients=ingredients,
        tips="",
    )


@pytest.fixture
def aggregator() -> NutritionAggregator:
    return NutritionAggregator()


class TestSingleItemReport:
    """Portion sizes and totals for one detected food."""

    def test_three_parathas(self, aggregator: NutritionAggregator) -> None:
        report = aggregator.aggregate(
            [catalog_item("paratha", 3)], 0.9, method="test", provider="test"
        )

        item = report.items[0]
        assert item.total_nutrition.calories == 540
        assert item.portion.size == PortionSize.MEDIUM
        assert item.portion.quantity == "3 pieces"
        assert item.portion.weight == "210g"
        assert report.food_name == "3 Plain Parathas"
        assert report.category == "Indian Bread"
        assert report.serving_size == "3 pieces total (210g)"
        assert report.nutrition.calories == 540
        assert report.health_score == 7.5
        assert report.tips == "Good portion size for a satisfying meal."
        assert not report.is_combo_meal

    def test_four_parathas_is_large(self, aggregator: NutritionAggregator) -> None:
        report = aggregator.aggregate(
            [catalog_item("paratha", 4)], 0.9, method="test", provider="test"
        )

        assert report.items[0].portion.size == PortionSize.LARGE
        assert report.nutrition.calories == 720
        assert report.health_score == 8.5

    def test_single_piece_is_small(self) -> None:
        assert catalog_item("paratha", 1).portion.size == PortionSize.SMALL

    def test_empty_items_rejected(self, aggregator: NutritionAggregator) -> None:
        with pytest.raises(ValueError):
            aggregator.aggregate([], 0.9, method="test", provider="test")


class TestComboReport:
    """Multi-item aggregation."""

    def test_paratha_and_bonda_combo(self, aggregator: NutritionAggregator) -> None:
        items = [catalog_item("paratha", 2), catalog_item("aloo_bonda", 1)]

        report = aggregator.aggregate(items, 0.85, method="m", provider="p")

        assert report.food_name == "Combo: Plain Paratha x2 + Aloo Bonda x1"
        assert report.category == "Combo Meal"
        assert report.serving_size == "3 pieces total (185g)"
        assert report.nutrition.calories == 480
        assert report.nutrition.protein == 10.5
        assert report.health_score == 6.5
        assert report.total_food_pieces == 3
        assert report.is_combo_meal
        assert report.dietary_info.is_vegetarian
        assert report.dietary_info.is_vegan
        assert not report.dietary_info.is_gluten_free
        assert report.dietary_info.is_balanced

    def test_grand_total_is_sum_of_item_totals(self, aggregator: NutritionAggregator) -> None:
        items = [catalog_item("dal_makhani", 1), catalog_item("butter_naan", 2), catalog_item("jeera_rice", 1)]

        report = aggregator.aggregate(items, 0.9, method="m", provider="p")

        expected = NutritionVector.sum(item.total_nutrition for item in items)
        assert report.nutrition == expected

    def test_overrides_replace_derived_fields(self, aggregator: NutritionAggregator) -> None:
        report = aggregator.aggregate(
            [catalog_item("paratha", 2)],
            0.6,
            method="Local Fallback",
            provider="Local Fallback",
            is_estimate=True,
            dish_name="Fixed Name",
            category="Fixed Category",
            tips="Fixed tips",
        )

        assert report.food_name == "Fixed Name"
        assert report.category == "Fixed Category"
        assert report.tips == "Fixed tips"
        assert report.is_estimate

    def test_combo_name_truncates_after_three(self) -> None:
        items = [custom_item(name, calories=100) for name in ("A", "B", "C", "D")]

        assert combined_food_name(items) == "Combo: A x1 + B x1 + C x1 + more"


class TestDietaryFlags:
    """Whole-word ingredient matching."""

    def test_meat_and_dairy_detected(self, aggregator: NutritionAggregator) -> None:
        item = custom_item("Butter Chicken", ingredients=("Chicken", "butter", "tomato"), calories=300)

        report = aggregator.aggregate([item], 0.9, method="m", provider="p")

        assert not report.dietary_info.is_vegetarian
        assert not report.dietary_info.is_vegan

    def test_substrings_do_not_count(self, aggregator: NutritionAggregator) -> None:
        item = custom_item("Baingan", ingredients=("eggplant", "buttermilk-free spices"), calories=120)

        report = aggregator.aggregate([item], 0.9, method="m", provider="p")

        assert report.dietary_info.is_vegetarian

    def test_plural_terms_count(self, aggregator: NutritionAggregator) -> None:
        item = custom_item("Omelette", ingredients=("eggs", "onion"), calories=200)

        report = aggregator.aggregate([item], 0.9, method="m", provider="p")

        assert not report.dietary_info.is_vegetarian


class TestHealthScore:
    """Score stays in [1, 10] with half-point steps."""

    def test_neutral_default(self) -> None:
        assert calculate_health_score(None) == 6.0
        assert calculate_health_score(NutritionVector()) == 6.0

    def test_all_bonuses(self) -> None:
        nutrition = NutritionVector(protein=30, fiber=10, iron=5, vitamin_c=20)

        assert calculate_health_score(nutrition) == 9.0

    def test_all_penalties(self) -> None:
        nutrition = NutritionVector(sodium=1500, calories=1200, fat=45, sugar=40)

        assert calculate_health_score(nutrition) == 3.5

    @pytest.mark.parametrize("calories", [0, 350, 801, 2500])
    @pytest.mark.parametrize("protein", [0, 16, 40])
    @pytest.mark.parametrize("sodium", [0, 900])
    def test_bounds_and_granularity(self, calories: float, protein: float, sodium: float) -> None:
        score = calculate_health_score(
            NutritionVector(calories=calories, protein=protein, sodium=sodium, fat=31, iron=4)
        )

        assert 1.0 <= score <= 10.0
        assert (score * 2) == int(score * 2)


class TestIngredientsAndTips:
    def test_merge_dedups_case_insensitively_and_caps(self) -> None:
        merged = merge_ingredients(
            [("Wheat Flour", "oil", "salt"), ("wheat flour", "Oil", "a", "b", "c", "d", "e", "f")]
        )

        assert merged == ("Wheat Flour", "oil", "salt", "a", "b", "c", "d", "e")

    def test_tips_for_large_high_protein_ai_meal(self) -> None:
        items = [
            custom_item("Grilled Tikka", count=6, source=NutritionSource.AI_GENERATED, calories=120, protein=3.5),
        ]
        total = NutritionVector.sum(item.total_nutrition for item in items)

        tips = quantity_tips(items, total)

        assert tips == (
            "Large meal - consider sharing or saving some for later. "
            "High protein content (21g) - great for muscle building. "
            "High-calorie meal - balance with lighter foods during the day. "
            "Nutrition data enhanced with AI analysis."
        )

    def test_default_tip(self) -> None:
        items = [custom_item("Apple", calories=80)]

        assert quantity_tips(items, items[0].total_nutrition) == "Enjoy your meal!"
