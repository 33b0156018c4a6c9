"""Unit tests for NutritionVector and weight parsing."""

import pytest

from mealscan.domain.nutrition.entities.catalog_entry import parse_weight
from mealscan.domain.nutrition.entities.nutrition_vector import NutritionVector, round_field


class TestRounding:
    """Field-specific half-up rounding."""

    def test_decimal_fields_round_half_up(self) -> None:
        """2.25 rounds up to 2.3, not to the even 2.2."""
        assert round_field("protein", 2.25) == 2.3

    def test_integer_fields_round_to_whole_numbers(self) -> None:
        assert round_field("calories", 33.5) == 34.0
        assert round_field("sodium", 2.5) == 3.0
        assert round_field("calcium", 24.4) == 24.0

    def test_scale_applies_rounding(self) -> None:
        vector = NutritionVector(calories=180, protein=0.75, sodium=180)

        scaled = vector.scale(3)

        assert scaled.calories == 540
        assert scaled.protein == 2.3
        assert scaled.sodium == 540

    def test_sum_rounds_grand_total(self) -> None:
        total = NutritionVector.sum(
            [NutritionVector(calories=100.4, fat=1.04), NutritionVector(calories=100.4, fat=1.04)]
        )

        assert total.calories == 201
        assert total.fat == 2.1


class TestConstruction:
    """Validation and lenient construction."""

    def test_negative_values_rejected(self) -> None:
        with pytest.raises(ValueError, match="protein"):
            NutritionVector(protein=-1)

    def test_from_mapping_is_lenient(self) -> None:
        vector = NutritionVector.from_mapping(
            {"calories": "250", "protein": None, "fat": -3, "vitaminC": 12, "sugar": "n/a"}
        )

        assert vector.calories == 250
        assert vector.protein == 0
        assert vector.fat == 0
        assert vector.vitamin_c == 12
        assert vector.sugar == 0

    def test_to_dict_uses_camel_case_and_ints(self) -> None:
        data = NutritionVector(calories=180.0, sodium=180.0, vitamin_c=1.5).to_dict()

        assert data["calories"] == 180
        assert isinstance(data["calories"], int)
        assert data["vitaminC"] == 1.5
        assert "vitamin_c" not in data


class TestParseWeight:
    """Per-unit weight strings."""

    @pytest.mark.parametrize(
        "value,expected",
        [("70g", 70), ("150 g", 150), (" 45g", 45), (80, 80), ("1.5kg", 1)],
    )
    def test_leading_integer(self, value, expected) -> None:
        assert parse_weight(value) == expected

    @pytest.mark.parametrize("value", [None, "", "about two pieces", "0g", 0])
    def test_defaults_to_100g(self, value) -> None:
        assert parse_weight(value) == 100
