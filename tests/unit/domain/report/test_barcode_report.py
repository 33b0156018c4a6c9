"""Unit tests for barcode product formatting."""

import pytest

from mealscan.domain.barcode.entities.packaged_product import PackagedProduct
from mealscan.domain.nutrition.entities.nutrition_vector import NutritionVector
from mealscan.domain.report.entities.report import NutritionSource
from mealscan.domain.report.services.aggregation import (
    NutritionAggregator,
    calculate_packaged_health_score,
)


@pytest.fixture
def biscuits() -> PackagedProduct:
    return PackagedProduct(
        barcode="8001505005707",
        name="Galletti Biscuits",
        brand="Mulino Bianco",
        nutrition_per_100g=NutritionVector(
            calories=450.3, protein=7.5, carbs=70, fat=15, fiber=3, sugar=22, sodium=200
        ),
        labels=("en:vegetarian", "en:palm-oil-free"),
        ingredients_text="wheat flour, sugar, butter, eggs",
    )


class TestFormatBarcodeProduct:
    """Single-item per-100g report."""

    def test_report_fields(self, biscuits: PackagedProduct) -> None:
        report = NutritionAggregator().format_barcode_product(biscuits)

        assert report.food_name == "Galletti Biscuits"
        assert report.confidence == 0.95
        assert report.category == "Packaged Food"
        assert report.serving_size == "100g"
        assert report.method == "Barcode Recognition"
        assert report.provider == "OpenFoodFacts"
        assert report.brand == "Mulino Bianco"
        assert report.barcode == "8001505005707"
        assert report.nutrition.calories == 450
        assert report.ingredients == ("wheat flour", "sugar", "butter", "eggs")
        assert report.health_score == 5.0

    def test_single_barcode_item(self, biscuits: PackagedProduct) -> None:
        report = NutritionAggregator().format_barcode_product(biscuits)

        assert report.item_count == 1
        item = report.items[0]
        assert item.source == NutritionSource.BARCODE_DB
        assert item.per_unit_weight_grams == 100
        assert item.visible_count == 1

    def test_dietary_flags_from_labels(self, biscuits: PackagedProduct) -> None:
        dietary = NutritionAggregator().format_barcode_product(biscuits).dietary_info

        assert dietary.is_vegetarian
        assert not dietary.is_vegan
        assert not dietary.is_gluten_free
        assert not dietary.is_high_protein
        assert dietary.is_low_carb is False

    def test_vegan_gluten_free_high_protein(self) -> None:
        product = PackagedProduct(
            barcode="123",
            name="Pea Protein Crisps",
            nutrition_per_100g=NutritionVector(calories=380, protein=22, carbs=8),
            labels=("Vegan", "en:no-gluten"),
        )

        report = NutritionAggregator().format_barcode_product(product)

        assert report.dietary_info.is_vegetarian
        assert report.dietary_info.is_vegan
        assert report.dietary_info.is_gluten_free
        assert report.dietary_info.is_high_protein
        assert report.dietary_info.is_low_carb is True
        assert report.brand == "Unknown Brand"
        assert report.to_dict()["brand"] == "Unknown Brand"
        assert report.to_dict()["barcode"] == "123"


class TestPackagedHealthScore:
    """Five-point base, sodium in mg per 100g."""

    def test_low_sodium_bonus(self) -> None:
        assert calculate_packaged_health_score(NutritionVector(sodium=120)) == 6.0

    def test_high_sodium_penalty(self) -> None:
        assert calculate_packaged_health_score(NutritionVector(sodium=900, protein=12)) == 4.0

    def test_clamped_to_one(self) -> None:
        score = calculate_packaged_health_score(NutritionVector(sodium=1200, sugar=40, fat=35))

        assert score == 1.0
