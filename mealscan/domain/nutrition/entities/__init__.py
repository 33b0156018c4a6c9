"""Nutrition domain entities."""

from mealscan.domain.nutrition.entities.catalog_entry import CatalogEntry, parse_weight
from mealscan.domain.nutrition.entities.generated_nutrition import GeneratedNutrition
from mealscan.domain.nutrition.entities.nutrition_vector import NutritionVector

__all__ = ["CatalogEntry", "GeneratedNutrition", "NutritionVector", "parse_weight"]
