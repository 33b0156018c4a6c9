"""Nutrition domain ports (interfaces)."""

from mealscan.domain.nutrition.ports.nutrition_generator import INutritionGenerator

__all__ = ["INutritionGenerator"]
