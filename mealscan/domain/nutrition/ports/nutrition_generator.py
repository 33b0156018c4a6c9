"""Port (interface) for AI nutrition generation.

Used for foods the local catalog does not know. Implementations must never
raise for provider failures: `None` means "use the category fallback".
"""

from typing import Optional, Protocol

from mealscan.domain.nutrition.entities.generated_nutrition import GeneratedNutrition


class INutritionGenerator(Protocol):
    """
    Interface for nutrition generators.

    Implementations can be:
    - OpenAI chat completions (default)
    - Mock generator (for testing)
    """

    async def generate(
        self, food_name: str, quantity: int, weight_hint: str
    ) -> Optional[GeneratedNutrition]:
        """
        Generate per-piece nutrition for one food.

        Args:
            food_name: Name exactly as reported by the recognition provider
            quantity: Visible piece count (context for the model only)
            weight_hint: Estimated weight per piece (e.g. "150g")

        Returns:
            GeneratedNutrition, or None when generation failed after retries

        Example:
            >>> result = await generator.generate("Margherita Pizza", 2, "150g")
            >>> result.per_unit_nutrition.calories if result else None
            266.0
        """
        ...
