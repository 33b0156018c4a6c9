"""PackagedProduct entity - product facts from a barcode database."""

from dataclasses import dataclass
from typing import Optional, Tuple

from mealscan.domain.nutrition.entities.nutrition_vector import NutritionVector


@dataclass(frozen=True)
class PackagedProduct:
    """
    Entity: packaged food identified by barcode.

    Nutrition is per 100g (g for macros, mg for sodium, calcium, iron and
    vitamin C).

    Example:
        PackagedProduct(
            barcode="8001505005707",
            name="Galletti",
            brand="Mulino Bianco",
            nutrition_per_100g=NutritionVector(calories=450, protein=7.5),
        )
    """

    barcode: str
    name: str
    nutrition_per_100g: NutritionVector
    brand: Optional[str] = None
    labels: Tuple[str, ...] = ()
    ingredients_text: Optional[str] = None
    image_url: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate invariants after initialization."""
        if not self.barcode:
            raise ValueError("Barcode cannot be empty")
        if not self.name:
            raise ValueError("Product name cannot be empty")

    def has_label(self, label: str) -> bool:
        """Case-insensitive label check ("en:vegan" matches "Vegan")."""
        wanted = label.lower()
        for raw in self.labels:
            value = raw.lower()
            if value == wanted or value.split(":", 1)[-1] == wanted:
                return True
        return False

    def ingredient_list(self, limit: int = 8) -> Tuple[str, ...]:
        if not self.ingredients_text:
            return ()
        parts = [p.strip() for p in self.ingredients_text.split(",")]
        return tuple(p for p in parts if p)[:limit]

    def display_name(self) -> str:
        if self.brand:
            return f"{self.name} ({self.brand})"
        return self.name
