"""Pydantic models validating AI nutrition generation output.

The generator asks for a bare JSON object; these models accept the
camelCase keys from the prompt and tolerate missing or malformed fields.
"""

from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class GeneratedNutritionPayload(BaseModel):
    """
    Per-piece nutrition returned by the generation prompt.

    Maps to domain entity GeneratedNutrition.
    """

    model_config = ConfigDict(extra="ignore")

    per_unit_nutrition: Dict[str, Any] = Field(
        ...,
        validation_alias=AliasChoices("perUnitNutrition", "per_unit_nutrition", "nutrition"),
        description="calories, protein, carbs, fat, fiber, sugar, sodium, iron, calcium, vitaminC",
    )
    standard_weight: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("standardWeight", "standard_weight"),
    )
    category: Optional[str] = None
    health_score: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("healthScore", "health_score"),
    )
    ingredients: List[str] = Field(default_factory=list)
    tips: Optional[str] = None

    @field_validator("standard_weight", mode="before")
    @classmethod
    def _weight(cls, value: Any) -> Optional[str]:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return f"{int(value)}g"
        return value if isinstance(value, str) else None

    @field_validator("health_score", mode="before")
    @classmethod
    def _health(cls, value: Any) -> Optional[float]:
        try:
            score = float(value)
        except (TypeError, ValueError):
            return None
        return max(1.0, min(10.0, score))

    @field_validator("ingredients", mode="before")
    @classmethod
    def _ingredients(cls, value: Any) -> List[str]:
        if isinstance(value, str):
            value = value.split(",")
        if not isinstance(value, list):
            return []
        return [str(v).strip() for v in value if str(v).strip()]

    @field_validator("category", "tips", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Optional[str]:
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None
