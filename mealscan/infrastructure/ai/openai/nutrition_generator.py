"""OpenAI nutrition generator - implements INutritionGenerator.

One text-only completion per food, wrapped in the shared RetryPolicy.
Every failure mode ends in `None` so the caller falls back to the
category estimate.
"""

import asyncio
import logging
from typing import Optional

from openai import APIError, AsyncOpenAI
from pydantic import ValidationError

from mealscan.domain.errors import MealScanError, ParseError, TransientProviderError
from mealscan.domain.nutrition.entities.catalog_entry import parse_weight
from mealscan.domain.nutrition.entities.generated_nutrition import GeneratedNutrition
from mealscan.domain.nutrition.entities.nutrition_vector import NutritionVector
from mealscan.domain.recognition.prompts import build_nutrition_prompt
from mealscan.domain.recognition.services.text_extractor import extract_object
from mealscan.infrastructure.ai.openai.errors import classify_openai_error
from mealscan.infrastructure.ai.openai.models import GeneratedNutritionPayload
from mealscan.infrastructure.ai.retry import RetryPolicy
from mealscan.metrics import recognition as metrics

logger = logging.getLogger(__name__)

PROVIDER_NAME = "OpenAI Nutrition"


class OpenAINutritionGenerator:
    """
    Generate per-piece nutrition for foods missing from the catalog.

    Example:
        >>> generator = OpenAINutritionGenerator(AsyncOpenAI(api_key="sk-..."))
        >>> result = await generator.generate("Margherita Pizza", 2, "150g")
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str = "gpt-4o-mini",
        *,
        retry_policy: Optional[RetryPolicy] = None,
        timeout_s: float = 25.0,
        temperature: float = 0.1,
        max_tokens: int = 600,
    ):
        self._client = client
        self._model = model
        self._retry = retry_policy or RetryPolicy()
        self._timeout_s = timeout_s
        self._temperature = temperature
        self._max_tokens = max_tokens

    async def generate(
        self, food_name: str, quantity: int, weight_hint: str
    ) -> Optional[GeneratedNutrition]:
        prompt = build_nutrition_prompt(food_name, quantity, weight_hint)
        try:
            text = await self._retry.run(lambda: self._complete(prompt))
            result = self._parse(text, weight_hint)
        except (MealScanError, ValidationError, ValueError) as exc:
            logger.warning(
                "Nutrition generation failed",
                extra={"food_name": food_name, "error": str(exc)},
            )
            metrics.record_generation("failed")
            return None

        metrics.record_generation("success")
        logger.info(
            "Nutrition generated",
            extra={"food_name": food_name, "calories": result.per_unit_nutrition.calories},
        )
        return result

    async def _complete(self, prompt: str) -> str:
        try:
            completion = await asyncio.wait_for(
                self._client.chat.completions.create(
                    model=self._model,
                    messages=[{"role": "user", "content": prompt}],
                    temperature=self._temperature,
                    max_tokens=self._max_tokens,
                    response_format={"type": "json_object"},
                ),
                timeout=self._timeout_s,
            )
        except asyncio.TimeoutError as exc:
            raise TransientProviderError(PROVIDER_NAME, "timeout") from exc
        except APIError as exc:
            raise classify_openai_error(exc, PROVIDER_NAME) from exc

        if not completion.choices:
            raise TransientProviderError(PROVIDER_NAME, "empty output")
        content = completion.choices[0].message.content
        if not content or not content.strip():
            raise TransientProviderError(PROVIDER_NAME, "empty output")
        return content

    @staticmethod
    def _parse(text: str, weight_hint: str) -> GeneratedNutrition:
        payload = GeneratedNutritionPayload.model_validate(extract_object(text))
        nutrition = NutritionVector.from_mapping(payload.per_unit_nutrition)
        if nutrition.calories <= 0:
            raise ParseError("NO_CALORIES", "generated nutrition has no calories")

        weight = parse_weight(payload.standard_weight, default=0) or parse_weight(weight_hint)
        return GeneratedNutrition(
            per_unit_nutrition=nutrition,
            weight_grams=weight,
            category=payload.category or "Food Item",
            health_score=payload.health_score if payload.health_score is not None else 6.0,
            ingredients=tuple(payload.ingredients) or ("mixed ingredients",),
            tips=payload.tips or "Enjoy as part of a balanced diet",
        )
