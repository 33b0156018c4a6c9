"""Domain service turning detected items into resolved items.

Cascade per item:

1. Local catalog (resolver exact/compound/partial passes)
2. AI nutrition generation (only for catalog misses)
3. Category fallback (generation disabled, failed or returned None)

Generation sub-calls for one request run concurrently and are joined
before any item is built; each failure degrades only its own item.
"""

import asyncio
import logging
from typing import List, Optional, Sequence, Tuple

from mealscan.domain.nutrition.entities.catalog_entry import CatalogEntry, parse_weight
from mealscan.domain.nutrition.entities.generated_nutrition import GeneratedNutrition
from mealscan.domain.nutrition.ports.nutrition_generator import INutritionGenerator
from mealscan.domain.nutrition.services.category_fallback import estimate_by_category
from mealscan.domain.nutrition.services.resolver import GenerationStub, NutritionResolver
from mealscan.domain.recognition.entities.detected_item import DetectedItem
from mealscan.domain.report.entities.report import NutritionSource, ResolvedItem

logger = logging.getLogger(__name__)


class NutritionEnrichmentService:
    """
    Resolve detected items to concrete nutrition.

    Example:
        >>> service = NutritionEnrichmentService(NutritionResolver(), generator)
        >>> items = await service.resolve_items([DetectedItem("Paratha", 3)])
        >>> items[0].total_nutrition.calories
        540.0
    """

    def __init__(
        self,
        resolver: NutritionResolver,
        generator: Optional[INutritionGenerator] = None,
    ):
        """
        Initialize enrichment service.

        Args:
            resolver: Catalog resolver
            generator: AI nutrition generator; None disables generation
        """
        self._resolver = resolver
        self._generator = generator

    async def resolve_items(
        self,
        items: Sequence[DetectedItem],
        *,
        allow_generation: bool = True,
        user_provided: bool = False,
    ) -> List[ResolvedItem]:
        """
        Resolve every item, generating nutrition for catalog misses.

        Args:
            items: Detected items in provider order
            allow_generation: False skips the AI sub-call (category fallback only)
            user_provided: Mark items as identified with a user hint

        Returns:
            Resolved items, same order as the input
        """
        resolutions = [self._resolver.resolve(item.food_name) for item in items]

        pending: List[Tuple[int, DetectedItem, GenerationStub]] = [
            (idx, item, res)
            for idx, (item, res) in enumerate(zip(items, resolutions))
            if isinstance(res, GenerationStub)
        ]

        generated: List[Optional[GeneratedNutrition]] = [None] * len(items)
        if pending and allow_generation and self._generator is not None:
            results = await self._generate_all(self._generator, pending)
            for (idx, _, _), result in zip(pending, results):
                generated[idx] = result

        resolved: List[ResolvedItem] = []
        for idx, (item, res) in enumerate(zip(items, resolutions)):
            if isinstance(res, CatalogEntry):
                resolved.append(self._from_catalog(item, res, user_provided))
            elif generated[idx] is not None:
                resolved.append(self._from_generated(item, res, generated[idx], user_provided))
            else:
                resolved.append(self._from_category(item, res, user_provided))
        return resolved

    async def _generate_all(
        self,
        generator: INutritionGenerator,
        pending: Sequence[Tuple[int, DetectedItem, GenerationStub]],
    ) -> List[Optional[GeneratedNutrition]]:
        tasks = [
            generator.generate(
                item.food_name,
                item.visible_count,
                item.per_unit_weight_hint or f"{stub.estimated_weight_grams}g",
            )
            for _, item, stub in pending
        ]
        logger.info("Generating nutrition", extra={"count": len(tasks)})
        results = await asyncio.gather(*tasks, return_exceptions=True)

        out: List[Optional[GeneratedNutrition]] = []
        for (_, item, _), result in zip(pending, results):
            if isinstance(result, BaseException):
                if isinstance(result, asyncio.CancelledError):
                    raise result
                # Generators should return None on failure; keep the item alive anyway.
                logger.warning(
                    "Nutrition generator raised",
                    extra={"food_name": item.food_name, "error": str(result)},
                )
                out.append(None)
            else:
                out.append(result)
        return out

    @staticmethod
    def _from_catalog(item: DetectedItem, entry: CatalogEntry, user_provided: bool) -> ResolvedItem:
        return ResolvedItem.build(
            name=entry.display_name,
            detected_name=item.food_name,
            visible_count=item.visible_count,
            per_unit_weight_grams=entry.weight_grams,
            per_unit_nutrition=entry.per_unit_nutrition,
            source=NutritionSource.CATALOG,
            category=entry.category,
            health_score=entry.health_score,
            ingredients=entry.ingredients,
            tips=entry.tips,
            user_provided=user_provided,
        )

    @staticmethod
    def _from_generated(
        item: DetectedItem,
        stub: GenerationStub,
        generated: GeneratedNutrition,
        user_provided: bool,
    ) -> ResolvedItem:
        weight = generated.weight_grams or parse_weight(
            item.per_unit_weight_hint, default=stub.estimated_weight_grams
        )
        return ResolvedItem.build(
            name=stub.display_name,
            detected_name=item.food_name,
            visible_count=item.visible_count,
            per_unit_weight_grams=weight,
            per_unit_nutrition=generated.per_unit_nutrition,
            source=NutritionSource.AI_GENERATED,
            category=generated.category,
            health_score=generated.health_score,
            ingredients=generated.ingredients,
            tips=generated.tips,
            user_provided=user_provided,
        )

    @staticmethod
    def _from_category(item: DetectedItem, stub: GenerationStub, user_provided: bool) -> ResolvedItem:
        estimate = estimate_by_category(stub.display_name)
        return ResolvedItem.build(
            name=stub.display_name,
            detected_name=item.food_name,
            visible_count=item.visible_count,
            per_unit_weight_grams=estimate.weight_grams,
            per_unit_nutrition=estimate.per_unit_nutrition,
            source=NutritionSource.HEURISTIC_FALLBACK,
            category=estimate.category,
            health_score=estimate.health_score,
            ingredients=estimate.ingredients,
            tips=estimate.tips,
            user_provided=user_provided,
        )
