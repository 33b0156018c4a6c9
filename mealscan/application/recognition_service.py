"""Recognition service - caller-facing façade.

Flow for a photo:
1. Preprocess the image (resize, recompress, base64)
2. Build the prompt (user-assisted when a hint is given)
3. Provider cascade -> detected items
4. Nutrition enrichment (catalog, AI generation, category fallback)
5. Aggregation into a RecognitionReport

`recognize_food` only raises ImageEncodingError; every provider failure is
absorbed by the cascade. `recognize_barcode` raises the barcode errors.
"""

import logging
import re
from typing import List, Optional

from mealscan.application.cascade import ProviderCascade
from mealscan.config import Settings, load_settings
from mealscan.domain.barcode.ports.barcode_provider import IBarcodeProvider
from mealscan.domain.errors import (
    BarcodeError,
    BarcodeNotFoundError,
    ImageEncodingError,
    InvalidBarcodeError,
)
from mealscan.domain.nutrition.services.enrichment_service import NutritionEnrichmentService
from mealscan.domain.nutrition.services.resolver import NutritionResolver
from mealscan.domain.recognition.entities.provider_result import ProviderResult
from mealscan.domain.recognition.prompts import build_recognition_prompt
from mealscan.domain.report.entities.report import RecognitionReport
from mealscan.domain.report.services.aggregation import NutritionAggregator
from mealscan.infrastructure.ai.fallback_provider import FallbackProvider
from mealscan.infrastructure.image.preprocessor import ImagePreprocessor, ImageRef
from mealscan.infrastructure.providers import factory
from mealscan.metrics import recognition as metrics

logger = logging.getLogger(__name__)

_BARCODE_SEPARATORS = re.compile(r"[\s-]+")
_BARCODE_CHARS = re.compile(r"^[A-Za-z0-9]+$")


def normalize_barcode(code: str) -> str:
    """
    Strip spaces and dashes from a scanned code.

    Raises:
        InvalidBarcodeError: Empty result or non-alphanumeric characters
    """
    normalized = _BARCODE_SEPARATORS.sub("", code or "")
    if not normalized or not _BARCODE_CHARS.match(normalized):
        raise InvalidBarcodeError(f"Invalid barcode: {code!r}")
    return normalized


def _barcode_status(exc: BarcodeError) -> str:
    if isinstance(exc, BarcodeNotFoundError):
        return "not_found"
    if isinstance(exc, InvalidBarcodeError):
        return "invalid"
    return "lookup_error"


def method_label(result: ProviderResult, user_assisted: bool) -> str:
    if result.method:
        return result.method
    if user_assisted:
        return f"{result.provider} - User Assisted + AI Nutrition"
    return f"{result.provider} - AI Nutrition Enhanced"


class RecognitionService:
    """
    Food recognition façade used by UI collaborators.

    Example:
        >>> service = create_recognition_service()
        >>> report = await service.recognize_food("/tmp/lunch.jpg", user_hint="2 parathas")
        >>> report.method
        'OpenAI Vision (gpt-4o-mini) - User Assisted + AI Nutrition'
    """

    def __init__(
        self,
        preprocessor: ImagePreprocessor,
        cascade: ProviderCascade,
        enrichment: NutritionEnrichmentService,
        aggregator: NutritionAggregator,
        barcode_provider: IBarcodeProvider,
        resources: Optional[List[object]] = None,
    ):
        """
        Initialize service.

        Args:
            preprocessor: Image encoder
            cascade: Provider cascade
            enrichment: Nutrition resolution + generation
            aggregator: Report builder
            barcode_provider: Product database
            resources: Objects with an async `aclose()` owned by the service
        """
        self._preprocessor = preprocessor
        self._cascade = cascade
        self._enrichment = enrichment
        self._aggregator = aggregator
        self._barcode = barcode_provider
        self._resources = list(resources or [])

    async def __aenter__(self) -> "RecognitionService":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close every owned resource; one failing close does not skip the rest."""
        for resource in self._resources:
            close = getattr(resource, "aclose", None) or getattr(resource, "close", None)
            if close is None:
                continue
            try:
                await close()
            except Exception as exc:
                logger.warning(
                    "Failed to close resource",
                    extra={"resource": type(resource).__name__, "error": str(exc)},
                )
        self._resources.clear()

    async def recognize_food(
        self, image_ref: ImageRef, user_hint: Optional[str] = None
    ) -> RecognitionReport:
        """
        Recognize food in a photo and build a nutrition report.

        Args:
            image_ref: File path or raw image bytes
            user_hint: Optional free text describing the food

        Returns:
            Complete report; `method` and `is_estimate` carry provenance

        Raises:
            ImageEncodingError: Image could not be encoded at all
        """
        hint = (user_hint or "").strip() or None

        with metrics.time_request("photo"):
            try:
                image_b64 = await self._preprocessor.prepare(image_ref)
            except ImageEncodingError:
                metrics.record_request("photo", "encoding_error")
                raise

            result = await self._cascade.recognize(image_b64, build_recognition_prompt(hint))
            user_assisted = hint is not None and not result.is_estimate

            items = await self._enrichment.resolve_items(
                result.items,
                allow_generation=result.allow_generation,
                user_provided=user_assisted,
            )
            for item in items:
                metrics.record_resolution(item.source.value)

            report = self._aggregator.aggregate(
                items,
                result.confidence,
                user_assisted,
                method=method_label(result, user_assisted),
                provider=result.provider,
                user_hint=hint,
                is_estimate=result.is_estimate,
                dish_name=result.dish_name,
                category=result.category,
                tips=result.tips,
            )

        metrics.record_request("photo", "estimate" if report.is_estimate else "success")
        logger.info(
            "Food recognized",
            extra={
                "food_name": report.food_name,
                "provider": report.provider,
                "items": report.item_count,
                "calories": report.nutrition.calories,
                "is_estimate": report.is_estimate,
            },
        )
        return report

    async def recognize_barcode(self, code: str) -> RecognitionReport:
        """
        Look up a packaged product and format it as a per-100g report.

        Raises:
            InvalidBarcodeError: Empty or malformed code
            BarcodeNotFoundError: Product database has no entry
            BarcodeLookupError: Product database unreachable
        """
        with metrics.time_request("barcode"):
            try:
                barcode = normalize_barcode(code)
                product = await self._barcode.lookup_barcode(barcode)
                if product is None:
                    raise BarcodeNotFoundError(barcode)
            except BarcodeError as exc:
                metrics.record_request("barcode", _barcode_status(exc))
                logger.warning("Barcode recognition failed", extra={"barcode": code, "error": str(exc)})
                raise

            report = self._aggregator.format_barcode_product(product)

        metrics.record_request("barcode", "success")
        logger.info(
            "Barcode recognized",
            extra={"barcode": barcode, "food_name": report.food_name},
        )
        return report


def create_recognition_service(settings: Optional[Settings] = None) -> RecognitionService:
    """Wire a RecognitionService from settings (environment by default)."""
    settings = settings or load_settings()

    client = factory.create_openai_client(settings)
    primary = factory.create_vision_provider(settings, client)
    secondaries = factory.create_label_providers(settings)
    generator = factory.create_nutrition_generator(settings, client)
    barcode_provider = factory.create_barcode_provider(settings)

    cascade = ProviderCascade(
        primary,
        secondaries,
        FallbackProvider(),
        model_retry=factory.create_retry_policy(settings).with_attempts(settings.model_attempts),
        model_switch_delay_s=settings.model_switch_delay_s,
    )

    resources: List[object] = [barcode_provider, *secondaries]
    if client is not None:
        resources.append(client)

    logger.info(
        "Recognition service created",
        extra={
            "primary_models": list(settings.vision_models) if primary else [],
            "secondaries": [p.name for p in secondaries],
            "generation": generator is not None,
        },
    )
    return RecognitionService(
        preprocessor=ImagePreprocessor(settings.image_max_width, settings.image_jpeg_quality),
        cascade=cascade,
        enrichment=NutritionEnrichmentService(NutritionResolver(), generator),
        aggregator=NutritionAggregator(),
        barcode_provider=barcode_provider,
        resources=resources,
    )
