"""Unit tests for RecognitionService (photo and barcode paths)."""

import io
import json
from typing import List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from PIL import Image

from mealscan.application.cascade import ProviderCascade
from mealscan.application.recognition_service import (
    RecognitionService,
    create_recognition_service,
    normalize_barcode,
)
from mealscan.config import Settings
from mealscan.domain.barcode.entities.packaged_product import PackagedProduct
from mealscan.domain.errors import (
    BarcodeLookupError,
    BarcodeNotFoundError,
    ImageEncodingError,
    InvalidBarcodeError,
)
from mealscan.domain.nutrition.entities.nutrition_vector import NutritionVector
from mealscan.domain.nutrition.services.enrichment_service import NutritionEnrichmentService
from mealscan.domain.nutrition.services.resolver import NutritionResolver
from mealscan.domain.recognition.entities.provider_response import Success
from mealscan.domain.report.services.aggregation import NutritionAggregator
from mealscan.infrastructure.ai.fallback_provider import FallbackProvider
from mealscan.infrastructure.ai.retry import RetryPolicy
from mealscan.infrastructure.external_apis.openfoodfacts.client import OpenFoodFactsClient
from mealscan.infrastructure.image.preprocessor import ImagePreprocessor
from mealscan.metrics import recognition as metrics


class OneShotVisionProvider:
    name = "OpenAI Vision"
    models = ("gpt-4o-mini",)

    def __init__(self, text: str):
        self.text = text
        self.prompts: List[str] = []

    async def analyze(self, image_b64: str, prompt: str, model: str) -> Success:
        self.prompts.append(prompt)
        return Success(self.text)


class FakeBarcodeProvider:
    def __init__(self, product: Optional[PackagedProduct] = None, error: Optional[Exception] = None):
        self.product = product
        self.error = error
        self.lookups: List[str] = []

    async def lookup_barcode(self, barcode: str) -> Optional[PackagedProduct]:
        self.lookups.append(barcode)
        if self.error:
            raise self.error
        return self.product


def jpeg_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (320, 240), (230, 190, 120)).save(buffer, format="JPEG")
    return buffer.getvalue()


def make_service(primary=None, barcode_provider=None) -> RecognitionService:
    cascade = ProviderCascade(
        primary,
        (),
        FallbackProvider(),
        model_retry=RetryPolicy(max_attempts=1, base_delay_s=0.0, max_delay_s=0.0),
        model_switch_delay_s=0.0,
    )
    return RecognitionService(
        preprocessor=ImagePreprocessor(),
        cascade=cascade,
        enrichment=NutritionEnrichmentService(NutritionResolver(), None),
        aggregator=NutritionAggregator(),
        barcode_provider=barcode_provider or FakeBarcodeProvider(),
    )


def request_count(kind: str, status: str) -> int:
    return metrics.counter_value("recognition_requests_total", kind=kind, status=status)


class TestRecognizeFood:
    """Photo path end to end, with providers faked."""

    @pytest.mark.asyncio
    async def test_fallback_report(self) -> None:
        report = await make_service().recognize_food(jpeg_bytes())

        assert report.is_estimate
        assert report.method == "Local Fallback"
        assert report.food_name == "Indian Combo: 2 Plain Parathas + 1 Aloo Bonda"
        assert report.nutrition.calories == 480
        assert report.health_score == 6.5
        assert report.confidence == 0.6
        assert not report.user_assisted
        assert request_count("photo", "estimate") == 1

    @pytest.mark.asyncio
    async def test_hint_is_ignored_for_estimates(self) -> None:
        report = await make_service().recognize_food(jpeg_bytes(), user_hint="2 parathas")

        assert report.is_estimate
        assert not report.user_assisted
        assert report.user_hint == "2 parathas"

    @pytest.mark.asyncio
    async def test_primary_result_with_hint(self) -> None:
        body = json.dumps({"detectedItems": [{"foodName": "Plain Paratha", "visibleCount": 3}], "confidence": 0.95})
        primary = OneShotVisionProvider(body)

        report = await make_service(primary).recognize_food(jpeg_bytes(), user_hint="  3 parathas  ")

        assert report.method == "OpenAI Vision (gpt-4o-mini) - User Assisted + AI Nutrition"
        assert report.user_assisted
        assert report.user_hint == "3 parathas"
        assert report.nutrition.calories == 540
        assert report.items[0].user_provided
        assert "3 parathas" in primary.prompts[0]
        assert request_count("photo", "success") == 1

    @pytest.mark.asyncio
    async def test_primary_result_without_hint(self) -> None:
        body = json.dumps({"detectedItems": [{"foodName": "Dal Makhani", "visibleCount": 1}]})

        report = await make_service(OneShotVisionProvider(body)).recognize_food(jpeg_bytes())

        assert report.method == "OpenAI Vision (gpt-4o-mini) - AI Nutrition Enhanced"
        assert not report.user_assisted
        assert report.user_hint is None
        assert report.confidence == 0.9

    @pytest.mark.asyncio
    async def test_encoding_error_propagates(self) -> None:
        with pytest.raises(ImageEncodingError):
            await make_service().recognize_food(b"")

        assert request_count("photo", "encoding_error") == 1


class TestRecognizeBarcode:
    """Barcode path."""

    @pytest.mark.asyncio
    async def test_product_report(self) -> None:
        product = PackagedProduct(
            barcode="8001505005707",
            name="Galletti",
            brand="Mulino Bianco",
            nutrition_per_100g=NutritionVector(calories=450, protein=7.5, carbs=70, fat=15, sugar=22),
        )
        provider = FakeBarcodeProvider(product)

        report = await make_service(barcode_provider=provider).recognize_barcode("800-1505 005707")

        assert provider.lookups == ["8001505005707"]
        assert report.barcode == "8001505005707"
        assert report.brand == "Mulino Bianco"
        assert report.nutrition.calories == 450
        assert request_count("barcode", "success") == 1

    @pytest.mark.asyncio
    async def test_not_found(self) -> None:
        service = make_service(barcode_provider=FakeBarcodeProvider(None))

        with pytest.raises(BarcodeNotFoundError, match="0000000000000"):
            await service.recognize_barcode("0000000000000")
        assert request_count("barcode", "not_found") == 1

    @pytest.mark.asyncio
    async def test_invalid_code_is_not_looked_up(self) -> None:
        provider = FakeBarcodeProvider()

        with pytest.raises(InvalidBarcodeError):
            await make_service(barcode_provider=provider).recognize_barcode("12#45")
        assert provider.lookups == []
        assert request_count("barcode", "invalid") == 1

    @pytest.mark.asyncio
    async def test_lookup_error_propagates(self) -> None:
        provider = FakeBarcodeProvider(error=BarcodeLookupError("OpenFoodFacts unavailable"))

        with pytest.raises(BarcodeLookupError):
            await make_service(barcode_provider=provider).recognize_barcode("123")
        assert request_count("barcode", "lookup_error") == 1


class TestNormalizeBarcode:
    def test_strips_spaces_and_dashes(self) -> None:
        assert normalize_barcode(" 800 1505-005707 ") == "8001505005707"

    @pytest.mark.parametrize("code", ["", "   ", "--", "12.34", "ean:123"])
    def test_rejects_invalid(self, code: str) -> None:
        with pytest.raises(InvalidBarcodeError):
            normalize_barcode(code)


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_aclose_closes_resources(self) -> None:
        resource = AsyncMock()
        service = make_service()
        service._resources = [resource]

        async with service:
            pass

        resource.aclose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failing_close_does_not_skip_others(self) -> None:
        broken = AsyncMock()
        broken.aclose.side_effect = RuntimeError("transport already closed")
        healthy = AsyncMock()
        service = make_service()
        service._resources = [broken, healthy]

        await service.aclose()

        broken.aclose.assert_awaited_once()
        healthy.aclose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_malformed_barcode_response_is_typed(self) -> None:
        response = MagicMock(status_code=200)
        response.json.return_value = []
        client = OpenFoodFactsClient(retry_policy=RetryPolicy(max_attempts=1, base_delay_s=0.0, max_delay_s=0.0))
        client._session = AsyncMock()
        client._session.get = AsyncMock(return_value=response)

        with pytest.raises(BarcodeLookupError):
            await make_service(barcode_provider=client).recognize_barcode("8001505005707")
        assert request_count("barcode", "lookup_error") == 1

    @pytest.mark.asyncio
    async def test_create_without_keys_uses_fallback(self) -> None:
        settings = Settings(secondary_providers_enabled=False)

        async with create_recognition_service(settings) as service:
            report = await service.recognize_food(jpeg_bytes())

        assert report.is_estimate
        assert report.provider == "Local Fallback"
