"""Provider factory.

Settings-based provider selection. Providers whose credentials are missing
are simply left out of the cascade; the deterministic fallback is always
available so recognition keeps working without any key.

Usage:
    from mealscan.infrastructure.providers.factory import (
        create_openai_client,
        create_vision_provider,
        create_label_providers,
        create_nutrition_generator,
        create_barcode_provider,
    )

    client = create_openai_client(settings)
    vision = create_vision_provider(settings, client)  # None without a key
"""

import logging
from typing import List, Optional

from openai import AsyncOpenAI

from mealscan.config import Settings
from mealscan.domain.recognition.ports.vision_provider import ILabelProvider
from mealscan.infrastructure.ai.google_vision.client import GoogleVisionLabelClient
from mealscan.infrastructure.ai.huggingface.client import HuggingFaceLabelClient
from mealscan.infrastructure.ai.openai.nutrition_generator import OpenAINutritionGenerator
from mealscan.infrastructure.ai.openai.vision_provider import OpenAIVisionProvider
from mealscan.infrastructure.ai.retry import RetryPolicy
from mealscan.infrastructure.external_apis.openfoodfacts.client import OpenFoodFactsClient

logger = logging.getLogger(__name__)


def create_openai_client(settings: Settings) -> Optional[AsyncOpenAI]:
    """Shared AsyncOpenAI client, or None when OPENAI_API_KEY is not set.

    SDK-level retries are disabled; RetryPolicy owns retrying.
    """
    if not settings.primary_enabled:
        logger.info("OPENAI_API_KEY not set, primary provider disabled")
        return None
    return AsyncOpenAI(
        api_key=settings.openai_api_key,
        timeout=settings.request_timeout_s,
        max_retries=0,
    )


def create_vision_provider(
    settings: Settings, client: Optional[AsyncOpenAI]
) -> Optional[OpenAIVisionProvider]:
    if client is None:
        return None
    return OpenAIVisionProvider(
        client,
        settings.vision_models,
        timeout_s=settings.request_timeout_s,
        temperature=settings.temperature,
        max_tokens=settings.max_output_tokens,
    )


def create_label_providers(settings: Settings) -> List[ILabelProvider]:
    """Secondary providers in priority order (Hugging Face, Google Vision)."""
    if not settings.secondary_providers_enabled:
        return []

    providers: List[ILabelProvider] = [
        HuggingFaceLabelClient(
            api_key=settings.huggingface_api_key,
            url=settings.huggingface_url,
        )
    ]
    if settings.google_vision_api_key:
        providers.append(
            GoogleVisionLabelClient(
                api_key=settings.google_vision_api_key,
                url=settings.google_vision_url,
            )
        )
    return providers


def create_retry_policy(settings: Settings) -> RetryPolicy:
    return RetryPolicy(
        max_attempts=settings.retry_max_attempts,
        base_delay_s=settings.retry_base_delay_s,
        max_delay_s=settings.retry_max_delay_s,
    )


def create_nutrition_generator(
    settings: Settings, client: Optional[AsyncOpenAI]
) -> Optional[OpenAINutritionGenerator]:
    if client is None:
        return None
    return OpenAINutritionGenerator(
        client,
        settings.nutrition_model,
        retry_policy=create_retry_policy(settings),
        timeout_s=settings.request_timeout_s,
        temperature=settings.temperature,
    )


def create_barcode_provider(settings: Settings) -> OpenFoodFactsClient:
    return OpenFoodFactsClient(
        base_url=settings.openfoodfacts_url,
        timeout_s=settings.openfoodfacts_timeout_s,
    )
