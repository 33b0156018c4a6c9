"""Provider cascade orchestrator.

Tiers, strictly in order:

1. Primary vision provider: each model variant in turn, with per-model
   retries for transient failures and a short pause between models.
   Structural failures and unparseable output end the tier at once.
2. Secondary label providers: each tried once, first usable label wins.
3. Deterministic fallback: always succeeds.

`recognize()` never raises.
"""

import asyncio
import logging
from dataclasses import replace
from typing import Awaitable, Callable, List, Optional, Sequence

from mealscan.domain.errors import ParseError, TransientProviderError, is_retryable_error
from mealscan.domain.recognition.entities.detected_item import DetectedItem
from mealscan.domain.recognition.entities.provider_response import (
    Empty,
    ProviderResponse,
    StructuralFailure,
    Success,
)
from mealscan.domain.recognition.entities.provider_result import ProviderResult
from mealscan.domain.recognition.ports.vision_provider import (
    ILabelProvider,
    IVisionModelProvider,
)
from mealscan.domain.recognition.services.text_extractor import ResponseTextExtractor
from mealscan.infrastructure.ai.fallback_provider import FallbackProvider
from mealscan.infrastructure.ai.retry import RetryPolicy
from mealscan.metrics import recognition as metrics

logger = logging.getLogger(__name__)

DEFAULT_JSON_CONFIDENCE = 0.9
DEFAULT_TEXT_CONFIDENCE = 0.8


class ProviderCascade:
    """
    Drive providers in priority order until one yields detected items.

    Example:
        >>> cascade = ProviderCascade(primary, [hugging_face], FallbackProvider())
        >>> result = await cascade.recognize(image_b64, prompt)
        >>> result.provider
        'OpenAI Vision (gpt-4o-mini)'
    """

    def __init__(
        self,
        primary: Optional[IVisionModelProvider],
        secondaries: Sequence[ILabelProvider] = (),
        fallback: Optional[FallbackProvider] = None,
        *,
        extractor: Optional[ResponseTextExtractor] = None,
        model_retry: Optional[RetryPolicy] = None,
        model_switch_delay_s: float = 1.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Initialize cascade.

        Args:
            primary: Multi-model vision provider; None skips the primary tier
            secondaries: Label providers, in priority order
            fallback: Deterministic last resort
            extractor: Parser for primary provider output
            model_retry: Attempts and backoff per model variant
            model_switch_delay_s: Pause before moving to the next model
            sleep: Awaitable sleep (replaced in tests)
        """
        self._primary = primary
        self._secondaries = tuple(secondaries)
        self._fallback = fallback or FallbackProvider()
        self._extractor = extractor or ResponseTextExtractor()
        self._model_retry = model_retry or RetryPolicy(max_attempts=2)
        self._model_switch_delay_s = model_switch_delay_s
        self._sleep = sleep

    async def recognize(self, image_b64: str, prompt: str) -> ProviderResult:
        attempts: List[str] = []

        if self._primary is not None:
            result = await self._run_primary(self._primary, image_b64, prompt, attempts)
            if result is not None:
                return result

        for provider in self._secondaries:
            result = await self._run_secondary(provider, image_b64, attempts)
            if result is not None:
                return result

        metrics.record_fallback("all_providers_failed")
        logger.warning("All providers failed", extra={"attempts": attempts})
        return replace(self._fallback.result(), attempts=tuple(attempts))

    async def _run_primary(
        self,
        provider: IVisionModelProvider,
        image_b64: str,
        prompt: str,
        attempts: List[str],
    ) -> Optional[ProviderResult]:
        models = list(provider.models)
        for index, model in enumerate(models):
            label = f"{provider.name} ({model})"
            attempts.append(label)

            try:
                response = await self._model_retry.run(
                    lambda m=model: self._call_model(provider, image_b64, prompt, m)
                )
            except Exception as exc:
                if not is_retryable_error(exc):
                    metrics.record_provider_attempt(label, "structural")
                    logger.error(
                        "Primary provider failed permanently",
                        extra={"provider": label, "error": str(exc)},
                    )
                    return None
                metrics.record_provider_attempt(label, "transient")
                logger.warning(
                    "Model attempts exhausted",
                    extra={"provider": label, "error": str(exc)},
                )
                if index < len(models) - 1:
                    await self._sleep(self._model_switch_delay_s)
                continue

            if isinstance(response, StructuralFailure):
                metrics.record_provider_attempt(label, "structural")
                logger.error(
                    "Structural provider failure, leaving primary tier",
                    extra={"provider": label, "reason": response.reason},
                )
                return None

            try:
                detection = self._extractor.extract_detection(response.text)
            except ParseError as exc:
                metrics.record_provider_attempt(label, "parse_error")
                logger.error(
                    "Unparseable provider output, leaving primary tier",
                    extra={"provider": label, "code": exc.code},
                )
                return None

            metrics.record_provider_attempt(label, "success")
            confidence = detection.confidence
            if confidence is None:
                confidence = response.confidence
            if confidence is None:
                confidence = (
                    DEFAULT_JSON_CONFIDENCE if detection.strategy == "json" else DEFAULT_TEXT_CONFIDENCE
                )

            logger.info(
                "Primary provider succeeded",
                extra={"provider": label, "items": len(detection.items), "strategy": detection.strategy},
            )
            return ProviderResult(
                provider=label,
                items=detection.items,
                confidence=confidence,
                attempts=tuple(attempts),
            )

        logger.warning("Primary tier exhausted", extra={"models": len(models)})
        return None

    async def _call_model(
        self,
        provider: IVisionModelProvider,
        image_b64: str,
        prompt: str,
        model: str,
    ) -> ProviderResponse:
        response = await provider.analyze(image_b64, prompt, model)
        if isinstance(response, Empty):
            # Empty output is worth another attempt
            raise TransientProviderError(f"{provider.name} ({model})", response.reason)
        if isinstance(response, Success) and not response.text.strip():
            raise TransientProviderError(f"{provider.name} ({model})", "blank output")
        return response

    async def _run_secondary(
        self,
        provider: ILabelProvider,
        image_b64: str,
        attempts: List[str],
    ) -> Optional[ProviderResult]:
        attempts.append(provider.name)
        try:
            detected = await provider.detect_label(image_b64)
        except Exception as exc:
            metrics.record_provider_attempt(provider.name, "failed")
            logger.warning(
                "Secondary provider failed",
                extra={"provider": provider.name, "error": str(exc)},
            )
            return None

        if detected is None:
            metrics.record_provider_attempt(provider.name, "empty")
            return None

        food_name, score = detected
        metrics.record_provider_attempt(provider.name, "success")
        logger.info(
            "Secondary provider succeeded",
            extra={"provider": provider.name, "label": food_name, "score": score},
        )
        return ProviderResult(
            provider=provider.name,
            items=(DetectedItem(food_name, 1),),
            confidence=score,
            allow_generation=False,
            method=provider.name,
            attempts=tuple(attempts),
        )
