"""OpenAI vision provider - implements IVisionModelProvider.

Sends the prompt plus a base64 JPEG (as a data URL) to one chat model and
reduces the completion envelope to a tagged ProviderResponse. Model
rotation and retries live in the provider cascade, not here.
"""

import asyncio
import logging
import time
from typing import Any, Dict, List, Sequence

from openai import APIError, AsyncOpenAI

from mealscan.domain.errors import TransientProviderError
from mealscan.domain.recognition.entities.provider_response import (
    Empty,
    ProviderResponse,
    StructuralFailure,
    Success,
)
from mealscan.infrastructure.ai.openai.errors import classify_openai_error

logger = logging.getLogger(__name__)


class OpenAIVisionProvider:
    """
    Primary multi-model vision provider backed by OpenAI chat completions.

    Example:
        >>> provider = OpenAIVisionProvider(AsyncOpenAI(api_key="sk-..."), ["gpt-4o-mini", "gpt-4o"])
        >>> response = await provider.analyze(image_b64, prompt, "gpt-4o-mini")
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        models: Sequence[str],
        *,
        timeout_s: float = 25.0,
        temperature: float = 0.1,
        max_tokens: int = 1024,
    ):
        """
        Initialize provider.

        Args:
            client: Shared AsyncOpenAI client
            models: Ordered model variants (cheapest / fastest first)
            timeout_s: Per-call timeout
            temperature: Sampling temperature (low for consistent counts)
            max_tokens: Output bound
        """
        if not models:
            raise ValueError("At least one vision model is required")
        self._client = client
        self._models = tuple(models)
        self._timeout_s = timeout_s
        self._temperature = temperature
        self._max_tokens = max_tokens

    @property
    def name(self) -> str:
        return "OpenAI Vision"

    @property
    def models(self) -> Sequence[str]:
        return self._models

    def _messages(self, image_b64: str, prompt: str) -> List[Dict[str, Any]]:
        return [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": prompt},
                    {
                        "type": "image_url",
                        "image_url": {
                            "url": f"data:image/jpeg;base64,{image_b64}",
                            "detail": "low",
                        },
                    },
                ],
            }
        ]

    async def analyze(self, image_b64: str, prompt: str, model: str) -> ProviderResponse:
        """
        Analyze one image with one model.

        Raises:
            TransientProviderError: timeout, connection error, rate limit, 5xx
        """
        start = time.perf_counter()
        try:
            completion = await asyncio.wait_for(
                self._client.chat.completions.create(
                    model=model,
                    messages=self._messages(image_b64, prompt),  # type: ignore[arg-type]
                    temperature=self._temperature,
                    max_tokens=self._max_tokens,
                    response_format={"type": "json_object"},
                ),
                timeout=self._timeout_s,
            )
        except asyncio.TimeoutError as exc:
            raise TransientProviderError(self.name, f"{model} timed out after {self._timeout_s}s") from exc
        except APIError as exc:
            error = classify_openai_error(exc, self.name)
            if isinstance(error, TransientProviderError):
                raise error from exc
            logger.warning(
                "Vision model rejected request",
                extra={"model": model, "reason": error.reason},
            )
            return StructuralFailure(error.reason)
        finally:
            logger.info(
                "vision.call",
                extra={
                    "model": model,
                    "elapsed_ms": int((time.perf_counter() - start) * 1000),
                },
            )

        return self._to_response(completion, model)

    def _to_response(self, completion: Any, model: str) -> ProviderResponse:
        if not completion.choices:
            return Empty("no choices")
        choice = completion.choices[0]
        finish_reason = getattr(choice, "finish_reason", None)
        if finish_reason == "content_filter":
            return StructuralFailure("content_filter")
        if finish_reason == "length":
            return StructuralFailure("truncated")

        content = choice.message.content if choice.message else None
        if not content or not content.strip():
            return Empty()

        logger.debug("Vision model answered", extra={"model": model, "chars": len(content)})
        return Success(text=content)
