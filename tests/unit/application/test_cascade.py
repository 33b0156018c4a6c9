"""Unit tests for ProviderCascade.

Primary and secondary providers are scripted fakes; the sleep between
model variants is recorded instead of awaited.
"""

import json
from typing import Dict, List, Optional, Sequence, Tuple, Union

import httpx
import pytest

from mealscan.application.cascade import ProviderCascade
from mealscan.domain.errors import StructuralProviderError, TransientProviderError
from mealscan.domain.recognition.entities.detected_item import DetectedItem
from mealscan.domain.recognition.entities.provider_response import (
    Empty,
    ProviderResponse,
    StructuralFailure,
    Success,
)
from mealscan.infrastructure.ai.fallback_provider import FallbackProvider
from mealscan.infrastructure.ai.retry import RetryPolicy
from mealscan.metrics import recognition as metrics

Outcome = Union[ProviderResponse, BaseException]

PARATHA_JSON = json.dumps(
    {"detectedItems": [{"foodName": "Plain Paratha", "visibleCount": 2, "perUnitWeight": "70g"}], "confidence": 0.92}
)


class ScriptedVisionProvider:
    """Multi-model provider replaying queued outcomes per model."""

    name = "OpenAI Vision"

    def __init__(self, script: Dict[str, List[Outcome]], models: Sequence[str] = ("gpt-4o-mini", "gpt-4o")):
        self.script = {model: list(outcomes) for model, outcomes in script.items()}
        self._models = tuple(models)
        self.calls: List[str] = []
        self.prompts: List[str] = []

    @property
    def models(self) -> Sequence[str]:
        return self._models

    async def analyze(self, image_b64: str, prompt: str, model: str) -> ProviderResponse:
        self.calls.append(model)
        self.prompts.append(prompt)
        queue = self.script.get(model) or []
        outcome = queue.pop(0) if queue else Empty()
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class ScriptedLabelProvider:
    def __init__(self, name: str, outcome: Union[Optional[Tuple[str, float]], BaseException]):
        self.name = name
        self.outcome = outcome
        self.calls = 0

    async def detect_label(self, image_b64: str) -> Optional[Tuple[str, float]]:
        self.calls += 1
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome


class SleepRecorder:
    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def sleeper() -> SleepRecorder:
    return SleepRecorder()


def make_cascade(primary=None, secondaries=(), sleeper=None) -> ProviderCascade:
    return ProviderCascade(
        primary,
        secondaries,
        FallbackProvider(),
        model_retry=RetryPolicy(max_attempts=2, base_delay_s=0.0, max_delay_s=0.0),
        model_switch_delay_s=1.0,
        sleep=sleeper or SleepRecorder(),
    )


def attempt_count(provider: str, outcome: str) -> int:
    return metrics.counter_value("provider_attempts_total", provider=provider, outcome=outcome)


class TestPrimaryTier:
    """Model rotation, retries and escalation."""

    @pytest.mark.asyncio
    async def test_first_model_succeeds(self, sleeper: SleepRecorder) -> None:
        primary = ScriptedVisionProvider({"gpt-4o-mini": [Success(PARATHA_JSON)]})

        result = await make_cascade(primary, sleeper=sleeper).recognize("img", "prompt")

        assert result.provider == "OpenAI Vision (gpt-4o-mini)"
        assert result.items == (DetectedItem("Plain Paratha", 2, "70g"),)
        assert result.confidence == 0.92
        assert result.allow_generation is True
        assert result.is_estimate is False
        assert result.attempts == ("OpenAI Vision (gpt-4o-mini)",)
        assert primary.calls == ["gpt-4o-mini"]
        assert sleeper.delays == []
        assert attempt_count("OpenAI Vision (gpt-4o-mini)", "success") == 1

    @pytest.mark.asyncio
    async def test_transient_errors_rotate_models(self, sleeper: SleepRecorder) -> None:
        busy = TransientProviderError("OpenAI Vision", "status 529")
        body = json.dumps({"detectedItems": [{"foodName": "Masala Dosa", "visibleCount": 1}]})
        primary = ScriptedVisionProvider(
            {"gpt-4o-mini": [busy, busy], "gpt-4o": [Success(body)]}
        )

        result = await make_cascade(primary, sleeper=sleeper).recognize("img", "prompt")

        assert result.provider == "OpenAI Vision (gpt-4o)"
        assert result.confidence == 0.9
        assert primary.calls == ["gpt-4o-mini", "gpt-4o-mini", "gpt-4o"]
        assert sleeper.delays == [1.0]
        assert result.attempts == ("OpenAI Vision (gpt-4o-mini)", "OpenAI Vision (gpt-4o)")
        assert attempt_count("OpenAI Vision (gpt-4o-mini)", "transient") == 1

    @pytest.mark.asyncio
    async def test_empty_output_is_retried_on_same_model(self, sleeper: SleepRecorder) -> None:
        primary = ScriptedVisionProvider({"gpt-4o-mini": [Empty(), Success(PARATHA_JSON)]})

        result = await make_cascade(primary, sleeper=sleeper).recognize("img", "prompt")

        assert result.provider == "OpenAI Vision (gpt-4o-mini)"
        assert primary.calls == ["gpt-4o-mini", "gpt-4o-mini"]

    @pytest.mark.asyncio
    async def test_text_output_uses_text_confidence(self) -> None:
        primary = ScriptedVisionProvider({"gpt-4o-mini": [Success("I can see 3 parathas on a steel plate.")]})

        result = await make_cascade(primary).recognize("img", "prompt")

        assert result.items == (DetectedItem("Paratha", 3),)
        assert result.confidence == 0.8

    @pytest.mark.asyncio
    async def test_structural_failure_skips_remaining_models(self, sleeper: SleepRecorder) -> None:
        primary = ScriptedVisionProvider({"gpt-4o-mini": [StructuralFailure("content_filter")]})
        hugging_face = ScriptedLabelProvider("Hugging Face Vision", ("Pizza", 0.93))

        result = await make_cascade(primary, [hugging_face], sleeper).recognize("img", "prompt")

        assert primary.calls == ["gpt-4o-mini"]
        assert result.provider == "Hugging Face Vision"
        assert attempt_count("OpenAI Vision (gpt-4o-mini)", "structural") == 1

    @pytest.mark.asyncio
    async def test_structural_error_is_not_retried(self) -> None:
        primary = ScriptedVisionProvider(
            {"gpt-4o-mini": [StructuralProviderError("OpenAI Vision", "status 401")]}
        )

        result = await make_cascade(primary).recognize("img", "prompt")

        assert primary.calls == ["gpt-4o-mini"]
        assert result.is_estimate

    @pytest.mark.asyncio
    async def test_unparseable_output_escalates(self) -> None:
        primary = ScriptedVisionProvider({"gpt-4o-mini": [Success("Sorry, I cannot tell what this is.")]})
        google = ScriptedLabelProvider("Google Vision", ("Biryani", 0.88))

        result = await make_cascade(primary, [google]).recognize("img", "prompt")

        assert primary.calls == ["gpt-4o-mini"]
        assert result.provider == "Google Vision"
        assert attempt_count("OpenAI Vision (gpt-4o-mini)", "parse_error") == 1


class TestSecondaryTier:
    """Label providers, tried once each."""

    @pytest.mark.asyncio
    async def test_label_becomes_single_item(self) -> None:
        hugging_face = ScriptedLabelProvider("Hugging Face Vision", ("Pizza", 0.93))

        result = await make_cascade(None, [hugging_face]).recognize("img", "prompt")

        assert result.items == (DetectedItem("Pizza", 1),)
        assert result.confidence == 0.93
        assert result.allow_generation is False
        assert result.method == "Hugging Face Vision"

    @pytest.mark.asyncio
    async def test_failures_move_to_next_provider(self) -> None:
        broken = ScriptedLabelProvider("Hugging Face Vision", httpx.ConnectError("refused"))
        empty = ScriptedLabelProvider("Google Vision", None)

        result = await make_cascade(None, [broken, empty]).recognize("img", "prompt")

        assert broken.calls == 1
        assert empty.calls == 1
        assert result.attempts == ("Hugging Face Vision", "Google Vision")
        assert attempt_count("Hugging Face Vision", "failed") == 1
        assert attempt_count("Google Vision", "empty") == 1


class TestFallbackTier:
    """Deterministic last resort."""

    @pytest.mark.asyncio
    async def test_all_failures_end_in_fallback(self, sleeper: SleepRecorder) -> None:
        busy = TransientProviderError("OpenAI Vision", "timeout")
        primary = ScriptedVisionProvider({"gpt-4o-mini": [busy, busy], "gpt-4o": [busy, busy]})
        hugging_face = ScriptedLabelProvider("Hugging Face Vision", RuntimeError("model loading"))

        result = await make_cascade(primary, [hugging_face], sleeper).recognize("img", "prompt")

        assert result.is_estimate
        assert result.provider == "Local Fallback"
        assert result.attempts == (
            "OpenAI Vision (gpt-4o-mini)",
            "OpenAI Vision (gpt-4o)",
            "Hugging Face Vision",
        )
        # pause only between models, not after the last one
        assert sleeper.delays == [1.0]
        assert metrics.counter_value("recognition_fallback_total", reason="all_providers_failed") == 1

    @pytest.mark.asyncio
    async def test_no_providers_configured(self) -> None:
        result = await make_cascade().recognize("img", "prompt")

        assert result.is_estimate
        assert result.attempts == ()
        assert result == FallbackProvider().result()
