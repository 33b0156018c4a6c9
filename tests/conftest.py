"""Shared test fixtures.

Unit tests never touch the network: providers are mocked and retry
delays are zeroed.
"""

from __future__ import annotations

from typing import Generator

import pytest

from mealscan.infrastructure.ai.retry import RetryPolicy
from mealscan.metrics.recognition import reset_all


@pytest.fixture(autouse=True)
def _reset_metrics() -> Generator[None, None, None]:
    """Start every test with an empty metrics registry."""
    reset_all()
    yield
    reset_all()


@pytest.fixture(autouse=True)
def _clear_provider_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep keys from a developer .env out of the tests."""
    for name in (
        "OPENAI_API_KEY",
        "HUGGINGFACE_API_KEY",
        "GOOGLE_VISION_API_KEY",
        "OPENAI_VISION_MODELS",
        "AI_MODEL_ATTEMPTS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fast_retry() -> RetryPolicy:
    """RetryPolicy with three attempts and no backoff."""
    return RetryPolicy(max_attempts=3, base_delay_s=0.0, max_delay_s=0.0)
