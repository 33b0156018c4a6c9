"""Instrumentation helpers for the recognition pipeline.

Metrics:
* Counter recognition_requests_total{kind,status}
* Histogram recognition_latency_ms{kind}
* Counter provider_attempts_total{provider,outcome}
* Counter recognition_fallback_total{reason}
* Counter nutrition_generation_total{outcome}
* Counter nutrition_resolution_total{source}

`kind` is "photo" or "barcode". `outcome` for provider attempts is one of
success|transient|structural|parse_error|empty.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Iterator

from .core import registry, RegistrySnapshot


def record_request(kind: str, status: str) -> None:
    registry.counter("recognition_requests_total", kind=kind, status=status).inc()


def record_latency_ms(kind: str, ms: float) -> None:
    registry.histogram("recognition_latency_ms", kind=kind).observe(ms)


def record_provider_attempt(provider: str, outcome: str) -> None:
    registry.counter("provider_attempts_total", provider=provider, outcome=outcome).inc()


def record_fallback(reason: str) -> None:
    registry.counter("recognition_fallback_total", reason=reason).inc()


def record_generation(outcome: str) -> None:
    registry.counter("nutrition_generation_total", outcome=outcome).inc()


def record_resolution(source: str) -> None:
    registry.counter("nutrition_resolution_total", source=source).inc()


@contextmanager
def time_request(kind: str) -> Iterator[None]:
    """Record latency for a block, whether it returns or raises."""
    start = time.perf_counter()
    try:
        yield
    finally:
        record_latency_ms(kind, (time.perf_counter() - start) * 1000.0)


def snapshot() -> RegistrySnapshot:
    return registry.snapshot()


def counter_value(name: str, **tags: str) -> int:
    return registry.counter_value(name, **tags)


def reset_all() -> None:
    """Clear all metrics (tests)."""
    registry.reset()
