"""In-memory metrics registry for the recognition pipeline.

Counters and sliding-window histograms keyed by name plus labels. The
registry is thread-safe and has no exporter: callers take a `snapshot()`
(the CLI prints it with `--metrics`) and tests read single values with
`counter_value()`.
"""

from __future__ import annotations

import math
import time
from collections import deque
from dataclasses import dataclass, field
from threading import Lock
from typing import Any, Callable, Deque, Dict, List, Optional, Tuple, TypedDict, TypeVar

Labels = Tuple[Tuple[str, str], ...]
MetricKey = Tuple[str, Labels]

DEFAULT_WINDOW = 2000


def _labels(tags: Dict[str, Any]) -> Labels:
    return tuple(sorted((key, str(value)) for key, value in tags.items()))


def _percentile(ordered: List[float], q: float) -> float:
    """Nearest-rank percentile of an already sorted list."""
    rank = max(1, math.ceil(q * len(ordered)))
    return ordered[rank - 1]


@dataclass
class Counter:
    """Monotonic counter."""

    name: str
    labels: Labels
    _value: int = 0
    _lock: Lock = field(default_factory=Lock, repr=False)

    def inc(self, amount: int = 1) -> None:
        if amount < 0:
            raise ValueError(f"Counter {self.name} cannot decrease (amount={amount})")
        with self._lock:
            self._value += amount

    def value(self) -> int:
        with self._lock:
            return self._value


@dataclass
class Histogram:
    """Keeps the most recent `window` observations."""

    name: str
    labels: Labels
    window: int = DEFAULT_WINDOW
    _samples: Deque[float] = field(init=False, repr=False)
    _lock: Lock = field(default_factory=Lock, repr=False)

    def __post_init__(self) -> None:
        self._samples = deque(maxlen=self.window)

    def observe(self, value: float) -> None:
        with self._lock:
            self._samples.append(float(value))

    def summary(self) -> Dict[str, float]:
        with self._lock:
            ordered = sorted(self._samples)
        if not ordered:
            return {"count": 0, "avg": 0.0, "p50": 0.0, "p95": 0.0, "min": 0.0, "max": 0.0}
        return {
            "count": len(ordered),
            "avg": sum(ordered) / len(ordered),
            "p50": _percentile(ordered, 0.50),
            "p95": _percentile(ordered, 0.95),
            "min": ordered[0],
            "max": ordered[-1],
        }


class CounterSnap(TypedDict):
    name: str
    tags: Dict[str, str]
    value: int


class HistogramSnap(TypedDict):
    name: str
    tags: Dict[str, str]
    count: int
    avg: float
    p50: float
    p95: float
    min: float
    max: float


class RegistrySnapshot(TypedDict):
    counters: List[CounterSnap]
    histograms: List[HistogramSnap]
    generatedAt: float


M = TypeVar("M")


class MetricsRegistry:
    """Get-or-create access to labelled counters and histograms."""

    def __init__(self, histogram_window: int = DEFAULT_WINDOW) -> None:
        self._histogram_window = histogram_window
        self._counters: Dict[MetricKey, Counter] = {}
        self._histograms: Dict[MetricKey, Histogram] = {}
        self._lock = Lock()

    def _get_or_create(self, store: Dict[MetricKey, M], key: MetricKey, build: Callable[[], M]) -> M:
        with self._lock:
            metric = store.get(key)
            if metric is None:
                metric = build()
                store[key] = metric
            return metric

    def counter(self, name: str, **tags: Any) -> Counter:
        labels = _labels(tags)
        return self._get_or_create(self._counters, (name, labels), lambda: Counter(name, labels))

    def histogram(self, name: str, **tags: Any) -> Histogram:
        labels = _labels(tags)
        return self._get_or_create(
            self._histograms,
            (name, labels),
            lambda: Histogram(name, labels, window=self._histogram_window),
        )

    def counter_value(self, name: str, **tags: Any) -> int:
        """Current value, 0 for a counter never incremented."""
        with self._lock:
            counter: Optional[Counter] = self._counters.get((name, _labels(tags)))
        return counter.value() if counter is not None else 0

    def reset(self) -> None:
        with self._lock:
            self._counters.clear()
            self._histograms.clear()

    def snapshot(self) -> RegistrySnapshot:
        with self._lock:
            counters = list(self._counters.values())
            histograms = list(self._histograms.values())

        snap: RegistrySnapshot = {"counters": [], "histograms": [], "generatedAt": time.time()}
        for c in counters:
            snap["counters"].append({"name": c.name, "tags": dict(c.labels), "value": c.value()})
        for h in histograms:
            summary = h.summary()
            snap["histograms"].append(
                {
                    "name": h.name,
                    "tags": dict(h.labels),
                    "count": int(summary["count"]),
                    "avg": summary["avg"],
                    "p50": summary["p50"],
                    "p95": summary["p95"],
                    "min": summary["min"],
                    "max": summary["max"],
                }
            )
        return snap


registry = MetricsRegistry()
