"""Tests for the in-memory metrics registry and recognition helpers."""

import pytest

from mealscan.metrics import recognition as metrics
from mealscan.metrics.core import MetricsRegistry


def test_counter_identity_by_tags():
    reg = MetricsRegistry()
    a = reg.counter("requests", kind="photo", status="success")
    b = reg.counter("requests", status="success", kind="photo")
    c = reg.counter("requests", kind="barcode", status="success")

    a.inc()
    b.inc(2)
    c.inc()

    assert a is b
    assert reg.counter_value("requests", kind="photo", status="success") == 3
    assert reg.counter_value("requests", kind="barcode", status="success") == 1
    assert reg.counter_value("requests", kind="photo", status="failed") == 0


def test_counter_cannot_decrease():
    with pytest.raises(ValueError):
        MetricsRegistry().counter("requests").inc(-1)


def test_histogram_summary():
    reg = MetricsRegistry()
    h = reg.histogram("latency", kind="photo")
    for v in (10.0, 20.0, 30.0, 40.0):
        h.observe(v)

    snap = reg.snapshot()["histograms"][0]

    assert snap["tags"] == {"kind": "photo"}
    assert snap["count"] == 4
    assert snap["avg"] == 25.0
    assert snap["p50"] == 20.0
    assert snap["p95"] == 40.0
    assert snap["min"] == 10.0
    assert snap["max"] == 40.0


def test_histogram_window_keeps_latest_samples():
    reg = MetricsRegistry(histogram_window=3)
    h = reg.histogram("latency")
    for v in (1.0, 2.0, 3.0, 4.0):
        h.observe(v)

    summary = h.summary()

    assert summary["count"] == 3
    assert summary["min"] == 2.0


def test_empty_histogram_snapshot():
    reg = MetricsRegistry()
    reg.histogram("latency")

    assert reg.snapshot()["histograms"][0]["count"] == 0


def test_time_request_records_on_error():
    with pytest.raises(RuntimeError):
        with metrics.time_request("barcode"):
            raise RuntimeError("boom")

    histograms = metrics.snapshot()["histograms"]
    assert histograms[0]["name"] == "recognition_latency_ms"
    assert histograms[0]["tags"] == {"kind": "barcode"}
    assert histograms[0]["count"] == 1


def test_reset_all():
    metrics.record_request("photo", "success")
    metrics.record_fallback("all_providers_failed")

    metrics.reset_all()

    assert metrics.snapshot()["counters"] == []
    assert metrics.counter_value("recognition_requests_total", kind="photo", status="success") == 0
