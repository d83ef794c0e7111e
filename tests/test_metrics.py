"""Testes do agregador de metricas em memoria."""

import re
from concurrent.futures import ThreadPoolExecutor

from app.services.metrics import MetricsAggregator


def test_record_counts_and_averages():
    metrics = MetricsAggregator()
    for elapsed in (10.0, 20.0, 3.5):
        metrics.record("/add", elapsed)

    snap = metrics.snapshot()
    assert snap["/add"]["count"] == 3
    assert snap["/add"]["total_ms"] == 33.5
    assert snap["/add"]["avg_ms"] == 11.17


def test_paths_keep_first_seen_order():
    metrics = MetricsAggregator()
    for path in ("/health", "/add", "/health", "/metrics", "/add"):
        metrics.record(path, 1.0)

    assert list(metrics.snapshot()) == ["/health", "/add", "/metrics"]

    text = metrics.render_prometheus()
    counters = re.findall(r'^http_requests_total\{path="([^"]+)"\} (\d+)$', text, re.M)
    assert counters == [("/health", "2"), ("/add", "2"), ("/metrics", "1")]


def test_render_prometheus_format():
    metrics = MetricsAggregator()
    metrics.record("/add", 1.0)
    metrics.record("/add", 2.0)
    metrics.record("/divide", 0.123)

    assert metrics.render_prometheus() == (
        "# HELP http_requests_total Total number of requests\n"
        "# TYPE http_requests_total counter\n"
        'http_requests_total{path="/add"} 2\n'
        'http_requests_total{path="/divide"} 1\n'
        "# HELP http_response_time_ms Response time in milliseconds\n"
        "# TYPE http_response_time_ms gauge\n"
        'http_response_time_ms{path="/add"} 1.50\n'
        'http_response_time_ms{path="/divide"} 0.12\n'
    )


def test_render_without_observations_keeps_headers():
    text = MetricsAggregator().render_prometheus()
    assert "# TYPE http_requests_total counter" in text
    assert "# TYPE http_response_time_ms gauge" in text
    assert "{path=" not in text


def test_label_values_are_escaped():
    metrics = MetricsAggregator()
    metrics.record('/we"ird\\path', 1.0)
    assert 'http_requests_total{path="/we\\"ird\\\\path"} 1' in metrics.render_prometheus()


def test_concurrent_records_are_not_lost():
    metrics = MetricsAggregator()

    def _hit(_):
        for _ in range(500):
            metrics.record("/add", 1.0)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(_hit, range(8)))

    snap = metrics.snapshot()["/add"]
    assert snap["count"] == 4000
    assert snap["total_ms"] == 4000.0
