"""Metrics renderer adapters (Prometheus + Fake).

The Prometheus renderer serializes every collector registered on a
CollectorRegistry into the text exposition format.
"""

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest

from presto_exporter.core.protocols.metrics import MetricsRenderer


class PrometheusMetricsRenderer(MetricsRenderer):
    """Render all metrics in a CollectorRegistry."""

    def __init__(self, registry: CollectorRegistry) -> None:
        self._registry = registry

    @property
    def content_type(self) -> str:
        return CONTENT_TYPE_LATEST

    def generate(self) -> bytes:
        return generate_latest(self._registry)


# ---------------------------------------------------------------------------
# Fake
# ---------------------------------------------------------------------------


class FakeMetricsRenderer(MetricsRenderer):
    """In-memory spy implementing the MetricsRenderer protocol."""

    def __init__(self, body: bytes = b"# fake metrics\n") -> None:
        self._body = body
        self.generate_calls: int = 0

    @property
    def content_type(self) -> str:
        return "text/plain; charset=utf-8"

    def generate(self) -> bytes:
        self.generate_calls += 1
        return self._body
