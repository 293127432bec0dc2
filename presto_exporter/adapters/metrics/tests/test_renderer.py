"""Unit tests for the metrics renderers."""

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry

from presto_exporter.adapters.metrics import (
    FakeMetricsRenderer,
    PrestoClusterCollector,
    PrometheusMetricsRenderer,
)
from presto_exporter.core.protocols import MetricsRenderer
from presto_exporter.core.snapshot import StatusSnapshot


class TestPrometheusMetricsRenderer:
    def test_renders_registered_collector(self, fake_cluster_client):
        fake_cluster_client.set_snapshot(StatusSnapshot(active_workers=5))
        registry = CollectorRegistry()
        registry.register(PrestoClusterCollector(fake_cluster_client))
        renderer = PrometheusMetricsRenderer(registry)

        output = renderer.generate().decode()

        assert "presto_cluster_active_workers 5.0" in output

    def test_content_type_is_exposition_header(self):
        renderer = PrometheusMetricsRenderer(CollectorRegistry())

        assert renderer.content_type == CONTENT_TYPE_LATEST
        assert renderer.content_type.startswith("text/plain")
        assert renderer.content_type.count("charset") == 1

    def test_satisfies_protocol(self):
        assert isinstance(PrometheusMetricsRenderer(CollectorRegistry()), MetricsRenderer)


class TestFakeMetricsRenderer:
    def test_counts_generate_calls(self):
        fake = FakeMetricsRenderer()

        assert fake.generate() == b"# fake metrics\n"
        fake.generate()

        assert fake.generate_calls == 2
