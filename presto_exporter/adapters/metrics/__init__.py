"""Metrics adapters — Prometheus collector and renderers.

Re-exports every public adapter so consumers can import directly from
``presto_exporter.adapters.metrics``.
"""

from presto_exporter.adapters.metrics.collector import PrestoClusterCollector
from presto_exporter.adapters.metrics.renderer import FakeMetricsRenderer, PrometheusMetricsRenderer

__all__ = [
    "FakeMetricsRenderer",
    "PrestoClusterCollector",
    "PrometheusMetricsRenderer",
]
