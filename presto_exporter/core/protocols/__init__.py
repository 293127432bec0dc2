"""Protocols for dependency injection."""

from presto_exporter.core.protocols.cluster import ClusterStatusClient
from presto_exporter.core.protocols.metrics import MetricsRenderer

__all__ = [
    "ClusterStatusClient",
    "MetricsRenderer",
]
