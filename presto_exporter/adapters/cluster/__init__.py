"""Cluster status adapters — HTTP and Fake implementations."""

from presto_exporter.adapters.cluster.fake import FakeClusterStatusClient
from presto_exporter.adapters.cluster.http import HttpClusterStatusClient

__all__ = [
    "FakeClusterStatusClient",
    "HttpClusterStatusClient",
]
