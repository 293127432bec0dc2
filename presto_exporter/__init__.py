"""Prometheus exporter for Presto cluster status."""

__version__ = "0.1.0"
