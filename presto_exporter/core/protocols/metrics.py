"""Metrics rendering protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsRenderer(Protocol):
    """Protocol for serializing metrics for scraping."""

    @property
    def content_type(self) -> str:
        """Full Content-Type header value of the payload, charset included."""
        ...

    def generate(self) -> bytes:
        """Serialize all registered metrics."""
        ...
