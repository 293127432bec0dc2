"""Cluster status protocol.

Implementations fetch and decode one ``/v1/cluster`` document per call and
raise a ``ClusterStatusError`` subclass on any failure.
"""

from typing import Protocol, runtime_checkable

from presto_exporter.core.snapshot import StatusSnapshot


@runtime_checkable
class ClusterStatusClient(Protocol):
    """Protocol for fetching the current cluster status."""

    @property
    def url(self) -> str:
        """Cluster status URL, used in log messages."""
        ...

    def fetch(self) -> StatusSnapshot:
        """Fetch and decode the status document.

        Returns:
            A fresh ``StatusSnapshot``.

        Raises:
            ClusterStatusError: On transport, status code, read or decode failure.
        """
        ...
