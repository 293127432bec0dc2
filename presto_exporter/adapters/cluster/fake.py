"""In-memory cluster status client for tests."""

from presto_exporter.core.protocols.cluster import ClusterStatusClient
from presto_exporter.core.snapshot import StatusSnapshot


class FakeClusterStatusClient(ClusterStatusClient):
    """In-memory spy implementing the ClusterStatusClient protocol.

    Returns the configured snapshot, or raises the configured error, on every
    ``fetch()``.
    """

    def __init__(
        self,
        snapshot: StatusSnapshot | None = None,
        url: str = "http://presto.test/v1/cluster",
    ) -> None:
        self._url = url
        self._snapshot = snapshot or StatusSnapshot()
        self._error: Exception | None = None
        self.fetch_calls: int = 0

    @property
    def url(self) -> str:
        return self._url

    def fetch(self) -> StatusSnapshot:
        self.fetch_calls += 1
        if self._error is not None:
            raise self._error
        return self._snapshot

    # -- test helpers --

    def set_snapshot(self, snapshot: StatusSnapshot) -> None:
        self._snapshot = snapshot
        self._error = None

    def set_error(self, error: Exception) -> None:
        self._error = error

    def clear(self) -> None:
        self._snapshot = StatusSnapshot()
        self._error = None
        self.fetch_calls = 0
