"""Prometheus collector translating Presto cluster status into gauges.

Registered on a ``CollectorRegistry``; ``describe()`` runs once at
registration and ``collect()`` on every scrape. Each scrape fetches a fresh
snapshot and nothing is cached between scrapes, so a failed fetch yields no
samples instead of stale ones.
"""

import logging
from collections.abc import Iterator

from prometheus_client.core import GaugeMetricFamily
from prometheus_client.registry import Collector

from presto_exporter.core.catalog import CATALOG, MetricIdentity
from presto_exporter.core.exceptions import ClusterStatusError, UnexpectedStatusCodeError
from presto_exporter.core.protocols.cluster import ClusterStatusClient
from presto_exporter.core.snapshot import StatusSnapshot

logger = logging.getLogger(__name__)


class PrestoClusterCollector(Collector):
    """Expose one unlabelled gauge per catalog identity."""

    def __init__(
        self,
        client: ClusterStatusClient,
        catalog: tuple[MetricIdentity, ...] = CATALOG,
    ) -> None:
        self._client = client
        self._catalog = catalog

    def describe(self) -> Iterator[GaugeMetricFamily]:
        """Advertise every identity without touching the cluster."""
        for identity in self._catalog:
            yield GaugeMetricFamily(identity.name, identity.help)

    def collect(self) -> Iterator[GaugeMetricFamily]:
        """Fetch the cluster status and emit one sample per identity."""
        snapshot = self._fetch()
        if snapshot is None:
            return
        yield from self._emit(snapshot)

    def _fetch(self) -> StatusSnapshot | None:
        try:
            return self._client.fetch()
        except UnexpectedStatusCodeError as e:
            logger.error(
                "Scrape of %s failed: unexpected status code %d", e.url, e.status_code
            )
        except ClusterStatusError as e:
            logger.error("Scrape of %s failed: %s", e.url, e.message)
        return None

    def _emit(self, snapshot: StatusSnapshot) -> Iterator[GaugeMetricFamily]:
        for identity in self._catalog:
            yield GaugeMetricFamily(
                identity.name,
                identity.help,
                value=snapshot.value_of(identity.field),
            )
