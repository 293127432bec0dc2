"""Root conftest for pytest configuration and shared fixtures."""

import logging

import httpx
import pytest

# Register pytest-asyncio plugin at the root level
pytest_plugins = ("pytest_asyncio",)

CLUSTER_URL = "http://presto.test/v1/cluster"

EXAMPLE_BODY = (
    b'{"runningQueries":3,"blockedQueries":0,"queuedQueries":1,"activeWorkers":5,'
    b'"runningDrivers":12,"reservedMemory":104857600,"totalInputRows":900000,'
    b'"totalInputBytes":52428800,"totalCpuTimeSecs":412.5}'
)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo configure_logging() so caplog sees every record."""
    yield
    package_logger = logging.getLogger("presto_exporter")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


# ---------------------------------------------------------------------------
# Shared fake fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_cluster_client():
    """Fake ClusterStatusClient returning zeroed snapshots."""
    from presto_exporter.adapters.cluster import FakeClusterStatusClient

    return FakeClusterStatusClient(url=CLUSTER_URL)


@pytest.fixture
def fake_renderer():
    """Fake MetricsRenderer that records generate() calls."""
    from presto_exporter.adapters.metrics import FakeMetricsRenderer

    return FakeMetricsRenderer()


@pytest.fixture
def example_body() -> bytes:
    """Cluster status document with every tracked field set."""
    return EXAMPLE_BODY


@pytest.fixture
def make_http_client():
    """Build an HttpClusterStatusClient backed by an httpx.MockTransport."""
    from presto_exporter.adapters.cluster import HttpClusterStatusClient

    clients = []

    def _make(handler):
        http = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(http)
        return HttpClusterStatusClient(CLUSTER_URL, client=http)

    yield _make

    for http in clients:
        http.close()
