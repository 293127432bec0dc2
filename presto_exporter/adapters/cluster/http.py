"""HTTP cluster status client.

Issues one GET per ``fetch()`` with no retry. The response is opened with
``httpx.Client.stream`` so it is closed on every exit path, including the
early returns for a bad status code or an unreadable body.
"""

import httpx
from pydantic import ValidationError

from presto_exporter.core.config import ExporterConfig
from presto_exporter.core.exceptions import (
    StatusDecodeError,
    UnexpectedStatusCodeError,
    UpstreamReadError,
    UpstreamRequestError,
)
from presto_exporter.core.protocols.cluster import ClusterStatusClient
from presto_exporter.core.snapshot import StatusSnapshot


def _describe_error(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


def _describe_validation(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(p) for p in err["loc"]) or "body"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


class HttpClusterStatusClient(ClusterStatusClient):
    """Fetch ``/v1/cluster`` from a Presto coordinator over HTTP.

    Args:
        url: Cluster status URL.
        timeout: Seconds before the request is abandoned.
        client: Optional pre-built ``httpx.Client``; when given the caller
            owns it and ``close()`` leaves it open.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 5.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=httpx.Timeout(timeout))

    @classmethod
    def from_config(cls, config: ExporterConfig) -> "HttpClusterStatusClient":
        return cls(url=config.url, timeout=config.timeout)

    @property
    def url(self) -> str:
        return self._url

    def fetch(self) -> StatusSnapshot:
        """Fetch and decode the cluster status document.

        Raises:
            UpstreamRequestError: The request could not be sent or answered.
            UnexpectedStatusCodeError: The cluster answered with a non-200 status.
            UpstreamReadError: The response body could not be read.
            StatusDecodeError: The body is not a valid status document.
        """
        try:
            with self._client.stream("GET", self._url) as response:
                if response.status_code != httpx.codes.OK:
                    raise UnexpectedStatusCodeError(self._url, response.status_code)
                try:
                    body = response.read()
                except httpx.HTTPError as e:
                    raise UpstreamReadError(self._url, _describe_error(e)) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise UpstreamRequestError(self._url, _describe_error(e)) from e

        try:
            return StatusSnapshot.from_json(body)
        except ValidationError as e:
            raise StatusDecodeError(self._url, _describe_validation(e)) from e

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpClusterStatusClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
