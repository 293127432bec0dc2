"""Exporter settings.

Defaults live here and can be overridden from the environment
(``PRESTO_EXPORTER_`` prefix) and then from command-line flags.
"""

from dataclasses import dataclass

import httpx
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from presto_exporter.core.config.enums import LogFormat, LogLevel
from presto_exporter.core.exceptions import ConfigurationError

DEFAULT_HOST = "0.0.0.0"


class Settings(BaseSettings):
    """Environment-backed defaults.

    Env vars:
        PRESTO_EXPORTER_WEB_LISTEN_ADDRESS=:9482
        PRESTO_EXPORTER_WEB_URL=http://coordinator:8080/v1/cluster
    """

    model_config = SettingsConfigDict(
        env_prefix="PRESTO_EXPORTER_",
        extra="ignore",
    )

    WEB_LISTEN_ADDRESS: str = Field(
        ":9482", description="Address on which to expose metrics and web interface."
    )
    WEB_TELEMETRY_PATH: str = Field("/metrics", description="Path under which to expose metrics.")
    WEB_URL: str = Field("http://localhost:8080/v1/cluster", description="Presto cluster address.")
    WEB_TIMEOUT: float = Field(5.0, gt=0, description="Timeout in seconds for cluster requests.")
    LOG_LEVEL: LogLevel = Field(LogLevel.INFO, description="Minimum level of logged messages.")
    LOG_FORMAT: LogFormat = Field(LogFormat.LOGFMT, description="Output format of log messages.")


def parse_listen_address(address: str) -> tuple[str, int]:
    """Split ``host:port`` into its parts.

    An empty host (``":9482"``) binds every interface. IPv6 hosts must be
    bracketed (``"[::1]:9482"``).

    Raises:
        ConfigurationError: If the port is missing or not a valid TCP port.
    """
    host, sep, port_text = address.rpartition(":")
    if not sep:
        raise ConfigurationError(f"Listen address {address!r} is missing a port")
    host = host.strip("[]") or DEFAULT_HOST
    try:
        port = int(port_text)
    except ValueError:
        raise ConfigurationError(f"Listen address {address!r} has an invalid port") from None
    if not 0 <= port <= 65535:
        raise ConfigurationError(f"Listen address {address!r} has an out of range port")
    return host, port


def _validate_url(url: str) -> None:
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"Cluster URL {url!r} is invalid: {e}") from None
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ConfigurationError(f"Cluster URL {url!r} must be an absolute http(s) URL")


@dataclass(frozen=True)
class ExporterConfig:
    """Exporter configuration, read once at startup.

    Attributes:
        listen_address: ``host:port`` the metrics server binds to
        telemetry_path: Path of the scrape endpoint
        url: Presto ``/v1/cluster`` URL
        timeout: Seconds before a cluster request is abandoned
        log_level: Minimum level of logged messages
        log_format: ``logfmt`` or ``json``
    """

    listen_address: str
    telemetry_path: str
    url: str
    timeout: float = 5.0
    log_level: LogLevel = LogLevel.INFO
    log_format: LogFormat = LogFormat.LOGFMT

    def __post_init__(self) -> None:
        if not self.telemetry_path.startswith("/"):
            raise ConfigurationError(
                f"Telemetry path {self.telemetry_path!r} must start with '/'"
            )
        if self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {self.timeout}")
        parse_listen_address(self.listen_address)
        _validate_url(self.url)

    @property
    def host(self) -> str:
        return parse_listen_address(self.listen_address)[0]

    @property
    def port(self) -> int:
        return parse_listen_address(self.listen_address)[1]

    @classmethod
    def from_settings(cls, source: Settings) -> "ExporterConfig":
        """Build config from environment settings."""
        return cls(
            listen_address=source.WEB_LISTEN_ADDRESS,
            telemetry_path=source.WEB_TELEMETRY_PATH,
            url=source.WEB_URL,
            timeout=source.WEB_TIMEOUT,
            log_level=source.LOG_LEVEL,
            log_format=source.LOG_FORMAT,
        )
