"""Exporter entry point: flags, logging, wiring and the serve loop.

Usage:
    presto_exporter --web.url=http://coordinator:8080/v1/cluster
    python -m presto_exporter --web.listen-address=:9482
"""

import argparse
import asyncio
import logging
import platform
import sys
from typing import Sequence

from prometheus_client import CollectorRegistry, GCCollector, PlatformCollector, ProcessCollector

from presto_exporter import __version__
from presto_exporter.adapters.cluster import HttpClusterStatusClient
from presto_exporter.adapters.metrics import PrestoClusterCollector, PrometheusMetricsRenderer
from presto_exporter.api.server import MetricsServer
from presto_exporter.core.config import ExporterConfig, LogFormat, LogLevel, Settings, settings
from presto_exporter.core.exceptions import ConfigurationError
from presto_exporter.core.logging import configure_logging
from presto_exporter.core.protocols import ClusterStatusClient

logger = logging.getLogger(__name__)

PROGRAM = "presto_exporter"


def version_info() -> str:
    return f"(version={__version__}, python={platform.python_version()})"


def build_context() -> str:
    return f"(implementation={platform.python_implementation()}, platform={platform.platform()})"


def version_banner() -> str:
    return f"{PROGRAM}, version {__version__} (python {platform.python_version()})"


def build_parser(defaults: Settings) -> argparse.ArgumentParser:
    """Create the flag parser; environment settings provide the defaults."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM, description="Presto cluster exporter for Prometheus"
    )
    parser.add_argument(
        "--web.listen-address",
        dest="listen_address",
        default=defaults.WEB_LISTEN_ADDRESS,
        help="Address on which to expose metrics and web interface.",
    )
    parser.add_argument(
        "--web.telemetry-path",
        dest="telemetry_path",
        default=defaults.WEB_TELEMETRY_PATH,
        help="Path under which to expose metrics.",
    )
    parser.add_argument(
        "--web.url",
        dest="url",
        default=defaults.WEB_URL,
        help="Presto cluster address.",
    )
    parser.add_argument(
        "--web.timeout",
        dest="timeout",
        type=float,
        default=defaults.WEB_TIMEOUT,
        help="Timeout in seconds for requests to the Presto cluster.",
    )
    parser.add_argument(
        "--log.level",
        dest="log_level",
        choices=[level.value for level in LogLevel],
        default=defaults.LOG_LEVEL,
        help="Only log messages with the given severity or above.",
    )
    parser.add_argument(
        "--log.format",
        dest="log_format",
        choices=[fmt.value for fmt in LogFormat],
        default=defaults.LOG_FORMAT,
        help="Output format of log messages.",
    )
    parser.add_argument("--version", action="version", version=version_banner())
    return parser


def build_config(argv: Sequence[str] | None = None, defaults: Settings = settings) -> ExporterConfig:
    """Parse flags into an ``ExporterConfig``; invalid values exit with usage."""
    parser = build_parser(defaults)
    args = parser.parse_args(argv)
    flagged = defaults.model_copy(
        update={
            "WEB_LISTEN_ADDRESS": args.listen_address,
            "WEB_TELEMETRY_PATH": args.telemetry_path,
            "WEB_URL": args.url,
            "WEB_TIMEOUT": args.timeout,
            "LOG_LEVEL": LogLevel(args.log_level),
            "LOG_FORMAT": LogFormat(args.log_format),
        }
    )
    try:
        return ExporterConfig.from_settings(flagged)
    except ConfigurationError as e:
        parser.error(e.message)


def build_registry(client: ClusterStatusClient) -> CollectorRegistry:
    """Registry holding the cluster collector plus the process collectors."""
    registry = CollectorRegistry(auto_describe=True)
    ProcessCollector(registry=registry)
    PlatformCollector(registry=registry)
    GCCollector(registry=registry)
    registry.register(PrestoClusterCollector(client))
    return registry


async def serve(config: ExporterConfig, stop_event: asyncio.Event | None = None) -> None:
    """Serve metrics until ``stop_event`` is set (forever by default).

    Raises:
        SystemExit: If the listen socket cannot be bound.
    """
    stop_event = stop_event or asyncio.Event()
    client = HttpClusterStatusClient.from_config(config)
    server = MetricsServer(
        PrometheusMetricsRenderer(build_registry(client)),
        port=config.port,
        host=config.host,
        telemetry_path=config.telemetry_path,
    )
    try:
        try:
            await server.start()
        except OSError as e:
            logger.critical("Failed to listen on %s: %s", config.listen_address, e)
            raise SystemExit(1) from e
        await stop_event.wait()
    finally:
        await server.stop()
        client.close()


def run(argv: Sequence[str] | None = None) -> None:
    """Console script entry point."""
    config = build_config(argv)
    configure_logging(config.log_level, config.log_format)

    logger.info("Starting %s %s", PROGRAM, version_info())
    logger.info("Build context %s", build_context())
    logger.info("Scraping Presto cluster at %s", config.url)

    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("Shutting down")


if __name__ == "__main__":
    run(sys.argv[1:])
