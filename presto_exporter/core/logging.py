"""Logging setup for the exporter.

Modules log through ``logging.getLogger(__name__)``; every such logger sits
under the ``presto_exporter`` package logger, whose handler renders records
through structlog as logfmt or JSON.
"""

import logging
import sys

import structlog

from presto_exporter.core.config.enums import LogFormat, LogLevel

logger = logging.getLogger("presto_exporter")

_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}

_KEY_ORDER = ["timestamp", "level", "logger", "event"]


def _renderer(fmt: LogFormat) -> structlog.types.Processor:
    if fmt == LogFormat.JSON:
        return structlog.processors.JSONRenderer()
    return structlog.processors.LogfmtRenderer(key_order=_KEY_ORDER, drop_missing=True)


def build_formatter(fmt: LogFormat = LogFormat.LOGFMT) -> structlog.stdlib.ProcessorFormatter:
    """Formatter turning stdlib records into structlog-rendered lines."""
    shared_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            _renderer(LogFormat(fmt)),
        ],
    )


def configure_logging(
    level: LogLevel = LogLevel.INFO,
    fmt: LogFormat = LogFormat.LOGFMT,
    stream=None,
) -> logging.Logger:
    """Install a single stream handler on the package logger.

    Calling this again replaces the previous handler.
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(build_formatter(fmt))

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(_LEVELS[LogLevel(level)])
    return logger
