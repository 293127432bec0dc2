"""Configuration module for the Presto exporter.

Usage:
    from presto_exporter.core.config import settings, LogFormat

    if settings.LOG_FORMAT == LogFormat.JSON:
        ...
"""

from presto_exporter.core.config.enums import LogFormat, LogLevel
from presto_exporter.core.config.settings import ExporterConfig, Settings, parse_listen_address

__all__ = [
    "ExporterConfig",
    "LogFormat",
    "LogLevel",
    "Settings",
    "parse_listen_address",
    "settings",
]

# Singleton settings instance
settings = Settings()
