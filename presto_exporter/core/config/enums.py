"""Configuration enums."""

from enum import Enum


class LogLevel(str, Enum):
    """Accepted values for ``--log.level``."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class LogFormat(str, Enum):
    """Accepted values for ``--log.format``."""

    LOGFMT = "logfmt"
    JSON = "json"
