"""
Logging configuration for versionid.

The package never configures logging on import; applications that want
to see versionid diagnostics (such as rejected version segments) call
configure_logging() once at startup.

Formats:
- console: [TIMESTAMP] LEVEL - LOGGER - MESSAGE
- json: one JSON object per record
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from versionid.settings import VersionIdSettings, get_settings

LOGGER_NAME = "versionid"


class JSONFormatter(logging.Formatter):
    """
    Formatter that outputs log records as JSON.

    Each record includes timestamp (ISO 8601, UTC), level, logger,
    message, module, function and line, plus the formatted exception
    when one is attached.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class ConsoleFormatter(logging.Formatter):
    """
    Human-readable formatter.

    Example: [2025-12-29 10:30:45] DEBUG - versionid.version - Rejected version segment 'abc' in 'abc'
    """

    def __init__(self):
        super().__init__(
            fmt="[%(asctime)s] %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )


def configure_logging(settings: Optional[VersionIdSettings] = None) -> logging.Logger:
    """
    Configure the versionid logger.

    Existing handlers on the versionid logger are replaced by a single
    stderr handler using the configured format. Records do not propagate
    to the root logger.

    Args:
        settings: Settings to apply (defaults to get_settings())

    Returns:
        The configured versionid logger

    Example:
        >>> logger = configure_logging(VersionIdSettings(log_level="DEBUG"))
    """
    if settings is None:
        settings = get_settings()

    log_level = getattr(logging, settings.log_level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.propagate = False
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    if settings.log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ConsoleFormatter())
    logger.addHandler(handler)

    return logger
