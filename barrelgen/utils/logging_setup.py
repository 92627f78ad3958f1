"""
Logging configuration for auto-barrel.

Provides environment-aware logging that:
- Writes to stderr so generated output and logs never mix
- Outputs JSON when BARREL_LOG_FORMAT=json
- Supports an optional rotating log file
- Includes custom TRACE level for per-entry debugging
"""

import sys
import logging
import json
import os
from datetime import datetime, timezone
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional, Any

# Define TRACE level (lower number = more detailed)
TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def trace(self, message, *args, **kwargs):
    if self.isEnabledFor(TRACE_LEVEL):
        self._log(TRACE_LEVEL, message, args, **kwargs)


logging.Logger.trace = trace


def add_trace_to_logger():
    """Ensure trace method is available on all logger instances"""
    if not hasattr(logging.Logger, 'trace'):
        logging.Logger.trace = trace


class JsonFormatter(logging.Formatter):
    """One JSON object per log line"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'component': record.name,
            'message': record.getMessage(),
            'pid': os.getpid(),
        }

        if hasattr(record, 'extra'):
            log_data.update(record.extra)

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def resolve_level(log_level: Optional[str] = None) -> int:
    """
    Resolve a level name to its numeric value.

    BARREL_LOG_LEVEL takes precedence over LOG_LEVEL; unknown names fall
    back to INFO.
    """
    level_str = log_level or os.environ.get('BARREL_LOG_LEVEL') or os.environ.get('LOG_LEVEL', 'INFO')
    if level_str.upper() == 'TRACE':
        return TRACE_LEVEL
    level = getattr(logging, level_str.upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure root logging for a command-line run.

    Args:
        log_level: Override log level (defaults to BARREL_LOG_LEVEL / LOG_LEVEL or INFO)
        log_file: Optional path of a rotating log file written in addition to stderr
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of backup files to keep
    """
    add_trace_to_logger()
    level = resolve_level(log_level)

    root_logger = logging.getLogger()
    root_logger.handlers = []

    handler = logging.StreamHandler(sys.stderr)
    if os.environ.get('BARREL_LOG_FORMAT', '').lower() == 'json':
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            str(log_path),
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)

    logging.getLogger('auto-barrel').debug(
        f"Logging configured - Level: {logging.getLevelName(level)}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    add_trace_to_logger()
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any
) -> None:
    """
    Log a message with additional context fields.

    Args:
        logger: Logger instance
        level: Log level (e.g., logging.INFO)
        message: Log message
        **context: Additional fields to include in structured logs
    """
    extra = {'extra': context} if context else {}
    logger.log(level, message, extra=extra)
