"""
Logging Infrastructure

Handlers for the `envsettings` logger. Everything the package logs goes
through loggers under that name; the root logger and any handlers the host
application installed are left alone.
"""

import logging
import logging.handlers
import json
import sys
from pathlib import Path
from datetime import datetime, timezone
from typing import Optional

PACKAGE_LOGGER = 'envsettings'

# Context passed as extra={'setting': ..., 'origin': ...}
CONTEXT_FIELDS = ('setting', 'origin', 'count')


def _context(record: logging.LogRecord) -> dict:
    return {field: getattr(record, field) for field in CONTEXT_FIELDS if hasattr(record, field)}


class JSONFormatter(logging.Formatter):
    """
    Format log records as JSON.

    Produces structured logs suitable for log aggregation systems.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        log_data = {
            'timestamp': timestamp.isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        log_data.update(_context(record))
        return json.dumps(log_data)


class TextFormatter(logging.Formatter):
    """
    Human-readable formatter; context fields are appended as key=value.
    """

    def __init__(self):
        super().__init__(
            fmt='%(asctime)s [%(levelname)8s] %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if context:
            line += ' ' + ' '.join(f"{name}={value}" for name, value in context.items())
        return line


def _is_own_handler(handler: logging.Handler) -> bool:
    return getattr(handler, '_envsettings_handler', False)


def setup_logging(
    level: str = 'INFO',
    log_file: Optional[str] = None,
    max_bytes: int = 10_485_760,
    backup_count: int = 5,
    format_type: str = 'json',
    console: bool = True
) -> logging.Logger:
    """
    Configure the `envsettings` package logger.

    Calling it again replaces the handlers installed by the previous call.
    When console or file output is enabled, records stop propagating to the
    root logger so they are not emitted twice; with neither, the package
    logger only sets its level and propagates as usual.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (None to disable file logging)
        max_bytes: Maximum log file size before rotation
        backup_count: Number of backup files to keep
        format_type: 'json' or 'text'
        console: Whether to log to stdout

    Returns:
        The package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper()))

    for handler in [h for h in package_logger.handlers if _is_own_handler(h)]:
        package_logger.removeHandler(handler)
        handler.close()

    formatter = JSONFormatter() if format_type == 'json' else TextFormatter()

    handlers = []
    if console:
        handlers.append(logging.StreamHandler(sys.stdout))

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        ))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._envsettings_handler = True
        package_logger.addHandler(handler)

    package_logger.propagate = not handlers

    package_logger.info(f"Logging initialized: level={level}, format={format_type}, file={log_file}")
    return package_logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the package namespace.

    Args:
        name: Dotted suffix, or a full name already starting with 'envsettings'.
            None returns the package logger itself.

    Returns:
        Logger instance
    """
    if not name or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if name.startswith(PACKAGE_LOGGER + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
