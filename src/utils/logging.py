# ============================================================================
# src/utils/logging.py
# ============================================================================
"""
Logging configuration and utilities for the critical medication registry.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict, Optional
from datetime import datetime, timezone
from functools import wraps
import json

from .exceptions import ConfigurationError

# Attributes copied from a WriteSummary-like result onto the timing record
COUNT_FIELDS = ("total_entries", "category_count")


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    format_json: bool = False
) -> None:
    """
    Configure root logging for the build script.

    Args:
        level: Logging level name, case-insensitive
        log_file: Optional file receiving a copy of every record
        format_json: Emit one JSON object per line instead of plain text

    Raises:
        ConfigurationError: If the level name is unknown
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ConfigurationError(f"Unknown log level: {level}")

    if format_json:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)


class JsonFormatter(logging.Formatter):
    """One JSON object per record; registry counts are included when attached."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        for name in COUNT_FIELDS + ('duration',):
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


def _result_counts(result: Any) -> Dict[str, int]:
    return {
        name: getattr(result, name)
        for name in COUNT_FIELDS
        if isinstance(getattr(result, name, None), int)
    }


def log_performance(logger: logging.Logger, operation: str):
    """
    Decorator timing a build step.

    On success the elapsed time is logged at INFO together with the entry and
    category counts of the result, when it has them. On failure the elapsed
    time and the error are logged at ERROR and the exception propagates.

    Args:
        logger: Logger receiving the timing record
        operation: Human readable name of the step
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration = round(time.perf_counter() - start, 3)
                logger.error(
                    f"{operation} failed after {duration:.3f}s: {e}",
                    extra={'duration': duration},
                )
                raise

            duration = round(time.perf_counter() - start, 3)
            counts = _result_counts(result)
            message = f"{operation} finished in {duration:.3f}s"
            if len(counts) == len(COUNT_FIELDS):
                message += (
                    f" ({counts['total_entries']} entries,"
                    f" {counts['category_count']} categories)"
                )
            logger.info(message, extra={'duration': duration, **counts})
            return result

        return wrapper
    return decorator
