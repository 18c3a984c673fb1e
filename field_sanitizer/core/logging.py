"""Structured JSON Logging Configuration.

The library logs under the ``field_sanitizer`` logger and never touches the
root logger on import. Applications that want the library's own output call
setup_logging() once at startup; otherwise records propagate to whatever
handlers the host application configured.
"""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from .config import settings

LIBRARY_LOGGER_NAME = "field_sanitizer"

logging.getLogger(LIBRARY_LOGGER_NAME).addHandler(logging.NullHandler())


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter that includes standard source fields."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = record.created
        log_record['level'] = record.levelname
        log_record['logger'] = record.name

        log_record['file'] = record.filename
        log_record['line'] = record.lineno
        log_record['function'] = record.funcName

        log_record['process_id'] = record.process
        log_record['thread_id'] = record.thread


def setup_logging(level: str | None = None, log_format: str | None = None) -> logging.Logger:
    """Setup logging for the field_sanitizer logger.

    Args:
        level: Log level name (defaults to settings.LOG_LEVEL)
        log_format: 'json' or 'text' (defaults to settings.LOG_FORMAT)

    Returns:
        The configured library logger
    """
    level = (level or settings.LOG_LEVEL).upper()
    log_format = log_format or settings.LOG_FORMAT

    logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    logger.setLevel(getattr(logging, level))
    logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level))

    if log_format == 'json':
        formatter = CustomJsonFormatter(
            '%(timestamp)s %(level)s %(name)s %(message)s',
            timestamp=True
        )
    else:
        formatter = logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s')
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    logger.debug(
        "Logging configured",
        extra={
            'log_level': level,
            'log_format': log_format,
            'environment': settings.ENVIRONMENT
        }
    )

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
