"""
Structured logging for sceneparse.

Helpers that attach operation names, error codes and context to log records,
plus the handler setup used when an application wants sceneparse's own
console and JSON file output. Importing this module configures nothing.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from sceneparse.shared.constants.system import Logging
from sceneparse.shared.errors import ErrorContext, SceneParseError

if TYPE_CHECKING:
    from sceneparse.config.models import LoggingSettings, Settings


class StructuredFormatter(logging.Formatter):
    """
    Formatter that renders every record as one JSON object per line.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record as JSON.

        Args:
            record: Log record

        Returns:
            JSON string for the record
        """
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created,
                tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in ("error_code", "context", "operation", "duration_ms", "result_info", "release"):
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def _create_rich_console() -> Console:
    """
    Create the Rich console used for log output.

    Returns:
        Console with the sceneparse log theme
    """
    custom_theme = Theme(
        {
            "logging.level.debug": "cyan",
            "logging.level.info": "green",
            "logging.level.warning": "yellow",
            "logging.level.error": "red bold",
            "logging.level.critical": "red bold reverse",
            "log.time": "dim cyan",
            "log.message": "white",
            "log.path": "dim blue",
        }
    )
    return Console(theme=custom_theme, stderr=True)


def setup_structured_logger(
    name: str = Logging.ROOT_LOGGER,
    level: str = Logging.DEFAULT_LEVEL,
    log_file: str | None = None,
    *,
    use_rich_console: bool = True,
) -> logging.Logger:
    """
    Configure a logger for console and optional JSON file output.

    Args:
        name: Logger name (default: "sceneparse")
        level: Log level name (default: "INFO")
        log_file: Path of a JSON-lines log file (optional)
        use_rich_console: Use Rich for console output instead of JSON

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)

    # Reconfiguring replaces earlier handlers instead of duplicating output.
    if logger.handlers:
        for existing in list(logger.handlers):
            existing.close()
        logger.handlers.clear()

    log_level = getattr(logging, level.upper())
    logger.setLevel(log_level)

    if use_rich_console:
        handler: logging.Handler = RichHandler(
            console=_create_rich_console(),
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            log_time_format=Logging.CONSOLE_TIME_FORMAT,
        )
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter())
    handler.setLevel(log_level)
    logger.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding=Logging.FILE_ENCODING)
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def configure_logging(settings: Settings | LoggingSettings) -> logging.Logger:
    """
    Apply the ``logging`` section of the settings to the package logger.

    Accepts either the whole settings object or just its logging section.
    """
    section = getattr(settings, "logging", settings)
    return setup_structured_logger(
        Logging.ROOT_LOGGER,
        level=section.level,
        log_file=str(section.file) if section.file else None,
        use_rich_console=section.use_rich_console,
    )


def _context_to_dict(context: dict[str, Any] | ErrorContext | None) -> dict[str, Any]:
    if not context:
        return {}
    if isinstance(context, ErrorContext):
        return context.safe_dict()
    return dict(context)


def log_operation_error(
    logger: logging.Logger,
    error: SceneParseError,
    operation: str | None = None,
    context: dict[str, Any] | ErrorContext | None = None,
    additional_context: dict[str, Any] | ErrorContext | None = None,
) -> None:
    """
    Log a SceneParseError with its code and merged context.

    Args:
        logger: Logger instance
        error: The error to log
        operation: Operation name, defaults to the one in the error context
        context: Extra context merged over the error's own
        additional_context: Further context merged last
    """
    context_dict: dict[str, Any] = {}
    if error.context:
        context_dict.update(error.context.safe_dict())
    context_dict.update(_context_to_dict(context))
    context_dict.update(_context_to_dict(additional_context))

    if operation is None and error.context:
        operation = error.context.operation

    logger.error(
        error.message,
        extra={
            "error_code": error.code.name,
            "context": context_dict,
            "operation": operation,
        },
        exc_info=error.original_error,
    )


def log_operation_success(
    logger: logging.Logger,
    operation: str,
    duration_ms: float,
    result_info: dict[str, Any] | None = None,
    context: dict[str, Any] | ErrorContext | None = None,
) -> None:
    """
    Log the successful end of an operation at DEBUG level.

    Args:
        logger: Logger instance
        operation: Operation name
        duration_ms: Elapsed time in milliseconds
        result_info: Summary of the result (optional)
        context: Context information (optional)
    """
    logger.debug(
        "Operation '%s' completed successfully",
        operation,
        extra={
            "operation": operation,
            "duration_ms": duration_ms,
            "result_info": result_info or {},
            "context": _context_to_dict(context),
        },
    )


def log_operation_start(
    logger: logging.Logger,
    operation: str,
    context: dict[str, Any] | None = None,
) -> None:
    """
    Log the start of an operation at DEBUG level.
    """
    logger.debug(
        "Starting operation '%s'",
        operation,
        extra={
            "operation": operation,
            "context": context or {},
        },
    )


__all__ = [
    "StructuredFormatter",
    "configure_logging",
    "log_operation_error",
    "log_operation_start",
    "log_operation_success",
    "setup_structured_logger",
]
