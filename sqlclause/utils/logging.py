"""Centralized logging configuration for sqlclause.

Every logger handed out by :func:`get_logger` lives under the ``sqlclause``
namespace, so applications can tune the whole library through one logger.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import msgspec

if TYPE_CHECKING:
    from logging import LogRecord

__all__ = (
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
    "log_with_context",
)

ROOT_LOGGER_NAME = "sqlclause"

_json_encoder = msgspec.json.Encoder()


class StructuredFormatter(logging.Formatter):
    """Render records as one JSON object per line.

    Fields passed through :func:`log_with_context` are merged into the top
    level, so a compiled statement logs its ``operation_type``,
    ``parameter_style``, ``clause_count`` and ``parameter_count`` next to the
    message.
    """

    def format(self, record: LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if hasattr(record, "extra_fields"):
            log_entry.update(record.extra_fields)  # pyright: ignore

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return _json_encoder.encode(log_entry).decode("utf-8")


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance inside the sqlclause namespace.

    Args:
        name: Logger name. If not provided, returns the root sqlclause logger.

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)


def configure_logging(
    level: str = "INFO",
    format_style: str = "structured",
    log_to_file: str | None = None,
    extra_handlers: list[logging.Handler] | None = None,
) -> None:
    """Install handlers on the ``sqlclause`` logger.

    The library is quiet by default. At ``DEBUG`` it reports every compiled
    statement and every option skipped because the statement kind has no use
    for it; at ``WARNING`` it reports placeholder mismatches tolerated by a
    lenient :class:`~sqlclause.core.config.StatementConfig`. The logger stops
    propagating to the root logger once configured.

    Args:
        level: Level name for the ``sqlclause`` logger.
        format_style: ``"structured"`` for JSON lines, anything else for plain text.
        log_to_file: Optional path of a file that always receives JSON lines.
        extra_handlers: Further handlers to attach.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    formatter: logging.Formatter
    if format_style == "structured":
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        file_handler = logging.FileHandler(log_to_file)
        # Files always get JSON
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

    if extra_handlers:
        for handler in extra_handlers:
            root_logger.addHandler(handler)

    root_logger.propagate = False

    root_logger.debug(
        "sqlclause logging configured",
        extra={
            "extra_fields": {
                "level": level,
                "format_style": format_style,
                "handlers_count": len(root_logger.handlers),
            }
        },
    )


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with structured extra fields.

    Args:
        logger: The logger to use
        level: Log level
        message: Log message
        **extra_fields: Additional fields to include in structured logs
    """
    if not logger.isEnabledFor(level):
        return
    logger.log(level, message, extra={"extra_fields": extra_fields})
