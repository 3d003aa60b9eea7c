"""Logging configuration using structlog for structured logging."""

import logging
import sys
from collections.abc import MutableMapping
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer
from structlog.stdlib import LoggerFactory, add_log_level, add_logger_name

# Standard library logging levels mapping
_LOG_LEVELS = {
    "TRACE": logging.DEBUG - 5,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Keys that must never reach a log sink verbatim
_REDACTED_KEYS = frozenset({"key", "api_key"})

_handlers: list[logging.Handler] = []


def _get_level_no(level_name: str) -> int:
    """Get numeric log level from name."""
    level_name = level_name.upper()
    return _LOG_LEVELS.get(level_name, logging.INFO)


def _redact_secrets(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Mask API keys bound into log events."""
    for key in _REDACTED_KEYS.intersection(event_dict):
        if event_dict[key]:
            event_dict[key] = "***"
    return event_dict


def _shared_processors() -> list[structlog.typing.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        add_log_level,
        add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _redact_secrets,
    ]


def _create_console_renderer() -> ConsoleRenderer:
    """Create console renderer with custom formatting."""
    return ConsoleRenderer(
        colors=sys.stderr.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def _create_json_renderer() -> JSONRenderer:
    """Create JSON renderer for file logs."""
    return JSONRenderer()


def configure_logging(
    log_level: str = "INFO",
    log_file: Path | None = None,
    json_console: bool = False,
) -> None:
    """Configure structlog logging for applications embedding the client.

    The library never calls this itself; its loggers stay silent until an
    application (or the CLI) configures output.

    Args:
        log_level: Minimum console log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional JSON log file (DEBUG and above, rotated at 10MB)
        json_console: Render console output as JSON instead of key=value
    """
    root_logger = logging.getLogger()
    for handler in _handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()

    level = _get_level_no(log_level)
    root_logger.setLevel(logging.DEBUG if log_file else level)

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_renderer: Any = (
        _create_json_renderer() if json_console else _create_console_renderer()
    )
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=console_renderer,
            foreign_pre_chain=_shared_processors(),
        )
    )
    root_logger.addHandler(console_handler)
    _handlers.append(console_handler)

    if log_file:
        log_file.parent.mkdir(exist_ok=True, parents=True)
        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=10 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=_create_json_renderer(),
                foreign_pre_chain=_shared_processors(),
            )
        )
        root_logger.addHandler(file_handler)
        _handlers.append(file_handler)

    get_logger(__name__).debug(
        "logging_configured",
        console_level=log_level,
        log_file=str(log_file) if log_file else None,
    )


def get_logger(name: str) -> Any:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger bound to the given name

    Note:
        Events are routed through the stdlib logger of the same name, so
        nothing is printed until an application configures logging.
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )
