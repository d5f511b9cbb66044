"""Logging setup: structlog events rendered to the console and to a JSON lines file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import structlog

from config_monitor.config import LOG_FILE, LOG_LEVEL, VERBOSE_LOGGING

BoundLogger = structlog.stdlib.BoundLogger

# uvicorn access lines duplicate the monitor.* events
_QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")

_configured = False
_installed_handlers: list[logging.Handler] = []


def _coerce_level(value: str) -> int:
    """'10', 'debug' or 'DEBUG' -> logging level; unknown names fall back to INFO."""
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else logging.INFO


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _with_renderer(handler: logging.Handler, renderer: Any, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_shared_processors(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def configure_logging(level: int | str | None = None, log_file: Path | None = LOG_FILE) -> None:
    """Route structlog and stdlib logging to a colored console and, if log_file is set, a JSONL file.

    Calling it again replaces the handlers installed by the previous call.
    """
    global _configured
    if level is None:
        level = logging.DEBUG if VERBOSE_LOGGING else LOG_LEVEL
    if isinstance(level, str):
        level = _coerce_level(level)

    handlers = [_with_renderer(logging.StreamHandler(), structlog.dev.ConsoleRenderer(colors=True), level)]
    if log_file is not None:
        handlers.append(
            _with_renderer(
                logging.FileHandler(log_file, encoding="utf-8"),
                structlog.processors.JSONRenderer(),
                level,
            )
        )

    root_logger = logging.getLogger()
    for old in _installed_handlers:
        root_logger.removeHandler(old)
        old.close()
    _installed_handlers[:] = handlers
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
    logging.captureWarnings(True)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str = "config_monitor", **bindings: Any) -> BoundLogger:
    """Return a structured logger for name, configuring logging on first use."""
    if not _configured:
        configure_logging()
    logger = structlog.get_logger(name)
    return logger.bind(**bindings) if bindings else logger


def bind_context(**context: Any) -> None:
    """Bind context variables to be included with every log entry."""
    structlog.contextvars.bind_contextvars(**context)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
