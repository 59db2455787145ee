"""Structured logging for the scoring engine.

The engine only emits events; applications embedding it call
``setup_logging()`` once at startup.
"""

import logging
import sys
from typing import Any

import structlog

from readiness.config import get_settings


def _renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stdout.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def setup_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """
    Configure structlog for the process.

    Args:
        level: Log level name. Defaults to the LOG_LEVEL setting.
        json_output: Render one JSON object per line. Defaults to True in production.
    """
    settings = get_settings()
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    if json_output is None:
        json_output = settings.is_production

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_output:
        processors.append(structlog.processors.dict_tracebacks)
    else:
        processors.extend([structlog.processors.StackInfoRenderer(), structlog.dev.set_exc_info])
    processors.append(_renderer(json_output))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None, **context: Any) -> structlog.BoundLogger:
    """Get a logger, optionally bound to initial context (e.g. a crawl id)."""
    return structlog.get_logger(name, **context)
