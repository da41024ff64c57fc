"""
utils/logging.py — structlog setup for the WEO pipeline.

Events go to stderr so stdout stays free for CLI output. The renderer is
JSON for machines or coloured console lines for people (settings.log_format).
httpx/httpcore request chatter is held at WARNING unless running at DEBUG.

Usage:
    from weo_pipeline.utils.logging import configure_logging, get_logger

    configure_logging(log_level="DEBUG", log_format="json")
    log = get_logger(__name__, vintage="2023 - Apr")
    log.info("reshape_complete", tidy_rows=1234)
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from weo_shared.config import settings

_NOISY_LOGGERS = ("httpx", "httpcore")


def _renderer(log_format: str) -> Any:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    log_level: str | None = None,
    log_format: str | None = None,
) -> None:
    """
    Configure structlog and the stdlib root logger. Safe to call repeatedly.

    Args:
        log_level:  Overrides settings.log_level.
        log_format: Overrides settings.log_format ("json" | "console").
    """
    level = logging.getLevelNamesMapping().get(
        (log_level or settings.log_level).upper(), logging.INFO
    )

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr, level=level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level if level <= logging.DEBUG else logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            _renderer(log_format or settings.log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, **initial_values: Any) -> Any:
    """structlog logger for `name` with initial_values bound to every event."""
    logger = structlog.get_logger(name)
    return logger.bind(**initial_values) if initial_values else logger
