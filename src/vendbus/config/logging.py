"""Structured logging setup."""

from __future__ import annotations

import logging
import sys

import structlog

from vendbus.core.exceptions import ConfigurationError


def _resolve_level(level: str) -> int:
    resolved = getattr(logging, level.upper(), None)
    if not isinstance(resolved, int):
        raise ConfigurationError(f"Unknown log level '{level}'", {"log_level": level})
    return resolved


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Configure structlog for the whole process.

    Logs go to stderr so command output on stdout stays machine readable.
    """
    renderer: structlog.typing.Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

