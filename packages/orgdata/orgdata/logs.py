"""
structlog setup for processes that use orgdata.

The library itself only emits events through ``structlog.get_logger()``;
installing renderers and a level filter is a process-wide step the host
application takes once, by calling ``configure_logging``.
"""

from __future__ import annotations

import logging

import structlog

from .config import LoggingConfig


def _renderer(fmt: str):
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(settings: LoggingConfig | None = None) -> None:
    """Install structlog processors and a minimum level from ``settings``."""
    settings = settings or LoggingConfig()
    min_level = getattr(logging, settings.level.upper())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _renderer(settings.format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
    )
