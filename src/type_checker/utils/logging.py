"""
Structured logging setup (structlog over stdlib logging).

Library modules log through ``get_logger``: structlog loggers wrapping a stdlib
logger under the ``type_checker`` hierarchy. Until an application configures
logging, stdlib drops debug events, so predicates print nothing.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import structlog

from type_checker.config.settings import LoggingSettings, get_settings

ROOT_LOGGER_NAME = "type_checker"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> Any:
    """Return a structlog logger emitting through ``logging.getLogger(name)``."""
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(settings: Optional[LoggingSettings] = None, **overrides: Any) -> LoggingSettings:
    """
    Configure structlog rendering and the ``type_checker`` stdlib logger.

    Uses ``settings`` (default: the global Settings().logging) with any keyword
    overrides applied, e.g. ``configure_logging(log_level="DEBUG")``. Rendered
    events go to stdout. Calling it again replaces the previous handler.
    Returns the effective LoggingSettings. The library never calls this on import.
    """
    global _handler

    base = settings or get_settings().logging
    if overrides:
        base = LoggingSettings.model_validate({**base.model_dump(), **overrides})
    level = _LEVELS[base.log_level]

    renderer: Any
    if base.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(_handler)
    root.setLevel(level)
    root.propagate = False
    return base


def reset_logging() -> None:
    """Undo ``configure_logging``: drop the handler and restore stdlib defaults."""
    global _handler

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        root.removeHandler(_handler)
        _handler = None
    root.setLevel(logging.NOTSET)
    root.propagate = True
    structlog.reset_defaults()
