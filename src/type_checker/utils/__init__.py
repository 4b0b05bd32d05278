"""Shared utilities for the type_checker package."""

from type_checker.utils.logging import configure_logging, get_logger, reset_logging

__all__ = ["configure_logging", "get_logger", "reset_logging"]
