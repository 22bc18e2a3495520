"""Logging module with structured formatters and per-calculation context."""

from .context import ContextFilter, LogContext, log_context, log_fare_context
from .filters import DefaultFareFieldsFilter
from .formatters import DevFormatter, JSONFormatter
from .setup import setup_logging, setup_logging_from_settings

__all__ = [
    "setup_logging",
    "setup_logging_from_settings",
    "log_context",
    "log_fare_context",
    "JSONFormatter",
    "DevFormatter",
    "DefaultFareFieldsFilter",
    "LogContext",
    "ContextFilter",
]
