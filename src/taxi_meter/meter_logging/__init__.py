"""Logging module with ride-aware formatters and per-session context."""

from .context import ContextFilter, current_context, log_context, log_session_context
from .filters import DefaultSessionFilter
from .formatters import RIDE_FIELDS, DevFormatter, JSONFormatter
from .setup import setup_logging

__all__ = [
    "setup_logging",
    "log_context",
    "log_session_context",
    "current_context",
    "JSONFormatter",
    "DevFormatter",
    "RIDE_FIELDS",
    "DefaultSessionFilter",
    "ContextFilter",
]
