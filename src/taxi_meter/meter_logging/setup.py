"""Logging setup and configuration."""

import logging
import sys

from ..settings import LoggingSettings

from .context import ContextFilter
from .filters import DefaultSessionFilter
from .formatters import DevFormatter, JSONFormatter


def setup_logging(settings: LoggingSettings) -> logging.Handler:
    """Route all records to stdout through the ride filters and chosen formatter."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    if settings.json_output:
        handler.setFormatter(JSONFormatter(settings.environment))
    else:
        handler.setFormatter(DevFormatter())

    # ContextFilter runs first so a bound session_id wins over the placeholder.
    handler.addFilter(ContextFilter())
    handler.addFilter(DefaultSessionFilter())

    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, settings.level))
    return handler
