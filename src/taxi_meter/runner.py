"""Drives an ordered event sequence through a ride session and logs the outcome."""

import logging
from collections.abc import Iterable
from typing import Any

from .events import TripEvent
from .meter_logging import log_session_context
from .results import EventResult, ProcessResult
from .session import RideSession

logger = logging.getLogger(__name__)


def process_events(session: RideSession, events: Iterable[TripEvent]) -> ProcessResult:
    """Feed events to the session in order, continuing past failures."""
    result = ProcessResult()

    with log_session_context(session):
        for event in events:
            event_result = session.process_event(event)
            result.event_results.append(event_result)

            extra = _event_fields(event, event_result)
            for message in event_result.log_messages:
                logger.info(message, extra=extra)
            if not event_result.success:
                logger.error("Event rejected: %s", event_result.error, extra=extra)

    result.final_fare = session.meter.current_fare
    result.session_info = session.summary()
    return result


def log_summary(summary: dict[str, Any]) -> None:
    logger.info("=== Session summary ===")
    for key, value in summary.items():
        logger.info("%s: %s", key, value)


def _event_fields(event: Any, result: EventResult) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "event_type": getattr(event, "event_type", type(event).__name__),
        "error_code": result.error_code,
    }
    if result.success:
        fields["fare_change"] = result.fare_change
        fields["new_total_fare"] = result.new_total_fare
    return fields
