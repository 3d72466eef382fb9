"""Per-ride logging context.

Fields bound with log_context are copied onto every record by
ContextFilter. Nested contexts add fields and the outer set comes back
when the inner block exits.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..session import RideSession

_ride_fields: ContextVar[dict[str, Any] | None] = ContextVar("ride_log_fields", default=None)


def current_context() -> dict[str, Any]:
    return dict(_ride_fields.get() or {})


class ContextFilter(logging.Filter):
    """Copies bound ride fields onto records without overriding explicit extras."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in (_ride_fields.get() or {}).items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


@contextmanager
def log_context(**fields: Any) -> Iterator[None]:
    token = _ride_fields.set({**current_context(), **fields})
    try:
        yield
    finally:
        _ride_fields.reset(token)


@contextmanager
def log_session_context(session: "RideSession") -> Iterator[None]:
    """Bind the session, driver and passenger ids while a ride is processed."""
    with log_context(
        session_id=session.session_id,
        driver_id=session.driver.id,
        passenger_id=session.passenger.id,
    ):
        yield
