"""Ride session state machine and orchestration of the meter."""

import logging
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel

from .core.exceptions import (
    AlreadyPaidError,
    InvalidPaymentMethodError,
    InvalidTransitionError,
    NotCompletedError,
)
from .events import TripEvent, TripEventType
from .fare import FareConfig
from .meter import TaxiMeter
from .payment import Payment, PaymentMethod
from .results import EventResult

logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    """Ride session lifecycle states."""

    WAITING = "waiting"
    PICKING_UP = "picking_up"
    ONBOARD = "onboard"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


VALID_TRANSITIONS: dict[SessionStatus, set[SessionStatus]] = {
    SessionStatus.WAITING: {
        SessionStatus.PICKING_UP,
        SessionStatus.ONBOARD,
        SessionStatus.CANCELLED,
    },
    SessionStatus.PICKING_UP: {SessionStatus.CANCELLED},
    SessionStatus.ONBOARD: {SessionStatus.COMPLETED},
    SessionStatus.COMPLETED: set(),
    SessionStatus.CANCELLED: set(),
}

# Edges open to dispatch-side callers. Onboard and completed are reached only
# through start and end events so the meter always runs while onboard.
DISPATCH_TRANSITIONS: dict[SessionStatus, set[SessionStatus]] = {
    SessionStatus.WAITING: {SessionStatus.PICKING_UP, SessionStatus.CANCELLED},
    SessionStatus.PICKING_UP: {SessionStatus.CANCELLED},
}

# Trip events that move the session: event type -> (required status, next status).
# Move and stop events leave the session status unchanged.
EVENT_TRANSITIONS: dict[TripEventType, tuple[SessionStatus, SessionStatus]] = {
    TripEventType.START: (SessionStatus.WAITING, SessionStatus.ONBOARD),
    TripEventType.END: (SessionStatus.ONBOARD, SessionStatus.COMPLETED),
}


class Driver(BaseModel):
    id: str
    name: str


class Passenger(BaseModel):
    id: str
    name: str


class RideSession:
    """One ride from boarding to payment.

    Owns its meter and an append-only log of every event received,
    including events that were rejected.
    """

    def __init__(
        self,
        session_id: str,
        driver: Driver,
        passenger: Passenger,
        config: FareConfig,
    ) -> None:
        self.session_id = session_id
        self.driver = driver
        self.passenger = passenger
        self.status = SessionStatus.WAITING
        self.start_time: datetime | None = None
        self.end_time: datetime | None = None
        self.meter = TaxiMeter(config)
        self.events: list[TripEvent] = []
        self.payment: Payment | None = None

    def transition_to(self, new_status: SessionStatus) -> None:
        """Move to picking up or cancelled on behalf of dispatch."""
        if new_status not in DISPATCH_TRANSITIONS.get(self.status, set()):
            self._reject_transition(new_status)
        self.status = new_status

    def _advance(self, new_status: SessionStatus) -> None:
        if new_status not in VALID_TRANSITIONS[self.status]:
            self._reject_transition(new_status)
        self.status = new_status

    def _reject_transition(self, new_status: SessionStatus) -> None:
        details = {"from": self.status.value, "to": new_status.value}
        if self.status in {SessionStatus.COMPLETED, SessionStatus.CANCELLED}:
            raise InvalidTransitionError(
                f"Cannot transition from terminal status {self.status.value}",
                details=details,
            )
        raise InvalidTransitionError(
            f"Invalid transition from {self.status.value} to {new_status.value}",
            details=details,
        )

    def process_event(self, event: TripEvent) -> EventResult:
        """Record the event, update the lifecycle and forward it to the meter."""
        self.events.append(event)

        event_type = getattr(event, "event_type", None)
        rule = _transition_rule(event_type)

        if rule is not None:
            required, _ = rule
            if self.status != required:
                error = InvalidTransitionError(
                    f"Cannot {event_type} ride in status: {self.status.value}",
                    details={"event_type": event_type, "status": self.status.value},
                )
                logger.debug("Session %s rejected %s event: %s", self.session_id, event_type, error)
                return EventResult.failure(error, f"Session {event_type} failed")

        meter_result = self.meter.process_event(event)
        if not meter_result.success:
            logger.debug(
                "Session %s meter rejected %s event: %s",
                self.session_id,
                event_type,
                meter_result.error,
            )
            return meter_result

        session_lines: list[str] = []
        if rule is not None:
            # committed only once the meter has accepted the event
            _, next_status = rule
            self._advance(next_status)
            if next_status == SessionStatus.ONBOARD:
                self.start_time = event.timestamp
                session_lines.append(f"Session started (ID: {self.session_id})")
            else:
                self.end_time = event.timestamp
                session_lines.append(f"Session ended (ID: {self.session_id})")

        meter_result.log_messages = session_lines + meter_result.log_messages
        return meter_result

    def process_payment(self, method: PaymentMethod | str, now: datetime) -> EventResult:
        """Record the single payment allowed for a completed ride."""
        try:
            method = PaymentMethod(method)
        except ValueError:
            return EventResult.failure(
                InvalidPaymentMethodError(
                    f"Unsupported payment method: {method!r}",
                    details={"method": method},
                ),
                "Payment failed: unsupported method",
            )

        if self.status != SessionStatus.COMPLETED:
            return EventResult.failure(
                NotCompletedError(
                    "Cannot process payment for incomplete ride",
                    details={"status": self.status.value},
                ),
                "Payment failed: ride not completed",
            )

        if self.payment is not None:
            return EventResult.failure(
                AlreadyPaidError("Payment already processed"),
                "Payment failed: already paid",
            )

        self.payment = Payment(
            method=method,
            amount=self.meter.current_fare,
            processed_at=now,
        )

        return EventResult(
            success=True,
            message="Payment completed",
            new_total_fare=self.payment.amount,
            log_messages=[f"Payment completed: {self.payment.method.value} - {self.payment.amount}"],
        )

    def summary(self) -> dict[str, Any]:
        """Read-only snapshot of the session."""
        summary: dict[str, Any] = {
            "session_id": self.session_id,
            "driver": self.driver.name,
            "driver_id": self.driver.id,
            "passenger": self.passenger.name,
            "passenger_id": self.passenger.id,
            "status": self.status.value,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "total_distance": self.meter.total_distance,
            "total_time": self.meter.total_time,
            "final_fare": self.meter.current_fare,
            "event_count": len(self.events),
        }

        if self.payment is not None:
            summary["payment_method"] = self.payment.method.value
            summary["payment_amount"] = self.payment.amount
            summary["payment_processed"] = self.payment.processed_at

        return summary


def _transition_rule(event_type: Any) -> tuple[SessionStatus, SessionStatus] | None:
    try:
        return EVENT_TRANSITIONS.get(TripEventType(event_type))
    except ValueError:
        return None
