"""Taxi fare meter and ride session state machine."""

from .core.exceptions import (
    AlreadyPaidError,
    ConfigurationError,
    InvalidPaymentMethodError,
    InvalidTransitionError,
    MeterAlreadyRunningError,
    MeterNotRunningError,
    NotCompletedError,
    TaxiMeterError,
    UnknownEventTypeError,
)
from .events import (
    EndEvent,
    MoveEvent,
    StartEvent,
    StopEvent,
    TripEvent,
    TripEventType,
    parse_event,
)
from .fare import FareCalculation, FareCalculator, FareConfig
from .meter import TaxiMeter
from .payment import Payment, PaymentMethod
from .results import EventResult, ProcessResult
from .session import Driver, Passenger, RideSession, SessionStatus

__all__ = [
    "AlreadyPaidError",
    "ConfigurationError",
    "Driver",
    "EndEvent",
    "EventResult",
    "FareCalculation",
    "FareCalculator",
    "FareConfig",
    "InvalidPaymentMethodError",
    "InvalidTransitionError",
    "MeterAlreadyRunningError",
    "MeterNotRunningError",
    "MoveEvent",
    "NotCompletedError",
    "Passenger",
    "Payment",
    "PaymentMethod",
    "ProcessResult",
    "RideSession",
    "SessionStatus",
    "StartEvent",
    "StopEvent",
    "TaxiMeter",
    "TaxiMeterError",
    "TripEvent",
    "TripEventType",
    "UnknownEventTypeError",
    "parse_event",
]
