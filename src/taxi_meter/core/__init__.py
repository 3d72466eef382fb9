"""Core utilities shared across the taxi meter."""

from .exceptions import (
    AlreadyPaidError,
    ConfigurationError,
    InvalidPaymentMethodError,
    InvalidTransitionError,
    MeterAlreadyRunningError,
    MeterNotRunningError,
    NotCompletedError,
    PermanentError,
    StateError,
    TaxiMeterError,
    UnknownEventTypeError,
)

__all__ = [
    "TaxiMeterError",
    "PermanentError",
    "StateError",
    "ConfigurationError",
    "MeterAlreadyRunningError",
    "MeterNotRunningError",
    "InvalidTransitionError",
    "NotCompletedError",
    "AlreadyPaidError",
    "UnknownEventTypeError",
    "InvalidPaymentMethodError",
]
