"""Standardized exception hierarchy for the taxi meter.

Every error here is a local precondition violation. None of them is
transient, so callers never retry.
"""

from typing import Any


class TaxiMeterError(Exception):
    """Base exception for all taxi meter errors."""

    code = "taxi_meter_error"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PermanentError(TaxiMeterError):
    """Errors that will not succeed on retry."""

    code = "permanent_error"


class ConfigurationError(PermanentError):
    """Missing or invalid configuration."""

    code = "configuration_error"


class UnknownEventTypeError(PermanentError):
    """Event tag outside the start/move/stop/end vocabulary."""

    code = "unknown_event_type"


class StateError(PermanentError):
    """Operation not allowed in the current meter or session state."""

    code = "state_error"


class MeterAlreadyRunningError(StateError):
    """Start received by a meter that is already running."""

    code = "already_running"


class MeterNotRunningError(StateError):
    """Move, stop or end received by a meter that is not running."""

    code = "meter_not_running"


class InvalidTransitionError(StateError):
    """Start or end event inconsistent with the session status."""

    code = "invalid_transition"


class NotCompletedError(StateError):
    """Payment attempted before the ride completed."""

    code = "not_completed"


class AlreadyPaidError(StateError):
    """Second payment attempt for the same ride."""

    code = "already_paid"


class InvalidPaymentMethodError(PermanentError):
    """Payment method outside cash/card/digital."""

    code = "invalid_payment_method"
