"""Structured outcomes returned across the event-processing boundary."""

from dataclasses import dataclass, field
from typing import Any

from .core.exceptions import TaxiMeterError


@dataclass
class EventResult:
    """Outcome of one event or payment call."""

    success: bool = False
    message: str = ""
    fare_change: int = 0
    new_total_fare: int = 0
    log_messages: list[str] = field(default_factory=list)
    error: TaxiMeterError | None = None

    @classmethod
    def failure(cls, error: TaxiMeterError, message: str) -> "EventResult":
        return cls(success=False, message=message, error=error)

    @property
    def error_code(self) -> str | None:
        return self.error.code if self.error is not None else None


@dataclass
class ProcessResult:
    """Outcome of driving a whole event sequence through a session."""

    event_results: list[EventResult] = field(default_factory=list)
    final_fare: int = 0
    session_info: dict[str, Any] = field(default_factory=dict)

    @property
    def failed(self) -> list[EventResult]:
        return [r for r in self.event_results if not r.success]
