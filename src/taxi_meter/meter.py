"""Taxi meter: the fare engine driven by trip events."""

from datetime import datetime, timedelta
from decimal import Decimal

from .core.exceptions import (
    MeterAlreadyRunningError,
    MeterNotRunningError,
    TaxiMeterError,
    UnknownEventTypeError,
)
from .events import EndEvent, MoveEvent, StartEvent, StopEvent, TripEvent
from .fare import FareCalculator, FareConfig
from .results import EventResult


class TaxiMeter:
    """Accumulates distance and time and derives the running fare.

    The meter is either running (between a start and an end event) or
    not. Every operation other than start requires a running meter.
    """

    def __init__(self, config: FareConfig) -> None:
        self.config = config
        self.calculator = FareCalculator(config)
        self.is_running = False
        self.total_distance = Decimal(0)
        self.total_time = timedelta(0)
        self.current_fare = 0
        self.start_time: datetime | None = None
        self.last_event_time: datetime | None = None

    def process_event(self, event: TripEvent) -> EventResult:
        """Apply one event and report the fare change.

        Meter errors are returned in the result, never raised.
        """
        old_fare = self.current_fare
        try:
            if isinstance(event, StartEvent):
                result = self.start(event)
            elif isinstance(event, MoveEvent):
                result = self.move(event)
            elif isinstance(event, StopEvent):
                result = self.stop(event)
            elif isinstance(event, EndEvent):
                result = self.end(event)
            else:
                event_type = getattr(event, "event_type", type(event).__name__)
                raise UnknownEventTypeError(
                    f"Unknown event type: {event_type}",
                    details={"event_type": event_type},
                )
        except TaxiMeterError as e:
            return EventResult.failure(e, e.message)

        result.fare_change = self.current_fare - old_fare
        result.new_total_fare = self.current_fare
        return result

    def start(self, event: StartEvent) -> EventResult:
        if self.is_running:
            raise MeterAlreadyRunningError("Meter start failed: already running")

        self.is_running = True
        self.start_time = event.timestamp
        self.last_event_time = event.timestamp
        self.current_fare = self.config.initial_fare
        self.total_distance = Decimal(0)
        self.total_time = timedelta(0)

        return EventResult(
            success=True,
            message="Meter started",
            new_total_fare=self.current_fare,
            log_messages=[f"Ride started - initial fare: {self.current_fare}"],
        )

    def move(self, event: MoveEvent) -> EventResult:
        """Record a driving segment, pricing it by time or distance depending on speed."""
        self._require_running("Movement failed: meter not running")

        previous_distance = self.total_distance
        self.total_distance += event.distance
        self.total_time += event.duration
        self.last_event_time = event.timestamp

        # speed equal to the threshold is billed by time
        if event.speed <= self.config.time_threshold:
            fare = self.calculator.time_fare(event.duration)
            lines = [f"Low-speed move ({event.speed:.1f} km/h) - time rate"]
            label = "time fare"
        else:
            fare = self.calculator.distance_fare(previous_distance, event.distance)
            lines = [f"Moving ({event.speed:.1f} km/h) - distance rate"]
            label = "distance fare"

        self.current_fare += fare.amount
        if fare.amount > 0:
            lines.append(f"  {label} +{fare.amount} (total: {self.current_fare})")

        return EventResult(
            success=True,
            message="Movement processed",
            fare_change=fare.amount,
            new_total_fare=self.current_fare,
            log_messages=lines,
        )

    def stop(self, event: StopEvent) -> EventResult:
        self._require_running("Stop failed: meter not running")

        self.total_time += event.duration
        self.last_event_time = event.timestamp

        fare = self.calculator.time_fare(event.duration)
        self.current_fare += fare.amount

        lines = ["Stopped - time rate"]
        if fare.amount > 0:
            lines.append(f"  time fare +{fare.amount} (total: {self.current_fare})")

        return EventResult(
            success=True,
            message="Stop processed",
            fare_change=fare.amount,
            new_total_fare=self.current_fare,
            log_messages=lines,
        )

    def end(self, event: EndEvent) -> EventResult:
        self._require_running("End failed: meter not running")

        self.is_running = False
        self.last_event_time = event.timestamp

        return EventResult(
            success=True,
            message="Meter stopped",
            new_total_fare=self.current_fare,
            log_messages=["Ride ended", *self.summary_lines()],
        )

    def summary_lines(self) -> list[str]:
        return [
            f"Total distance: {self.total_distance:.2f} km",
            f"Total time: {self.total_time}",
            f"Final fare: {self.current_fare}",
        ]

    def _require_running(self, message: str) -> None:
        if not self.is_running:
            raise MeterNotRunningError(message)
