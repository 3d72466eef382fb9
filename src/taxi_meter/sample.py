"""Demo ride used by the command-line entry point."""

from datetime import datetime, timedelta
from decimal import Decimal

from .events import EndEvent, MoveEvent, StartEvent, StopEvent, TripEvent
from .fare import FareConfig
from .session import Driver, Passenger, RideSession

SAMPLE_DRIVER = Driver(id="driver-123", name="Taro Tanaka")
SAMPLE_PASSENGER = Passenger(id="passenger-456", name="Hanako Sato")


def sample_events(start: datetime) -> list[TripEvent]:
    """Start, cruise, wait at a light, crawl in traffic, cruise again, end."""
    return [
        StartEvent(timestamp=start),
        MoveEvent(
            timestamp=start + timedelta(minutes=2),
            distance=Decimal("0.8"),
            duration=timedelta(minutes=2),
            speed=24.0,
        ),
        StopEvent(
            timestamp=start + timedelta(minutes=4),
            duration=timedelta(minutes=2),
        ),
        MoveEvent(
            timestamp=start + timedelta(minutes=9),
            distance=Decimal("0.5"),
            duration=timedelta(minutes=5),
            speed=6.0,
        ),
        MoveEvent(
            timestamp=start + timedelta(minutes=12),
            distance=Decimal("0.8"),
            duration=timedelta(minutes=2),
            speed=24.0,
        ),
        EndEvent(timestamp=start + timedelta(minutes=12)),
    ]


def sample_session(config: FareConfig, session_id: str = "ride-001") -> RideSession:
    return RideSession(session_id, SAMPLE_DRIVER, SAMPLE_PASSENGER, config)
