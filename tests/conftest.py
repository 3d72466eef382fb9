from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from taxi_meter.events import EndEvent, MoveEvent, StartEvent, StopEvent
from taxi_meter.fare import FareConfig
from taxi_meter.meter import TaxiMeter
from taxi_meter.session import Driver, Passenger, RideSession


class EventClock:
    """Builds events with timestamps that advance by each segment's duration."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def start(self) -> StartEvent:
        return StartEvent(timestamp=self.now)

    def move(self, distance: Decimal | float | str, seconds: float, speed: float) -> MoveEvent:
        self.now += timedelta(seconds=seconds)
        return MoveEvent(
            timestamp=self.now,
            distance=Decimal(str(distance)),
            duration=timedelta(seconds=seconds),
            speed=speed,
        )

    def stop(self, seconds: float) -> StopEvent:
        self.now += timedelta(seconds=seconds)
        return StopEvent(timestamp=self.now, duration=timedelta(seconds=seconds))

    def end(self) -> EndEvent:
        return EndEvent(timestamp=self.now)


@pytest.fixture
def t0() -> datetime:
    return datetime(2025, 1, 15, 10, 0, tzinfo=UTC)


@pytest.fixture
def clock(t0: datetime) -> EventClock:
    return EventClock(t0)


@pytest.fixture
def fare_config() -> FareConfig:
    """Default tariff: 500 for the first 1.096 km, 100 per 0.237 km or per 90 s."""
    return FareConfig()


@pytest.fixture
def round_config() -> FareConfig:
    """Tariff with round unit boundaries."""
    return FareConfig(
        initial_fare=500,
        initial_distance=Decimal("1.0"),
        unit_fare=100,
        unit_distance=Decimal("0.25"),
        time_threshold=10.0,
        time_unit_fare=100,
        time_unit=timedelta(seconds=90),
    )


@pytest.fixture
def meter(fare_config: FareConfig) -> TaxiMeter:
    return TaxiMeter(fare_config)


@pytest.fixture
def session(fare_config: FareConfig) -> RideSession:
    return RideSession(
        "ride-001",
        Driver(id="driver-123", name="Taro Tanaka"),
        Passenger(id="passenger-456", name="Hanako Sato"),
        fare_config,
    )


@pytest.fixture
def scenario_events(clock: EventClock) -> list:
    """Start; cruise 0.8 km; wait 2 min; crawl 0.5 km for 5 min; cruise 0.8 km; end."""
    return [
        clock.start(),
        clock.move(distance=0.8, seconds=120, speed=24.0),
        clock.stop(seconds=120),
        clock.move(distance=0.5, seconds=300, speed=6.0),
        clock.move(distance=0.8, seconds=120, speed=24.0),
        clock.end(),
    ]
