from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest
from pydantic import ValidationError

from taxi_meter.core.exceptions import UnknownEventTypeError
from taxi_meter.events import (
    EndEvent,
    MoveEvent,
    StartEvent,
    StopEvent,
    TripEventType,
    parse_event,
)

TS = "2025-01-15T10:00:00Z"


@pytest.mark.unit
class TestParseEvent:
    def test_parse_start(self):
        event = parse_event({"event_type": "start", "timestamp": TS})

        assert isinstance(event, StartEvent)
        assert event.timestamp == datetime(2025, 1, 15, 10, 0, tzinfo=UTC)

    def test_parse_move(self):
        event = parse_event(
            {"event_type": "move", "timestamp": TS, "distance": "0.8", "duration": 120, "speed": 24.0}
        )

        assert isinstance(event, MoveEvent)
        assert event.distance == Decimal("0.8")
        assert event.duration == timedelta(minutes=2)
        assert event.speed == pytest.approx(24.0)

    def test_parse_stop(self):
        event = parse_event({"event_type": "stop", "timestamp": TS, "duration": 90})

        assert isinstance(event, StopEvent)
        assert event.duration == timedelta(seconds=90)

    def test_parse_end(self):
        assert isinstance(parse_event({"event_type": "end", "timestamp": TS}), EndEvent)

    def test_parse_accepts_enum_tag(self):
        event = parse_event({"event_type": TripEventType.END, "timestamp": TS})
        assert isinstance(event, EndEvent)

    def test_unknown_event_type(self):
        with pytest.raises(UnknownEventTypeError) as exc_info:
            parse_event({"event_type": "teleport", "timestamp": TS})

        assert exc_info.value.details == {"event_type": "teleport"}
        assert exc_info.value.code == "unknown_event_type"

    def test_missing_event_type(self):
        with pytest.raises(UnknownEventTypeError):
            parse_event({"timestamp": TS})

    def test_move_requires_duration(self):
        """Duration is never derived from distance and speed."""
        with pytest.raises(ValidationError):
            parse_event({"event_type": "move", "timestamp": TS, "distance": 0.5, "speed": 6.0})

    def test_negative_distance_rejected(self):
        with pytest.raises(ValidationError):
            parse_event(
                {"event_type": "move", "timestamp": TS, "distance": -1, "duration": 60, "speed": 6.0}
            )

    def test_negative_stop_duration_rejected(self):
        with pytest.raises(ValidationError):
            parse_event({"event_type": "stop", "timestamp": TS, "duration": -5})


@pytest.mark.unit
class TestEventModels:
    def test_events_are_frozen(self):
        event = StopEvent(timestamp=datetime.now(UTC), duration=timedelta(seconds=30))
        with pytest.raises(ValidationError):
            event.duration = timedelta(seconds=60)

    def test_event_type_tags(self):
        now = datetime.now(UTC)
        assert StartEvent(timestamp=now).event_type == TripEventType.START
        assert EndEvent(timestamp=now).event_type == TripEventType.END
