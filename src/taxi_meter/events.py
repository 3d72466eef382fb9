"""Trip events consumed by the meter, one variant per event kind."""

from collections.abc import Mapping
from datetime import datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .core.exceptions import UnknownEventTypeError


class TripEventType(str, Enum):
    """Event vocabulary understood by the meter."""

    START = "start"
    MOVE = "move"
    STOP = "stop"
    END = "end"


class BaseTripEvent(BaseModel):
    timestamp: datetime

    model_config = ConfigDict(frozen=True)


class StartEvent(BaseTripEvent):
    """Passenger boarded; the meter starts."""

    event_type: Literal["start"] = "start"


class MoveEvent(BaseTripEvent):
    """Driving segment. Distance, duration and speed are independent readings."""

    event_type: Literal["move"] = "move"
    distance: Decimal = Field(ge=0, description="km covered in this segment")
    duration: timedelta = Field(ge=timedelta(0))
    speed: float = Field(ge=0, description="Average km/h over this segment")


class StopEvent(BaseTripEvent):
    """Stationary segment such as waiting at a light."""

    event_type: Literal["stop"] = "stop"
    duration: timedelta = Field(ge=timedelta(0))


class EndEvent(BaseTripEvent):
    """Passenger alighted; the meter stops."""

    event_type: Literal["end"] = "end"


TripEvent = Annotated[
    StartEvent | MoveEvent | StopEvent | EndEvent,
    Field(discriminator="event_type"),
]

_trip_event_adapter: TypeAdapter[TripEvent] = TypeAdapter(TripEvent)


def parse_event(data: Mapping[str, Any]) -> TripEvent:
    """Validate raw event data into the matching event variant.

    Raises UnknownEventTypeError for a missing or unrecognised tag and
    pydantic.ValidationError for invalid segment fields.
    """
    tag = data.get("event_type")
    try:
        event_type = TripEventType(tag)
    except ValueError:
        raise UnknownEventTypeError(
            f"Unknown event type: {tag!r}",
            details={"event_type": tag},
        ) from None
    return _trip_event_adapter.validate_python({**data, "event_type": event_type.value})
