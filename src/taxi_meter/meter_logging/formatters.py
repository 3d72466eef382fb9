"""Log formatters for JSON and human-readable output."""

import json
import logging
from datetime import UTC, datetime

# Identity fields come from log_session_context; the rest mirror EventResult
# and are passed as extras for each processed event.
RIDE_FIELDS = (
    "session_id",
    "driver_id",
    "passenger_id",
    "event_type",
    "fare_change",
    "new_total_fare",
    "error_code",
)


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log shipping."""

    def __init__(self, environment: str = "development"):
        super().__init__()
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "env": self.environment,
        }

        for field in RIDE_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class DevFormatter(logging.Formatter):
    """Console format; event lines end with the running fare."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s [%(levelname)8s] %(name)s [%(session_id)s]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fare = getattr(record, "new_total_fare", None)
        if fare is None:
            return line
        return f"{line} | fare={fare}"
