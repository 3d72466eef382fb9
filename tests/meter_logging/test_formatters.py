"""Tests for logging formatters."""

import json
import logging
import sys

import pytest

from taxi_meter.meter_logging import DevFormatter, JSONFormatter


@pytest.fixture
def log_record():
    return logging.LogRecord(
        name="taxi_meter.runner",
        level=logging.INFO,
        pathname="runner.py",
        lineno=10,
        msg="Ride started - initial fare: %d",
        args=(500,),
        exc_info=None,
    )


class TestJSONFormatter:
    def test_basic_output(self, log_record):
        data = json.loads(JSONFormatter().format(log_record))

        assert "timestamp" in data
        assert data["level"] == "INFO"
        assert data["logger"] == "taxi_meter.runner"
        assert data["message"] == "Ride started - initial fare: 500"
        assert data["env"] == "development"

    def test_includes_ride_fields(self, log_record):
        log_record.session_id = "ride-001"
        log_record.driver_id = "driver-123"
        log_record.event_type = "start"

        data = json.loads(JSONFormatter().format(log_record))

        assert data["session_id"] == "ride-001"
        assert data["driver_id"] == "driver-123"
        assert data["event_type"] == "start"
        assert "passenger_id" not in data

    def test_includes_event_result_fields(self, log_record):
        log_record.event_type = "move"
        log_record.fare_change = 200
        log_record.new_total_fare = 900

        data = json.loads(JSONFormatter().format(log_record))

        assert data["fare_change"] == 200
        assert data["new_total_fare"] == 900
        assert "error_code" not in data

    def test_rejected_event_fields(self, log_record):
        log_record.event_type = "move"
        log_record.error_code = "meter_not_running"

        data = json.loads(JSONFormatter().format(log_record))

        assert data["error_code"] == "meter_not_running"
        assert "new_total_fare" not in data

    def test_zero_fare_change_is_kept(self, log_record):
        log_record.fare_change = 0

        data = json.loads(JSONFormatter().format(log_record))
        assert data["fare_change"] == 0

    def test_environment(self, log_record):
        data = json.loads(JSONFormatter(environment="production").format(log_record))
        assert data["env"] == "production"

    def test_includes_exception(self, log_record):
        try:
            raise ValueError("boom")
        except ValueError:
            log_record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(log_record))
        assert "ValueError: boom" in data["exception"]


class TestDevFormatter:
    def test_includes_session_id(self, log_record):
        log_record.session_id = "ride-001"
        output = DevFormatter().format(log_record)

        assert "[    INFO]" in output
        assert "taxi_meter.runner [ride-001]: Ride started - initial fare: 500" in output

    def test_appends_running_fare(self, log_record):
        log_record.session_id = "ride-001"
        log_record.new_total_fare = 1300

        output = DevFormatter().format(log_record)
        assert output.endswith("Ride started - initial fare: 500 | fare=1300")

    def test_no_fare_suffix_without_fare(self, log_record):
        log_record.session_id = "-"

        output = DevFormatter().format(log_record)
        assert output.endswith("[-]: Ride started - initial fare: 500")
