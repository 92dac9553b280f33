import threading
import time

import pytest

from src.workforce_attendance.workforce_attendance.core.exceptions import LocationUnavailableError, ValidationError
from src.workforce_attendance.workforce_attendance.geo.location import (
    Coordinate,
    StaticLocationProvider,
    acquire_position,
    location_from_payload,
)


class SlowProvider:
    def get_current_position(self):
        time.sleep(0.5)
        return Coordinate(1.0, 2.0)


def test_static_provider_returns_coordinate():
    assert acquire_position(StaticLocationProvider(Coordinate(1.0, 2.0))) == Coordinate(1.0, 2.0)


def test_missing_provider_is_unavailable():
    with pytest.raises(LocationUnavailableError):
        acquire_position(None)


def test_client_reported_error_is_kept():
    with pytest.raises(LocationUnavailableError, match="permission denied"):
        acquire_position(StaticLocationProvider(None, error="permission denied"))


def test_slow_provider_times_out():
    with pytest.raises(LocationUnavailableError, match="Timed out"):
        acquire_position(SlowProvider(), timeout_seconds=0.05)


def test_payload_without_coordinates_carries_error():
    provider = location_from_payload({"location_error": "timeout"})
    with pytest.raises(LocationUnavailableError, match="timeout"):
        provider.get_current_position()


def test_payload_with_out_of_range_latitude_is_rejected():
    with pytest.raises(ValidationError):
        location_from_payload({"latitude": 91, "longitude": 0})


def test_payload_coordinates_are_parsed():
    provider = location_from_payload({"latitude": "40.5", "longitude": "-74.25"})
    assert provider.get_current_position() == Coordinate(40.5, -74.25)


def test_hung_providers_do_not_starve_later_lookups():
    release = threading.Event()

    class HangingProvider:
        def get_current_position(self):
            release.wait(5)
            return Coordinate(0.0, 0.0)

    try:
        for _ in range(6):
            with pytest.raises(LocationUnavailableError):
                acquire_position(HangingProvider(), timeout_seconds=0.02)

        assert acquire_position(StaticLocationProvider(Coordinate(1.0, 2.0)), timeout_seconds=1.0) == Coordinate(1.0, 2.0)
    finally:
        release.set()
