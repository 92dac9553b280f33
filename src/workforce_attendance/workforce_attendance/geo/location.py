"""Device geolocation boundary.

The host platform supplies the current position; the core only needs a
provider it can ask with an explicit timeout.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from ..common.validators import require_latitude, require_longitude
from ..core.constants import GEOLOCATION_TIMEOUT_SECONDS
from ..core.exceptions import LocationUnavailableError


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    @classmethod
    def parse(cls, latitude: Any, longitude: Any) -> "Coordinate":
        """Build a coordinate from raw input, validating ranges."""
        return cls(latitude=require_latitude(latitude), longitude=require_longitude(longitude))


class LocationProvider(Protocol):
    def get_current_position(self) -> Coordinate:
        """Return the device position or raise LocationUnavailableError."""

        raise NotImplementedError


class StaticLocationProvider:
    """Position already reported by the client (e.g. in the request body).

    `error` carries the client-side failure (permission denied, timeout) when
    no coordinate could be captured.
    """

    def __init__(self, coordinate: Optional[Coordinate] = None, *, error: Optional[str] = None):
        self._coordinate = coordinate
        self._error = error

    def get_current_position(self) -> Coordinate:
        if self._coordinate is None:
            raise LocationUnavailableError(self._error or "Location is not available")
        return self._coordinate


def acquire_position(provider: Optional[LocationProvider], *, timeout_seconds: float = GEOLOCATION_TIMEOUT_SECONDS) -> Coordinate:
    """Ask the provider for a position, treating anything slower than the timeout as failure."""

    if provider is None:
        raise LocationUnavailableError("Location is not available")

    # One worker per call: a provider that hangs past the timeout only ties up its own thread.
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="geolocation")
    future = executor.submit(provider.get_current_position)
    try:
        return future.result(timeout=timeout_seconds)
    except FutureTimeoutError:
        raise LocationUnavailableError(f"Timed out after {timeout_seconds:g}s waiting for location")
    finally:
        executor.shutdown(wait=False)


def location_from_payload(data: dict) -> StaticLocationProvider:
    """Provider for a position the client captured and sent with the request.

    The client reports `location_error` instead of coordinates when the device
    denied or timed out the lookup.
    """

    lat = data.get("latitude")
    lon = data.get("longitude")
    if lat is None or lon is None:
        return StaticLocationProvider(None, error=data.get("location_error"))
    return StaticLocationProvider(Coordinate.parse(lat, lon))
