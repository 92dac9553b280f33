from __future__ import annotations

from typing import Optional

from ...geo.geofence import is_within_any_fence, nearest_fence
from ...geo.location import LocationProvider, acquire_position
from ...offices.repository import OfficeLocationRepository
from .base import ClockInStrategy, PlacementDecision


class OnSiteStrategy(ClockInStrategy):
    """Office and hybrid employees must be inside an office fence.

    Location is required here: LocationUnavailableError propagates.
    """

    def decide(
        self,
        *,
        location: Optional[LocationProvider],
        offices: OfficeLocationRepository,
        company_id: Optional[int],
        timeout_seconds: float,
    ) -> PlacementDecision:
        coordinate = acquire_position(location, timeout_seconds=timeout_seconds)
        fences = list(offices.list_for_company(company_id))

        if is_within_any_fence(coordinate.latitude, coordinate.longitude, fences):
            return PlacementDecision(allowed=True, is_remote=False, coordinate=coordinate)

        return PlacementDecision(
            allowed=False,
            is_remote=False,
            coordinate=coordinate,
            nearest=nearest_fence(coordinate.latitude, coordinate.longitude, fences),
        )
