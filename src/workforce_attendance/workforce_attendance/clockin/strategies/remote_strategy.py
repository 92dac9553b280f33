from __future__ import annotations

import logging
from typing import Optional

from ...core.exceptions import LocationUnavailableError
from ...geo.location import LocationProvider, acquire_position
from ...offices.repository import OfficeLocationRepository
from .base import ClockInStrategy, PlacementDecision

logger = logging.getLogger(__name__)


class RemoteModeStrategy(ClockInStrategy):
    """Remote employees skip geofencing; the position is recorded when available."""

    def decide(
        self,
        *,
        location: Optional[LocationProvider],
        offices: OfficeLocationRepository,
        company_id: Optional[int],
        timeout_seconds: float,
    ) -> PlacementDecision:
        coordinate = None
        if location is not None:
            try:
                coordinate = acquire_position(location, timeout_seconds=timeout_seconds)
            except LocationUnavailableError as exc:
                logger.info("Remote clock-in without location: %s", exc)
        return PlacementDecision(allowed=True, is_remote=True, coordinate=coordinate)
