from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...geo.geofence import FenceDistance
from ...geo.location import Coordinate, LocationProvider
from ...offices.repository import OfficeLocationRepository


@dataclass(frozen=True)
class PlacementDecision:
    """Whether the employee may clock in directly, and as what."""

    allowed: bool
    is_remote: bool
    coordinate: Optional[Coordinate] = None
    nearest: Optional[FenceDistance] = None


class ClockInStrategy(ABC):
    """Strategy Pattern: how a work mode decides where the employee is clocking in from."""

    @abstractmethod
    def decide(
        self,
        *,
        location: Optional[LocationProvider],
        offices: OfficeLocationRepository,
        company_id: Optional[int],
        timeout_seconds: float,
    ) -> PlacementDecision:
        raise NotImplementedError
