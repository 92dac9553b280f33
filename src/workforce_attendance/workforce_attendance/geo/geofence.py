from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..offices.model import OfficeLocation
from .distance import distance_meters


@dataclass(frozen=True)
class FenceDistance:
    office: OfficeLocation
    distance_meters: float

    @property
    def is_inside(self) -> bool:
        return self.distance_meters <= self.office.radius_meters


def is_within_fence(lat: float, lon: float, office: OfficeLocation) -> bool:
    return distance_meters(lat, lon, office.latitude, office.longitude) <= office.radius_meters


def is_within_any_fence(lat: float, lon: float, fences: Sequence[OfficeLocation]) -> bool:
    """True when the probe lies inside at least one fence; False for no fences."""
    return any(is_within_fence(lat, lon, office) for office in fences)


def nearest_fence(lat: float, lon: float, fences: Sequence[OfficeLocation]) -> Optional[FenceDistance]:
    """Closest fence to the probe and its distance, for diagnostics."""
    best: Optional[FenceDistance] = None
    for office in fences:
        d = distance_meters(lat, lon, office.latitude, office.longitude)
        if best is None or d < best.distance_meters:
            best = FenceDistance(office=office, distance_meters=d)
    return best
