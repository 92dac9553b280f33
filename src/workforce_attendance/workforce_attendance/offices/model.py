from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class OfficeLocation:
    """Domain entity: a named circular geofence around an office.

    `company_id` None means the fence is global.
    """

    office_id: int
    name: str
    latitude: float
    longitude: float
    radius_meters: float
    company_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "office_id": self.office_id,
            "name": self.name,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "radius_meters": self.radius_meters,
            "company_id": self.company_id,
        }
