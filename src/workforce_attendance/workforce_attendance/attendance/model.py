from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus
from ..geo.location import Coordinate


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def _coord(value: Optional[Coordinate]) -> Optional[dict]:
    if value is None:
        return None
    return {"latitude": value.latitude, "longitude": value.longitude}


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one clock-in/clock-out span of an employee."""

    attendance_id: int
    employee_id: int
    clock_in_time: datetime
    status: AttendanceStatus
    is_remote: bool = False
    clock_in_location: Optional[Coordinate] = None
    clock_out_time: Optional[datetime] = None
    clock_out_location: Optional[Coordinate] = None

    @property
    def is_active(self) -> bool:
        return self.status == AttendanceStatus.ACTIVE

    def to_dict(self) -> dict:
        return {
            "attendance_id": self.attendance_id,
            "employee_id": self.employee_id,
            "clock_in_time": _iso(self.clock_in_time),
            "clock_in_location": _coord(self.clock_in_location),
            "clock_out_time": _iso(self.clock_out_time),
            "clock_out_location": _coord(self.clock_out_location),
            "is_remote": self.is_remote,
            "status": self.status.value,
        }
