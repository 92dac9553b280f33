from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..geo.geofence import FenceDistance
from ..geo.location import Coordinate

MSG_ALREADY_CLOCKED_IN = "already clocked in"
MSG_REQUEST_PENDING = "remote request pending"
MSG_APPROVAL_USED = "remote approval already used"
MSG_OUTSIDE_OFFICE = "You're not within range of any office location"


class ClockInOutcome(ABC):
    """Result of a clock-in attempt; one of the subclasses below."""

    kind = "outcome"

    @abstractmethod
    def to_dict(self) -> dict:
        raise NotImplementedError


@dataclass(frozen=True)
class ClockedIn(ClockInOutcome):
    record: AttendanceRecord
    late_warning: Optional[str] = None

    kind = "clocked_in"

    def to_dict(self) -> dict:
        return {"outcome": self.kind, "record": self.record.to_dict(), "late_warning": self.late_warning}


@dataclass(frozen=True)
class RemoteRequestRequired(ClockInOutcome):
    reason: str
    coordinate: Optional[Coordinate] = None
    nearest: Optional[FenceDistance] = None

    kind = "remote_request_required"

    def to_dict(self) -> dict:
        data: dict = {"outcome": self.kind, "reason": self.reason, "nearest_office": None}
        if self.nearest is not None:
            data["nearest_office"] = {
                "office_id": self.nearest.office.office_id,
                "name": self.nearest.office.name,
                "distance_meters": round(self.nearest.distance_meters, 1),
                "radius_meters": self.nearest.office.radius_meters,
            }
        return data


@dataclass(frozen=True)
class Blocked(ClockInOutcome):
    message: str

    kind = "blocked"

    def to_dict(self) -> dict:
        return {"outcome": self.kind, "message": self.message}
