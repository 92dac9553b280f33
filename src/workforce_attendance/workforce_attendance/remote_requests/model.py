from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import RequestStatus
from ..geo.location import Coordinate


@dataclass(frozen=True)
class RemoteClockInRequest:
    """Supervisor-approval item raised when an on-site clock-in fails the geofence."""

    request_id: int
    employee_id: int
    supervisor_id: int
    requested_at: datetime
    location: Coordinate
    status: RequestStatus
    reason: Optional[str] = None
    responded_at: Optional[datetime] = None
    consumed_at: Optional[datetime] = None
    attendance_id: Optional[int] = None

    @property
    def is_pending(self) -> bool:
        return self.status == RequestStatus.PENDING

    def to_dict(self) -> dict:
        return {
            "request_id": self.request_id,
            "employee_id": self.employee_id,
            "supervisor_id": self.supervisor_id,
            "requested_at": self.requested_at.isoformat(),
            "latitude": self.location.latitude,
            "longitude": self.location.longitude,
            "reason": self.reason,
            "status": self.status.value,
            "responded_at": self.responded_at.isoformat() if self.responded_at else None,
            "consumed_at": self.consumed_at.isoformat() if self.consumed_at else None,
            "attendance_id": self.attendance_id,
        }
