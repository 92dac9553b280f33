from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..geo.location import Coordinate
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_active_for_employee(self, employee_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_recent_for_employee(self, employee_id: int, limit: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create_clock_in(
        self,
        *,
        employee_id: int,
        clock_in_time: datetime,
        location: Optional[Coordinate],
        is_remote: bool,
    ) -> int:
        """Insert an active record.

        Raises ConflictError when the employee already has an active record.
        """

        raise NotImplementedError

    def complete(
        self,
        *,
        attendance_id: int,
        clock_out_time: datetime,
        location: Optional[Coordinate],
    ) -> bool:
        """Flip an active record to completed; False if it was not active."""

        raise NotImplementedError
