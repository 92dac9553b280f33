from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..common.datetime_utils import Clock, now_local
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..geo.location import Coordinate
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Active/completed lifecycle of attendance records.

    The single-active-record rule is checked by the clock-in orchestration and
    backed by a unique key in storage; a duplicate insert surfaces here as
    ConflictError.
    """

    def __init__(self, attendance: AttendanceRepository, *, clock: Clock = now_local):
        self._attendance = attendance
        self._clock = clock

    def clock_in(self, employee_id: int, *, coordinate: Optional[Coordinate] = None, is_remote: bool = False) -> AttendanceRecord:
        now = self._clock()
        attendance_id = self._attendance.create_clock_in(
            employee_id=int(employee_id),
            clock_in_time=now,
            location=coordinate,
            is_remote=bool(is_remote),
        )
        logger.info("Employee %s clocked in (record=%s, remote=%s)", employee_id, attendance_id, is_remote)
        return AttendanceRecord(
            attendance_id=attendance_id,
            employee_id=int(employee_id),
            clock_in_time=now,
            clock_in_location=coordinate,
            is_remote=bool(is_remote),
            status=AttendanceStatus.ACTIVE,
        )

    def clock_out(self, record_id: int, *, coordinate: Optional[Coordinate] = None) -> AttendanceRecord:
        record = self._attendance.get_by_id(int(record_id))
        if not record or not record.is_active:
            raise NotFoundError("No active attendance record to clock out")

        now = self._clock()
        if not self._attendance.complete(attendance_id=record.attendance_id, clock_out_time=now, location=coordinate):
            raise NotFoundError("No active attendance record to clock out")

        logger.info("Employee %s clocked out (record=%s)", record.employee_id, record.attendance_id)
        return replace(
            record,
            clock_out_time=now,
            clock_out_location=coordinate,
            status=AttendanceStatus.COMPLETED,
        )

    def get_active(self, employee_id: int) -> Optional[AttendanceRecord]:
        return self._attendance.get_active_for_employee(int(employee_id))

    def get_history(self, employee_id: int, *, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[AttendanceRecord]:
        return self._attendance.get_recent_for_employee(int(employee_id), int(limit))

    def elapsed_seconds(self, record: AttendanceRecord) -> int:
        """Seconds worked so far (active) or in total (completed)."""
        end = record.clock_out_time or self._clock()
        return max(0, int((end - record.clock_in_time).total_seconds()))
