from __future__ import annotations

import logging
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..attendance.service import AttendanceService
from ..common.datetime_utils import Clock, now_local
from ..core.constants import GEOLOCATION_TIMEOUT_SECONDS
from ..core.enums import RequestStatus, WorkMode
from ..core.exceptions import ConflictError, LocationUnavailableError, NotFoundError, PolicyBlockedError, ValidationError
from ..employees.repository import EmployeeRepository
from ..geo.location import LocationProvider, acquire_position
from ..offices.repository import OfficeLocationRepository
from ..remote_requests.model import RemoteClockInRequest
from ..remote_requests.service import RemoteApprovalService
from ..shifts.service import ShiftService
from ..shifts.window import ShiftWindow
from .factory import ClockInStrategyFactory
from .model import (
    MSG_ALREADY_CLOCKED_IN,
    MSG_APPROVAL_USED,
    MSG_OUTSIDE_OFFICE,
    MSG_REQUEST_PENDING,
    Blocked,
    ClockedIn,
    ClockInOutcome,
    RemoteRequestRequired,
)

logger = logging.getLogger(__name__)


class ClockInService:
    """Policy decision for clock-in, plus the clock-out and remote-request follow-ups.

    Order of checks on clock-in: active record, pending remote request, shift
    window, then the work-mode placement strategy. Nothing is written until the
    decision is fully resolved, so a location failure leaves no state behind.
    """

    def __init__(
        self,
        attendance: AttendanceService,
        remote_requests: RemoteApprovalService,
        shifts: ShiftService,
        offices: OfficeLocationRepository,
        employees: EmployeeRepository,
        *,
        shift_window: Optional[ShiftWindow] = None,
        strategy_factory: Optional[ClockInStrategyFactory] = None,
        clock: Clock = now_local,
        location_timeout_seconds: float = GEOLOCATION_TIMEOUT_SECONDS,
    ):
        self._attendance = attendance
        self._remote = remote_requests
        self._shifts = shifts
        self._offices = offices
        self._employees = employees
        self._window = shift_window or ShiftWindow()
        self._factory = strategy_factory or ClockInStrategyFactory()
        self._clock = clock
        self._timeout = float(location_timeout_seconds)

    def attempt_clock_in(
        self,
        employee_id: int,
        work_mode: WorkMode | str,
        location: Optional[LocationProvider] = None,
        *,
        company_id: Optional[int] = None,
    ) -> ClockInOutcome:
        try:
            mode = WorkMode(work_mode)
        except ValueError:
            raise ValidationError("Work mode must be one of: office, remote, hybrid")

        if self._attendance.get_active(employee_id):
            return Blocked(MSG_ALREADY_CLOCKED_IN)

        if self._remote.get_pending(employee_id):
            return Blocked(MSG_REQUEST_PENDING)

        blocked, late_warning = self._check_shift(employee_id)
        if blocked is not None:
            return blocked

        strategy = self._factory.for_work_mode(mode)
        decision = strategy.decide(
            location=location,
            offices=self._offices,
            company_id=company_id,
            timeout_seconds=self._timeout,
        )

        if not decision.allowed:
            logger.info("Employee %s is outside every office fence; remote request required", employee_id)
            return RemoteRequestRequired(reason=MSG_OUTSIDE_OFFICE, coordinate=decision.coordinate, nearest=decision.nearest)

        try:
            record = self._attendance.clock_in(employee_id, coordinate=decision.coordinate, is_remote=decision.is_remote)
        except ConflictError:
            return Blocked(MSG_ALREADY_CLOCKED_IN)
        return ClockedIn(record=record, late_warning=late_warning)

    def clock_out(self, employee_id: int, location: Optional[LocationProvider] = None) -> AttendanceRecord:
        active = self._attendance.get_active(employee_id)
        if not active:
            raise NotFoundError("You are not clocked in")

        coordinate = None
        if location is not None:
            try:
                coordinate = acquire_position(location, timeout_seconds=self._timeout)
            except LocationUnavailableError as exc:
                logger.warning("Clock-out for employee %s without location: %s", employee_id, exc)

        return self._attendance.clock_out(active.attendance_id, coordinate=coordinate)

    def request_remote_clock_in(
        self,
        employee_id: int,
        location: Optional[LocationProvider],
        reason: Optional[str] = None,
    ) -> RemoteClockInRequest:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")

        if self._attendance.get_active(employee_id):
            raise PolicyBlockedError(MSG_ALREADY_CLOCKED_IN)
        if self._remote.get_pending(employee_id):
            raise PolicyBlockedError(MSG_REQUEST_PENDING)
        if employee.supervisor_id is None:
            raise PolicyBlockedError("Cannot send request - supervisor not assigned")

        coordinate = acquire_position(location, timeout_seconds=self._timeout)
        try:
            return self._remote.create_request(employee.employee_id, employee.supervisor_id, coordinate, reason)
        except ConflictError:
            raise PolicyBlockedError(MSG_REQUEST_PENDING)

    def clock_in_from_approval(self, employee_id: int, request_id: int) -> ClockInOutcome:
        """Start a remote attendance record from a request approved today.

        Each approval starts at most one record, and the shift window still applies.
        """

        req = self._remote.get_by_id(request_id)
        if not req or req.employee_id != int(employee_id):
            raise NotFoundError("Request not found")
        if req.status != RequestStatus.APPROVED:
            return Blocked(f"remote request is {req.status.value}")
        if req.consumed_at is not None:
            return Blocked(MSG_APPROVAL_USED)
        if req.responded_at is None or req.responded_at.date() != self._clock().date():
            return Blocked("remote approval has expired")

        if self._attendance.get_active(employee_id):
            return Blocked(MSG_ALREADY_CLOCKED_IN)

        blocked, late_warning = self._check_shift(employee_id)
        if blocked is not None:
            return blocked

        if not self._remote.consume(req.request_id):
            return Blocked(MSG_APPROVAL_USED)

        try:
            record = self._attendance.clock_in(employee_id, coordinate=req.location, is_remote=True)
        except ConflictError:
            return Blocked(MSG_ALREADY_CLOCKED_IN)
        self._remote.link_attendance(req.request_id, record.attendance_id)
        return ClockedIn(record=record, late_warning=late_warning)

    def _check_shift(self, employee_id: int) -> tuple[Optional[Blocked], Optional[str]]:
        """(refusal, late warning) for the employee's effective shift right now."""
        shift = self._shifts.get_effective_shift(employee_id)
        if shift is None:
            return None, None
        window = self._window.evaluate(shift, self._clock())
        if not window.is_valid:
            return Blocked(window.message), None
        return None, window.message if window.is_late else None
