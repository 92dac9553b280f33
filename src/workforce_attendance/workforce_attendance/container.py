from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .clockin.factory import ClockInStrategyFactory
from .clockin.service import ClockInService
from .common.datetime_utils import Clock, now_local
from .core.constants import (
    DEFAULT_FENCE_RADIUS_METERS,
    GEOLOCATION_TIMEOUT_SECONDS,
    LATE_AFTER_MINUTES,
    SHIFT_GRACE_MINUTES,
)
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .offices.mysql_office_repository import MySQLOfficeLocationRepository
from .offices.repository import OfficeLocationRepository
from .offices.service import OfficeLocationService
from .remote_requests.mysql_remote_request_repository import MySQLRemoteRequestRepository
from .remote_requests.repository import RemoteRequestRepository
from .remote_requests.service import RemoteApprovalService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository
from .shifts.service import ShiftService
from .shifts.window import ShiftWindow


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    offices_repo: OfficeLocationRepository
    shifts_repo: ShiftRepository
    attendance_repo: AttendanceRepository
    remote_requests_repo: RemoteRequestRepository

    office_service: OfficeLocationService
    shift_service: ShiftService
    shift_window: ShiftWindow
    attendance_service: AttendanceService
    remote_approval_service: RemoteApprovalService
    clock_in_service: ClockInService

    clock: Clock = now_local
    conn: Optional[DatabaseConnection] = None


def assemble(
    *,
    employees_repo: EmployeeRepository,
    offices_repo: OfficeLocationRepository,
    shifts_repo: ShiftRepository,
    attendance_repo: AttendanceRepository,
    remote_requests_repo: RemoteRequestRepository,
    clock: Clock = now_local,
    settings: Optional[object] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services over the given repositories.

    `settings` is a settings module (or any object) providing the optional
    tuning values; missing ones fall back to the defaults in core.constants.
    """

    grace = int(getattr(settings, "SHIFT_GRACE_MINUTES", SHIFT_GRACE_MINUTES))
    late_after = int(getattr(settings, "LATE_AFTER_MINUTES", LATE_AFTER_MINUTES))
    timeout = float(getattr(settings, "GEOLOCATION_TIMEOUT_SECONDS", GEOLOCATION_TIMEOUT_SECONDS))
    default_radius = float(getattr(settings, "DEFAULT_FENCE_RADIUS_METERS", DEFAULT_FENCE_RADIUS_METERS))

    office_service = OfficeLocationService(offices_repo, default_radius_meters=default_radius)
    shift_service = ShiftService(shifts_repo)
    shift_window = ShiftWindow(grace_minutes=grace, late_after_minutes=late_after)
    attendance_service = AttendanceService(attendance_repo, clock=clock)
    remote_approval_service = RemoteApprovalService(remote_requests_repo, clock=clock)
    clock_in_service = ClockInService(
        attendance_service,
        remote_approval_service,
        shift_service,
        offices_repo,
        employees_repo,
        shift_window=shift_window,
        strategy_factory=ClockInStrategyFactory(),
        clock=clock,
        location_timeout_seconds=timeout,
    )

    return Container(
        employees_repo=employees_repo,
        offices_repo=offices_repo,
        shifts_repo=shifts_repo,
        attendance_repo=attendance_repo,
        remote_requests_repo=remote_requests_repo,
        office_service=office_service,
        shift_service=shift_service,
        shift_window=shift_window,
        attendance_service=attendance_service,
        remote_approval_service=remote_approval_service,
        clock_in_service=clock_in_service,
        clock=clock,
        conn=conn,
    )


def build_container(*, db_config: dict, settings: Optional[object] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return assemble(
        employees_repo=MySQLEmployeeRepository(conn),
        offices_repo=MySQLOfficeLocationRepository(conn),
        shifts_repo=MySQLShiftRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        remote_requests_repo=MySQLRemoteRequestRepository(conn),
        settings=settings,
        conn=conn,
    )
