from __future__ import annotations

import math
from dataclasses import replace
from datetime import datetime, time
from typing import Optional

import pytest

from src.workforce_attendance.workforce_attendance.attendance.model import AttendanceRecord
from src.workforce_attendance.workforce_attendance.container import assemble
from src.workforce_attendance.workforce_attendance.core.constants import EARTH_RADIUS_METERS
from src.workforce_attendance.workforce_attendance.core.enums import AttendanceStatus, RequestStatus, Role, WorkMode
from src.workforce_attendance.workforce_attendance.core.exceptions import ConflictError
from src.workforce_attendance.workforce_attendance.employees.model import Employee
from src.workforce_attendance.workforce_attendance.geo.location import Coordinate
from src.workforce_attendance.workforce_attendance.offices.model import OfficeLocation
from src.workforce_attendance.workforce_attendance.remote_requests.model import RemoteClockInRequest
from src.workforce_attendance.workforce_attendance.shifts.model import ShiftDefinition

# Monday
MONDAY = datetime(2026, 2, 2, 9, 30)
HQ = Coordinate(latitude=40.7127753, longitude=-74.0059728)


def offset_north(origin: Coordinate, meters: float) -> Coordinate:
    """Point `meters` due north of origin on the haversine sphere."""
    return Coordinate(
        latitude=origin.latitude + math.degrees(meters / EARTH_RADIUS_METERS),
        longitude=origin.longitude,
    )


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class InMemoryEmployees:
    def __init__(self, employees=()):
        self.by_id = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.by_id.get(int(employee_id))


class InMemoryOffices:
    def __init__(self, offices=()):
        self.by_id = {o.office_id: o for o in offices}
        self._id = max(self.by_id, default=0)
        self.list_calls = 0

    def list_for_company(self, company_id):
        self.list_calls += 1
        return [o for o in self.by_id.values() if company_id is None or o.company_id in (None, company_id)]

    def get_by_id(self, office_id):
        return self.by_id.get(int(office_id))

    def create(self, *, name, latitude, longitude, radius_meters, company_id):
        self._id += 1
        self.by_id[self._id] = OfficeLocation(self._id, name, latitude, longitude, radius_meters, company_id)
        return self._id

    def update(self, *, office_id, name, latitude, longitude, radius_meters):
        existing = self.by_id.get(int(office_id))
        if not existing:
            return False
        self.by_id[int(office_id)] = replace(
            existing, name=name, latitude=latitude, longitude=longitude, radius_meters=radius_meters
        )
        return True

    def delete(self, *, office_id):
        return self.by_id.pop(int(office_id), None) is not None


class InMemoryShifts:
    def __init__(self, shifts=()):
        self.by_id = {s.shift_id: s for s in shifts}
        self._id = max(self.by_id, default=0)

    def list_active_for_employee(self, employee_id):
        items = [s for s in self.by_id.values() if s.employee_id == int(employee_id) and s.is_active]
        items.sort(key=lambda s: (s.updated_at or datetime.min, s.shift_id), reverse=True)
        return items

    def list_all(self):
        return list(self.by_id.values())

    def get_by_id(self, shift_id):
        return self.by_id.get(int(shift_id))

    def create(self, *, employee_id, shift_name, start_time, end_time, days_of_week):
        self._id += 1
        self.by_id[self._id] = ShiftDefinition(
            self._id, employee_id, shift_name, start_time, end_time, tuple(days_of_week)
        )
        return self._id

    def update(self, *, shift_id, shift_name, start_time, end_time, days_of_week, is_active):
        existing = self.by_id.get(int(shift_id))
        if not existing:
            return False
        self.by_id[int(shift_id)] = replace(
            existing,
            shift_name=shift_name,
            start_time=start_time,
            end_time=end_time,
            days_of_week=tuple(days_of_week),
            is_active=is_active,
        )
        return True

    def delete(self, *, shift_id):
        return self.by_id.pop(int(shift_id), None) is not None


class InMemoryAttendance:
    """Mirrors the unique key on active records."""

    def __init__(self):
        self.by_id: dict[int, AttendanceRecord] = {}
        self._id = 0

    def get_by_id(self, attendance_id):
        return self.by_id.get(int(attendance_id))

    def get_active_for_employee(self, employee_id):
        for r in self.by_id.values():
            if r.employee_id == int(employee_id) and r.is_active:
                return r
        return None

    def get_recent_for_employee(self, employee_id, limit):
        items = [r for r in self.by_id.values() if r.employee_id == int(employee_id)]
        items.sort(key=lambda r: r.clock_in_time, reverse=True)
        return items[:limit]

    def create_clock_in(self, *, employee_id, clock_in_time, location, is_remote):
        if self.get_active_for_employee(employee_id):
            raise ConflictError("Duplicate entry for key 'uq_attendance_one_active'")
        self._id += 1
        self.by_id[self._id] = AttendanceRecord(
            attendance_id=self._id,
            employee_id=int(employee_id),
            clock_in_time=clock_in_time,
            clock_in_location=location,
            is_remote=is_remote,
            status=AttendanceStatus.ACTIVE,
        )
        return self._id

    def complete(self, *, attendance_id, clock_out_time, location):
        r = self.by_id.get(int(attendance_id))
        if not r or not r.is_active:
            return False
        self.by_id[r.attendance_id] = replace(
            r, clock_out_time=clock_out_time, clock_out_location=location, status=AttendanceStatus.COMPLETED
        )
        return True

    def active_count(self, employee_id):
        return sum(1 for r in self.by_id.values() if r.employee_id == employee_id and r.is_active)


class InMemoryRemoteRequests:
    """Mirrors the unique key on pending requests."""

    def __init__(self):
        self.by_id: dict[int, RemoteClockInRequest] = {}
        self._id = 0

    def create(self, *, employee_id, supervisor_id, requested_at, location, reason):
        if self.get_pending_for_employee(employee_id):
            raise ConflictError("Duplicate entry for key 'uq_remote_one_pending'")
        self._id += 1
        self.by_id[self._id] = RemoteClockInRequest(
            request_id=self._id,
            employee_id=int(employee_id),
            supervisor_id=int(supervisor_id),
            requested_at=requested_at,
            location=location,
            reason=reason,
            status=RequestStatus.PENDING,
        )
        return self._id

    def get_by_id(self, request_id):
        return self.by_id.get(int(request_id))

    def get_pending_for_employee(self, employee_id):
        for r in self.by_id.values():
            if r.employee_id == int(employee_id) and r.is_pending:
                return r
        return None

    def list_pending_for_supervisor(self, supervisor_id):
        items = [r for r in self.by_id.values() if r.supervisor_id == int(supervisor_id) and r.is_pending]
        items.sort(key=lambda r: r.requested_at, reverse=True)
        return items

    def decide(self, *, request_id, status, responded_at):
        r = self.by_id.get(int(request_id))
        if not r or not r.is_pending:
            return False
        self.by_id[r.request_id] = replace(r, status=status, responded_at=responded_at)
        return True

    def consume(self, *, request_id, consumed_at):
        r = self.by_id.get(int(request_id))
        if not r or r.status != RequestStatus.APPROVED or r.consumed_at is not None:
            return False
        self.by_id[r.request_id] = replace(r, consumed_at=consumed_at)
        return True

    def link_attendance(self, *, request_id, attendance_id):
        r = self.by_id.get(int(request_id))
        if not r or r.attendance_id is not None:
            return False
        self.by_id[r.request_id] = replace(r, attendance_id=attendance_id)
        return True


@pytest.fixture
def fixed_now() -> datetime:
    return MONDAY


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def employees() -> InMemoryEmployees:
    return InMemoryEmployees(
        [
            Employee(1, "Admin Demo", company_id=1, supervisor_id=None, work_mode=WorkMode.OFFICE, role=Role.ADMIN),
            Employee(2, "Maria Manager", company_id=1, supervisor_id=1, work_mode=WorkMode.HYBRID, role=Role.MANAGER),
            Employee(3, "Oscar Office", company_id=1, supervisor_id=2, work_mode=WorkMode.OFFICE),
            Employee(4, "Rita Remote", company_id=1, supervisor_id=2, work_mode=WorkMode.REMOTE),
            Employee(5, "Nobody Reports", company_id=1, supervisor_id=None, work_mode=WorkMode.OFFICE),
        ]
    )


@pytest.fixture
def offices() -> InMemoryOffices:
    return InMemoryOffices([OfficeLocation(1, "Head Office", HQ.latitude, HQ.longitude, 50, company_id=1)])


@pytest.fixture
def shifts() -> InMemoryShifts:
    return InMemoryShifts()


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def remote_repo() -> InMemoryRemoteRequests:
    return InMemoryRemoteRequests()


@pytest.fixture
def container(employees, offices, shifts, attendance_repo, remote_repo, clock):
    return assemble(
        employees_repo=employees,
        offices_repo=offices,
        shifts_repo=shifts,
        attendance_repo=attendance_repo,
        remote_requests_repo=remote_repo,
        clock=clock,
    )


def day_shift(employee_id: int = 3, *, shift_id: int = 1, days=(1, 2, 3, 4, 5)) -> ShiftDefinition:
    return ShiftDefinition(
        shift_id=shift_id,
        employee_id=employee_id,
        shift_name="Day Shift",
        start_time=time(9, 0),
        end_time=time(17, 0),
        days_of_week=tuple(days),
    )
