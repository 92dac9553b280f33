from datetime import datetime, timedelta

import pytest
from conftest import HQ, FixedClock, InMemoryAttendance

from src.workforce_attendance.workforce_attendance.attendance.service import AttendanceService
from src.workforce_attendance.workforce_attendance.core.enums import AttendanceStatus
from src.workforce_attendance.workforce_attendance.core.exceptions import ConflictError, NotFoundError


def _service(now=datetime(2026, 2, 2, 9, 0)):
    clock = FixedClock(now)
    repo = InMemoryAttendance()
    return AttendanceService(repo, clock=clock), repo, clock


def test_clock_in_creates_active_record():
    service, repo, _ = _service()
    record = service.clock_in(3, coordinate=HQ)

    assert record.status == AttendanceStatus.ACTIVE
    assert record.clock_in_time == datetime(2026, 2, 2, 9, 0)
    assert record.clock_in_location == HQ
    assert service.get_active(3) == repo.get_by_id(record.attendance_id)


def test_second_active_record_is_rejected_by_storage():
    service, repo, _ = _service()
    service.clock_in(3)

    with pytest.raises(ConflictError):
        service.clock_in(3)
    assert repo.active_count(3) == 1


def test_clock_out_completes_record():
    service, _, clock = _service()
    record = service.clock_in(3)
    clock.now += timedelta(hours=8)

    done = service.clock_out(record.attendance_id)

    assert done.status == AttendanceStatus.COMPLETED
    assert done.clock_out_time == datetime(2026, 2, 2, 17, 0)
    assert done.clock_out_location is None
    assert service.get_active(3) is None


def test_clock_out_twice_is_not_found():
    service, _, _ = _service()
    record = service.clock_in(3)
    service.clock_out(record.attendance_id)

    with pytest.raises(NotFoundError):
        service.clock_out(record.attendance_id)


def test_clock_out_unknown_record():
    service, _, _ = _service()
    with pytest.raises(NotFoundError):
        service.clock_out(404)


def test_history_is_newest_first_and_limited():
    service, _, clock = _service()
    for day in range(3):
        clock.now = datetime(2026, 2, 2 + day, 9, 0)
        rec = service.clock_in(3)
        service.clock_out(rec.attendance_id)

    history = service.get_history(3, limit=2)

    assert [r.clock_in_time.day for r in history] == [4, 3]


def test_elapsed_seconds_for_active_record():
    service, _, clock = _service()
    record = service.clock_in(3)
    clock.now += timedelta(minutes=90)

    assert service.elapsed_seconds(record) == 5400
