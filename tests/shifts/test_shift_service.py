from datetime import datetime, time

import pytest
from conftest import InMemoryShifts

from src.workforce_attendance.workforce_attendance.core.enums import Role
from src.workforce_attendance.workforce_attendance.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.workforce_attendance.workforce_attendance.shifts.model import ShiftDefinition
from src.workforce_attendance.workforce_attendance.shifts.service import ShiftService


def _shift(shift_id, updated_at, name):
    return ShiftDefinition(
        shift_id=shift_id,
        employee_id=3,
        shift_name=name,
        start_time=time(9, 0),
        end_time=time(17, 0),
        days_of_week=(1, 2, 3, 4, 5),
        updated_at=updated_at,
    )


def test_no_active_shift():
    assert ShiftService(InMemoryShifts()).get_effective_shift(3) is None


def test_most_recently_updated_shift_wins():
    repo = InMemoryShifts(
        [
            _shift(1, datetime(2026, 1, 1), "Old"),
            _shift(2, datetime(2026, 1, 20), "New"),
        ]
    )
    assert ShiftService(repo).get_effective_shift(3).shift_name == "New"


def test_assign_defaults_name_and_weekdays():
    repo = InMemoryShifts()
    shift = ShiftService(repo).assign(current_role=Role.ADMIN, employee_id=3, shift_start="08:00", shift_end="16:30")

    assert shift.shift_name == "Regular Shift"
    assert shift.days_of_week == (1, 2, 3, 4, 5)
    assert shift.end_time == time(16, 30)
    assert repo.get_by_id(shift.shift_id) is not None


def test_assign_requires_admin():
    with pytest.raises(AuthorizationError):
        ShiftService(InMemoryShifts()).assign(
            current_role=Role.MANAGER, employee_id=3, shift_start="08:00", shift_end="16:00"
        )


@pytest.mark.parametrize("days", [[], [7], ["x"]])
def test_assign_rejects_bad_weekdays(days):
    with pytest.raises(ValidationError):
        ShiftService(InMemoryShifts()).assign(
            current_role=Role.ADMIN, employee_id=3, shift_start="08:00", shift_end="16:00", days_of_week=days
        )


def test_assign_rejects_bad_time():
    with pytest.raises(ValidationError):
        ShiftService(InMemoryShifts()).assign(
            current_role=Role.ADMIN, employee_id=3, shift_start="25:00", shift_end="16:00"
        )


def test_deactivated_shift_no_longer_applies():
    repo = InMemoryShifts([_shift(1, None, "Day")])
    service = ShiftService(repo)

    service.deactivate(current_role=Role.SUPER_ADMIN, shift_id=1)

    assert service.get_effective_shift(3) is None


def test_update_keeps_unchanged_fields():
    repo = InMemoryShifts([_shift(1, None, "Day")])
    updated = ShiftService(repo).update(current_role=Role.ADMIN, shift_id=1, shift_end="18:00")

    assert updated.shift_name == "Day"
    assert updated.start_time == time(9, 0)
    assert updated.end_time == time(18, 0)


def test_delete_missing_shift():
    with pytest.raises(NotFoundError):
        ShiftService(InMemoryShifts()).delete(current_role=Role.ADMIN, shift_id=99)


@pytest.mark.parametrize("employee_id", ["abc", None, 0, "-2", True])
def test_assign_rejects_bad_employee_id(employee_id):
    with pytest.raises(ValidationError):
        ShiftService(InMemoryShifts()).assign(
            current_role=Role.ADMIN, employee_id=employee_id, shift_start="08:00", shift_end="16:00"
        )


@pytest.mark.parametrize("flag, expected", [("false", False), ("0", False), (False, False), ("true", True), (1, True)])
def test_update_parses_active_flag(flag, expected):
    repo = InMemoryShifts([_shift(1, None, "Day")])
    updated = ShiftService(repo).update(current_role=Role.ADMIN, shift_id=1, is_active=flag)

    assert updated.is_active is expected
    assert repo.get_by_id(1).is_active is expected


def test_update_rejects_unclear_active_flag():
    repo = InMemoryShifts([_shift(1, None, "Day")])
    with pytest.raises(ValidationError):
        ShiftService(repo).update(current_role=Role.ADMIN, shift_id=1, is_active="maybe")
