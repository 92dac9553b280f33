from __future__ import annotations

import logging
from datetime import time
from typing import Any, Optional, Sequence

from ..common.datetime_utils import parse_time_of_day
from ..common.validators import optional_bool, require_positive_int, require_weekdays
from ..core.constants import DEFAULT_WORK_DAYS
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import ShiftDefinition
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


class ShiftService:
    def __init__(self, shifts: ShiftRepository):
        self._shifts = shifts

    def get_effective_shift(self, employee_id: int) -> Optional[ShiftDefinition]:
        """The shift that gates clock-in.

        When several are active the most recently updated one wins.
        """
        active = list(self._shifts.list_active_for_employee(int(employee_id)))
        if len(active) > 1:
            logger.warning(
                "Employee %s has %d active shifts; using shift %s",
                employee_id,
                len(active),
                active[0].shift_id,
            )
        return active[0] if active else None

    def list_all(self) -> Sequence[ShiftDefinition]:
        return self._shifts.list_all()

    @staticmethod
    def _parse_time(value: str | time, field_name: str) -> time:
        if isinstance(value, time):
            return value
        try:
            return parse_time_of_day(value)
        except ValueError:
            raise ValidationError(f"{field_name} is not a valid time (HH:MM)")

    def assign(
        self,
        *,
        current_role: Role,
        employee_id: Any,
        shift_start: str | time,
        shift_end: str | time,
        shift_name: Optional[str] = None,
        days_of_week: Optional[Sequence[int]] = None,
    ) -> ShiftDefinition:
        if not current_role.is_admin:
            raise AuthorizationError("Only administrators can assign shifts")
        employee_id = require_positive_int(employee_id, "Employee")

        start = self._parse_time(shift_start, "Shift start")
        end = self._parse_time(shift_end, "Shift end")
        days = require_weekdays(DEFAULT_WORK_DAYS if days_of_week is None else days_of_week)
        name = (shift_name or "").strip() or "Regular Shift"

        shift_id = self._shifts.create(
            employee_id=employee_id,
            shift_name=name,
            start_time=start,
            end_time=end,
            days_of_week=days,
        )
        logger.info("Shift %s assigned to employee %s (%s-%s)", shift_id, employee_id, start, end)
        return ShiftDefinition(
            shift_id=shift_id,
            employee_id=employee_id,
            shift_name=name,
            start_time=start,
            end_time=end,
            days_of_week=days,
        )

    def update(
        self,
        *,
        current_role: Role,
        shift_id: int,
        shift_start: Optional[str | time] = None,
        shift_end: Optional[str | time] = None,
        shift_name: Optional[str] = None,
        days_of_week: Optional[Sequence[int]] = None,
        is_active: Any = None,
    ) -> ShiftDefinition:
        if not current_role.is_admin:
            raise AuthorizationError("Only administrators can change shifts")

        existing = self._shifts.get_by_id(int(shift_id))
        if not existing:
            raise NotFoundError("Shift not found")

        active = optional_bool(is_active, "Active flag")
        updated = ShiftDefinition(
            shift_id=existing.shift_id,
            employee_id=existing.employee_id,
            shift_name=(shift_name or "").strip() or existing.shift_name,
            start_time=self._parse_time(shift_start, "Shift start") if shift_start else existing.start_time,
            end_time=self._parse_time(shift_end, "Shift end") if shift_end else existing.end_time,
            days_of_week=require_weekdays(days_of_week) if days_of_week is not None else existing.days_of_week,
            is_active=existing.is_active if active is None else active,
        )
        ok = self._shifts.update(
            shift_id=updated.shift_id,
            shift_name=updated.shift_name,
            start_time=updated.start_time,
            end_time=updated.end_time,
            days_of_week=updated.days_of_week,
            is_active=updated.is_active,
        )
        if not ok:
            raise NotFoundError("Shift not found")
        return updated

    def deactivate(self, *, current_role: Role, shift_id: int) -> ShiftDefinition:
        return self.update(current_role=current_role, shift_id=shift_id, is_active=False)

    def delete(self, *, current_role: Role, shift_id: int) -> None:
        if not current_role.is_admin:
            raise AuthorizationError("Only administrators can delete shifts")

        if not self._shifts.delete(shift_id=int(shift_id)):
            raise NotFoundError("Shift not found")
