from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from typing import Optional


@dataclass(frozen=True)
class ShiftDefinition:
    """Domain entity: an employee's recurring shift.

    `days_of_week` uses 0=Sunday .. 6=Saturday.
    """

    shift_id: int
    employee_id: int
    shift_name: str
    start_time: time
    end_time: time
    days_of_week: tuple[int, ...]
    is_active: bool = True
    updated_at: Optional[datetime] = None

    @property
    def is_overnight(self) -> bool:
        return self.end_time < self.start_time

    def to_dict(self) -> dict:
        return {
            "shift_id": self.shift_id,
            "employee_id": self.employee_id,
            "shift_name": self.shift_name,
            "shift_start": self.start_time.strftime("%H:%M:%S"),
            "shift_end": self.end_time.strftime("%H:%M:%S"),
            "days_of_week": list(self.days_of_week),
            "is_active": self.is_active,
        }


def format_shift_time(value: time) -> str:
    """Render a time of day as e.g. '9:00 AM'."""
    hour12 = value.hour % 12 or 12
    ampm = "PM" if value.hour >= 12 else "AM"
    return f"{hour12}:{value.minute:02d} {ampm}"
