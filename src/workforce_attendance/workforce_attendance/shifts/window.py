from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from ..common.datetime_utils import weekday_sunday_first
from ..core.constants import LATE_AFTER_MINUTES, SHIFT_GRACE_MINUTES
from .model import ShiftDefinition

MSG_NO_SHIFT_TODAY = "No shift assigned for today"
MSG_NOT_STARTED = "Shift has not started yet"
MSG_ENDED = "Shift has ended"
MSG_LATE = "Late clock in - more than 2 hours late"
MSG_WITHIN = "Within shift time"


@dataclass(frozen=True)
class ShiftWindowResult:
    is_valid: bool
    is_late: bool
    hours_remaining: float
    message: str

    @classmethod
    def invalid(cls, message: str) -> "ShiftWindowResult":
        return cls(is_valid=False, is_late=False, hours_remaining=0.0, message=message)


class ShiftWindow:
    """Decides whether clock-in is permitted right now for a shift.

    The window opens `grace_minutes` before the shift start and closes at the
    shift end. Clocking in at or after start + `late_after_minutes` is still
    valid but flagged late. A shift whose start equals its end is treated as
    round-the-clock: valid all day on its weekdays and never late.
    """

    def __init__(self, *, grace_minutes: int = SHIFT_GRACE_MINUTES, late_after_minutes: int = LATE_AFTER_MINUTES):
        self._grace = timedelta(minutes=int(grace_minutes))
        self._late_after = timedelta(minutes=int(late_after_minutes))

    def evaluate(self, shift: ShiftDefinition, now: datetime) -> ShiftWindowResult:
        if weekday_sunday_first(now.date()) not in shift.days_of_week:
            return ShiftWindowResult.invalid(MSG_NO_SHIFT_TODAY)

        today = now.date()
        shift_start = datetime.combine(today, shift.start_time)
        shift_end = datetime.combine(today, shift.end_time)

        if shift.start_time == shift.end_time:
            return ShiftWindowResult(is_valid=True, is_late=False, hours_remaining=24.0, message=MSG_WITHIN)

        # Overnight: pick the one window that can contain "now".
        if shift.is_overnight:
            if now.hour < shift.end_time.hour:
                shift_start -= timedelta(days=1)
            else:
                shift_end += timedelta(days=1)

        if now < shift_start - self._grace:
            return ShiftWindowResult.invalid(MSG_NOT_STARTED)

        if now > shift_end:
            return ShiftWindowResult.invalid(MSG_ENDED)

        is_late = now >= shift_start + self._late_after
        hours_remaining = max(0.0, (shift_end - now).total_seconds() / 3600)

        return ShiftWindowResult(
            is_valid=True,
            is_late=is_late,
            hours_remaining=hours_remaining,
            message=MSG_LATE if is_late else MSG_WITHIN,
        )
