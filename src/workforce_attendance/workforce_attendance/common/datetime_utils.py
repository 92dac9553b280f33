from __future__ import annotations

from datetime import date, datetime, time
from typing import Callable

Clock = Callable[[], datetime]


def parse_time_of_day(value: str) -> time:
    """Parse HH:MM or HH:MM:SS into a time of day."""
    v = (value or "").strip()
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            return datetime.strptime(v, fmt).time()
        except ValueError:
            continue
    raise ValueError(f"Invalid time of day: {value!r}")


def now_local() -> datetime:
    """Current local time.

    Note: Services receive this as their default clock so tests can inject a fixed one.
    """
    return datetime.now()


def weekday_sunday_first(moment: date) -> int:
    """Weekday number with 0=Sunday .. 6=Saturday."""
    return (moment.weekday() + 1) % 7
