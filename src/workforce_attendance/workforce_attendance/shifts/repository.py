from __future__ import annotations

from datetime import time
from typing import Optional, Protocol, Sequence

from .model import ShiftDefinition


class ShiftRepository(Protocol):
    def list_active_for_employee(self, employee_id: int) -> Sequence[ShiftDefinition]:
        """Active shifts, most recently updated first."""

        raise NotImplementedError

    def list_all(self) -> Sequence[ShiftDefinition]:
        raise NotImplementedError

    def get_by_id(self, shift_id: int) -> Optional[ShiftDefinition]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        shift_name: str,
        start_time: time,
        end_time: time,
        days_of_week: Sequence[int],
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        shift_id: int,
        shift_name: str,
        start_time: time,
        end_time: time,
        days_of_week: Sequence[int],
        is_active: bool,
    ) -> bool:
        raise NotImplementedError

    def delete(self, *, shift_id: int) -> bool:
        raise NotImplementedError
