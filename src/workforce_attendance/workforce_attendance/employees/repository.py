from __future__ import annotations

from typing import Optional, Protocol

from .model import Employee


class EmployeeRepository(Protocol):
    """Read-only access to the employee directory."""

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError
