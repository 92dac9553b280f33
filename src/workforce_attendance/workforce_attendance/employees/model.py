from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role, WorkMode


@dataclass(frozen=True)
class Employee:
    """Domain entity: directory entry of an employee.

    Note: Maintained by the surrounding HR system; read-only here.
    """

    employee_id: int
    full_name: str
    company_id: Optional[int]
    supervisor_id: Optional[int]
    work_mode: WorkMode = WorkMode.OFFICE
    role: Role = Role.EMPLOYEE
    is_active: bool = True
