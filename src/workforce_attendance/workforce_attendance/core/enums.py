from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles supplied by the identity provider."""

    EMPLOYEE = "employee"
    MANAGER = "manager"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"

    @property
    def is_admin(self) -> bool:
        return self in {Role.ADMIN, Role.SUPER_ADMIN}


class WorkMode(str, Enum):
    """Where an employee is expected to work; controls geofencing."""

    OFFICE = "office"
    REMOTE = "remote"
    HYBRID = "hybrid"


class AttendanceStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"


class RequestStatus(str, Enum):
    """Remote clock-in request lifecycle."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        return self != RequestStatus.PENDING
