from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import RequestStatus
from ..geo.location import Coordinate
from .model import RemoteClockInRequest


class RemoteRequestRepository(Protocol):
    def create(
        self,
        *,
        employee_id: int,
        supervisor_id: int,
        requested_at: datetime,
        location: Coordinate,
        reason: Optional[str],
    ) -> int:
        """Insert a pending request.

        Raises ConflictError when storage enforces one pending request per employee.
        """

        raise NotImplementedError

    def get_by_id(self, request_id: int) -> Optional[RemoteClockInRequest]:
        raise NotImplementedError

    def get_pending_for_employee(self, employee_id: int) -> Optional[RemoteClockInRequest]:
        raise NotImplementedError

    def list_pending_for_supervisor(self, supervisor_id: int) -> Sequence[RemoteClockInRequest]:
        """Newest first."""

        raise NotImplementedError

    def decide(self, *, request_id: int, status: RequestStatus, responded_at: datetime) -> bool:
        """Move a pending request to a terminal status; False if it was not pending."""

        raise NotImplementedError

    def consume(self, *, request_id: int, consumed_at: datetime) -> bool:
        """Claim an approved request for clock-in; False if it was not approved or already used."""

        raise NotImplementedError

    def link_attendance(self, *, request_id: int, attendance_id: int) -> bool:
        raise NotImplementedError
