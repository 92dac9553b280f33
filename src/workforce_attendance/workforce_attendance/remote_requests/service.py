from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..common.datetime_utils import Clock, now_local
from ..common.validators import optional_text
from ..core.enums import RequestStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..geo.location import Coordinate
from .model import RemoteClockInRequest
from .repository import RemoteRequestRepository

logger = logging.getLogger(__name__)


class RemoteApprovalService:
    """pending -> approved | rejected lifecycle of remote clock-in requests.

    Terminal states are final: responding twice raises NotFoundError.
    Approval does not create an attendance record by itself.
    """

    def __init__(self, requests: RemoteRequestRepository, *, clock: Clock = now_local):
        self._requests = requests
        self._clock = clock

    def create_request(
        self,
        employee_id: int,
        supervisor_id: int,
        coordinate: Coordinate,
        reason: Optional[str] = None,
    ) -> RemoteClockInRequest:
        now = self._clock()
        reason = optional_text(reason)
        request_id = self._requests.create(
            employee_id=int(employee_id),
            supervisor_id=int(supervisor_id),
            requested_at=now,
            location=coordinate,
            reason=reason,
        )
        logger.info("Remote clock-in request %s raised by employee %s for supervisor %s", request_id, employee_id, supervisor_id)
        return RemoteClockInRequest(
            request_id=request_id,
            employee_id=int(employee_id),
            supervisor_id=int(supervisor_id),
            requested_at=now,
            location=coordinate,
            reason=reason,
            status=RequestStatus.PENDING,
        )

    def respond(
        self,
        request_id: int,
        decision: RequestStatus | str,
        *,
        acting_employee_id: Optional[int] = None,
        acting_role: Optional[Role] = None,
    ) -> RemoteClockInRequest:
        try:
            status = RequestStatus(decision)
        except ValueError:
            raise ValidationError("Decision must be 'approved' or 'rejected'")
        if not status.is_terminal:
            raise ValidationError("Decision must be 'approved' or 'rejected'")

        req = self._requests.get_by_id(int(request_id))
        if not req or not req.is_pending:
            raise NotFoundError("Request not found or already processed")

        if acting_employee_id is not None:
            is_admin = acting_role is not None and acting_role.is_admin
            if int(acting_employee_id) != req.supervisor_id and not is_admin:
                raise AuthorizationError("Only the assigned supervisor can respond to this request")

        now = self._clock()
        if not self._requests.decide(request_id=req.request_id, status=status, responded_at=now):
            raise NotFoundError("Request not found or already processed")

        logger.info("Remote clock-in request %s %s", req.request_id, status.value)
        return replace(req, status=status, responded_at=now)

    def consume(self, request_id: int) -> bool:
        """Mark an approved request as used; False when it was already used or is not approved."""
        return self._requests.consume(request_id=int(request_id), consumed_at=self._clock())

    def link_attendance(self, request_id: int, attendance_id: int) -> None:
        if not self._requests.link_attendance(request_id=int(request_id), attendance_id=int(attendance_id)):
            logger.warning("Remote clock-in request %s already linked; record %s not attached", request_id, attendance_id)

    def get_by_id(self, request_id: int) -> Optional[RemoteClockInRequest]:
        return self._requests.get_by_id(int(request_id))

    def get_pending(self, employee_id: int) -> Optional[RemoteClockInRequest]:
        return self._requests.get_pending_for_employee(int(employee_id))

    def get_pending_for_supervisor(self, supervisor_id: int) -> Sequence[RemoteClockInRequest]:
        return self._requests.list_pending_for_supervisor(int(supervisor_id))
