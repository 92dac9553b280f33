from __future__ import annotations

from flask import Flask

from ..common.http import current_employee_id, current_role, login_required, ok
from ..container import Container
from ..core.enums import RequestStatus


def register(app: Flask, container: Container) -> None:
    @app.route("/api/remote-requests/mine", methods=["GET"], endpoint="api_remote_request_mine")
    @login_required
    def api_remote_request_mine():
        pending = container.remote_approval_service.get_pending(current_employee_id())
        return ok(request=pending.to_dict() if pending else None)

    @app.route("/api/approvals/remote-requests", methods=["GET"], endpoint="api_approvals_pending")
    @login_required
    def api_approvals_pending():
        items = container.remote_approval_service.get_pending_for_supervisor(current_employee_id())
        return ok(requests=[r.to_dict() for r in items])

    def _respond(request_id: int, decision: RequestStatus):
        req = container.remote_approval_service.respond(
            request_id,
            decision,
            acting_employee_id=current_employee_id(),
            acting_role=current_role(),
        )
        return ok(message=f"Request {req.status.value}", request=req.to_dict())

    @app.route("/api/approvals/remote-requests/<int:request_id>/approve", methods=["POST"], endpoint="api_approvals_approve")
    @login_required
    def api_approvals_approve(request_id: int):
        return _respond(request_id, RequestStatus.APPROVED)

    @app.route("/api/approvals/remote-requests/<int:request_id>/reject", methods=["POST"], endpoint="api_approvals_reject")
    @login_required
    def api_approvals_reject(request_id: int):
        return _respond(request_id, RequestStatus.REJECTED)
