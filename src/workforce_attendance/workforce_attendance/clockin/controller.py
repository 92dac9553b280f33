from __future__ import annotations

from flask import Flask

from ..common.http import current_employee_id, json_body, login_required, ok, refused
from ..container import Container
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.exceptions import NotFoundError
from ..geo.location import location_from_payload
from .model import Blocked, ClockedIn


def register(app: Flask, container: Container) -> None:
    def _employee():
        employee = container.employees_repo.get_by_id(current_employee_id())
        if not employee or not employee.is_active:
            raise NotFoundError("Employee not found")
        return employee

    @app.route("/api/clock-in", methods=["POST"], endpoint="api_clock_in")
    @login_required
    def api_clock_in():
        employee = _employee()
        # Work mode comes from the directory only; a body field is ignored.
        outcome = container.clock_in_service.attempt_clock_in(
            employee.employee_id,
            employee.work_mode,
            location_from_payload(json_body()),
            company_id=employee.company_id,
        )
        if isinstance(outcome, ClockedIn):
            message = "Clocked in successfully!"
            if outcome.late_warning:
                message = f"{message} ({outcome.late_warning})"
            return ok(201, message=message, **outcome.to_dict())
        if isinstance(outcome, Blocked):
            return refused(409, **outcome.to_dict())
        return ok(200, message=outcome.reason, **outcome.to_dict())

    @app.route("/api/clock-out", methods=["POST"], endpoint="api_clock_out")
    @login_required
    def api_clock_out():
        record = container.clock_in_service.clock_out(current_employee_id(), location_from_payload(json_body()))
        return ok(message="Clocked out successfully!", record=record.to_dict())

    @app.route("/api/attendance/active", methods=["GET"], endpoint="api_attendance_active")
    @login_required
    def api_attendance_active():
        employee_id = current_employee_id()
        record = container.attendance_service.get_active(employee_id)
        pending = container.remote_approval_service.get_pending(employee_id)
        return ok(
            record=record.to_dict() if record else None,
            elapsed_seconds=container.attendance_service.elapsed_seconds(record) if record else 0,
            pending_request=pending.to_dict() if pending else None,
        )

    @app.route("/api/attendance/history", methods=["GET"], endpoint="api_attendance_history")
    @login_required
    def api_attendance_history():
        records = container.attendance_service.get_history(current_employee_id(), limit=DEFAULT_HISTORY_LIMIT)
        return ok(records=[r.to_dict() for r in records])

    @app.route("/api/remote-requests", methods=["POST"], endpoint="api_remote_request_create")
    @login_required
    def api_remote_request_create():
        data = json_body()
        req = container.clock_in_service.request_remote_clock_in(
            current_employee_id(),
            location_from_payload(data),
            data.get("reason"),
        )
        return ok(201, message="Remote clock-in request sent to supervisor", request=req.to_dict())

    @app.route("/api/remote-requests/<int:request_id>/clock-in", methods=["POST"], endpoint="api_remote_request_clock_in")
    @login_required
    def api_remote_request_clock_in(request_id: int):
        outcome = container.clock_in_service.clock_in_from_approval(current_employee_id(), request_id)
        if isinstance(outcome, ClockedIn):
            return ok(201, message="Clocked in remotely", **outcome.to_dict())
        return refused(409, **outcome.to_dict())
