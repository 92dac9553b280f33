from __future__ import annotations

from flask import Flask

from ..common.http import admin_required, current_employee_id, current_role, json_body, login_required, ok
from ..container import Container
from .model import format_shift_time


def register(app: Flask, container: Container) -> None:
    @app.route("/api/shifts/mine", methods=["GET"], endpoint="api_shifts_mine")
    @login_required
    def api_shifts_mine():
        employee_id = current_employee_id()
        shift = container.shift_service.get_effective_shift(employee_id)
        if not shift:
            return ok(shift=None, window=None)

        window = container.shift_window.evaluate(shift, container.clock())
        return ok(
            shift={
                **shift.to_dict(),
                "label": f"{format_shift_time(shift.start_time)} - {format_shift_time(shift.end_time)}",
            },
            window={
                "is_valid": window.is_valid,
                "is_late": window.is_late,
                "hours_remaining": round(window.hours_remaining, 2),
                "message": window.message,
            },
        )

    @app.route("/api/admin/shifts", methods=["GET"], endpoint="api_admin_shifts_list")
    @admin_required
    def api_admin_shifts_list():
        return ok(shifts=[s.to_dict() for s in container.shift_service.list_all()])

    @app.route("/api/admin/shifts", methods=["POST"], endpoint="api_admin_shifts_create")
    @admin_required
    def api_admin_shifts_create():
        data = json_body()
        shift = container.shift_service.assign(
            current_role=current_role(),
            employee_id=data.get("employee_id"),
            shift_start=data.get("shift_start") or "",
            shift_end=data.get("shift_end") or "",
            shift_name=data.get("shift_name"),
            days_of_week=data.get("days_of_week"),
        )
        return ok(201, message="Shift assigned", shift=shift.to_dict())

    @app.route("/api/admin/shifts/<int:shift_id>", methods=["PUT"], endpoint="api_admin_shifts_update")
    @admin_required
    def api_admin_shifts_update(shift_id: int):
        data = json_body()
        shift = container.shift_service.update(
            current_role=current_role(),
            shift_id=shift_id,
            shift_start=data.get("shift_start"),
            shift_end=data.get("shift_end"),
            shift_name=data.get("shift_name"),
            days_of_week=data.get("days_of_week"),
            is_active=data.get("is_active"),
        )
        return ok(message="Shift updated", shift=shift.to_dict())

    @app.route("/api/admin/shifts/<int:shift_id>", methods=["DELETE"], endpoint="api_admin_shifts_delete")
    @admin_required
    def api_admin_shifts_delete(shift_id: int):
        container.shift_service.delete(current_role=current_role(), shift_id=shift_id)
        return ok(message="Shift deleted")
