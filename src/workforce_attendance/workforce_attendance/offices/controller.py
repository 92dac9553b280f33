from __future__ import annotations

from flask import Flask

from ..common.http import admin_required, current_employee_id, current_role, json_body, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/offices", methods=["GET"], endpoint="api_offices")
    @login_required
    def api_offices():
        employee = container.employees_repo.get_by_id(current_employee_id())
        company_id = employee.company_id if employee else None
        offices = container.office_service.list_for_company(company_id)
        return ok(offices=[o.to_dict() for o in offices])

    @app.route("/api/admin/offices", methods=["POST"], endpoint="api_admin_offices_create")
    @admin_required
    def api_admin_offices_create():
        data = json_body()
        office = container.office_service.create(
            current_role=current_role(),
            name=data.get("name") or "",
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            radius_meters=data.get("radius_meters"),
            company_id=data.get("company_id"),
        )
        return ok(201, message="Office location added", office=office.to_dict())

    @app.route("/api/admin/offices/<int:office_id>", methods=["PUT"], endpoint="api_admin_offices_update")
    @admin_required
    def api_admin_offices_update(office_id: int):
        data = json_body()
        office = container.office_service.update(
            current_role=current_role(),
            office_id=office_id,
            name=data.get("name") or "",
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            radius_meters=data.get("radius_meters"),
        )
        return ok(message="Office location updated", office=office.to_dict())

    @app.route("/api/admin/offices/<int:office_id>", methods=["DELETE"], endpoint="api_admin_offices_delete")
    @admin_required
    def api_admin_offices_delete(office_id: int):
        container.office_service.delete(current_role=current_role(), office_id=office_id)
        return ok(message="Office location deleted")
