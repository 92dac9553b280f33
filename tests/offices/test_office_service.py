import pytest
from conftest import InMemoryOffices

from src.workforce_attendance.workforce_attendance.core.enums import Role
from src.workforce_attendance.workforce_attendance.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.workforce_attendance.workforce_attendance.offices.model import OfficeLocation
from src.workforce_attendance.workforce_attendance.offices.service import OfficeLocationService


def test_create_uses_default_radius():
    service = OfficeLocationService(InMemoryOffices())
    office = service.create(current_role=Role.ADMIN, name=" Branch ", latitude="10.5", longitude=20)

    assert office.name == "Branch"
    assert office.radius_meters == 50
    assert office.latitude == 10.5


def test_configured_default_radius():
    service = OfficeLocationService(InMemoryOffices(), default_radius_meters=75)
    assert service.create(current_role=Role.ADMIN, name="Depot", latitude=0, longitude=0, radius_meters="").radius_meters == 75


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "", "latitude": 0, "longitude": 0},
        {"name": "X", "latitude": 95, "longitude": 0},
        {"name": "X", "latitude": 0, "longitude": -181},
        {"name": "X", "latitude": "abc", "longitude": 0},
        {"name": "X", "latitude": 0, "longitude": 0, "radius_meters": 0},
        {"name": "X", "latitude": 0, "longitude": 0, "radius_meters": -5},
    ],
)
def test_create_validation(kwargs):
    with pytest.raises(ValidationError):
        OfficeLocationService(InMemoryOffices()).create(current_role=Role.ADMIN, **kwargs)


def test_non_admin_cannot_manage_offices():
    service = OfficeLocationService(InMemoryOffices())
    with pytest.raises(AuthorizationError):
        service.create(current_role=Role.MANAGER, name="X", latitude=0, longitude=0)


def test_update_and_delete():
    repo = InMemoryOffices([OfficeLocation(1, "Head Office", 1.0, 2.0, 50, company_id=1)])
    service = OfficeLocationService(repo)

    updated = service.update(current_role=Role.ADMIN, office_id=1, name="HQ", latitude=1.5, longitude=2.5, radius_meters=80)
    assert updated.company_id == 1
    assert repo.get_by_id(1).radius_meters == 80

    service.delete(current_role=Role.ADMIN, office_id=1)
    with pytest.raises(NotFoundError):
        service.delete(current_role=Role.ADMIN, office_id=1)


def test_update_missing_office():
    with pytest.raises(NotFoundError):
        OfficeLocationService(InMemoryOffices()).update(
            current_role=Role.ADMIN, office_id=7, name="X", latitude=0, longitude=0
        )


def test_listing_includes_global_fences():
    repo = InMemoryOffices(
        [
            OfficeLocation(1, "Ours", 0, 0, 50, company_id=1),
            OfficeLocation(2, "Theirs", 0, 0, 50, company_id=2),
            OfficeLocation(3, "Shared", 0, 0, 50, company_id=None),
        ]
    )
    names = {o.name for o in OfficeLocationService(repo).list_for_company(1)}
    assert names == {"Ours", "Shared"}


def test_rename_keeps_existing_radius():
    repo = InMemoryOffices([OfficeLocation(1, "Head Office", 1.0, 2.0, 250, company_id=1)])
    service = OfficeLocationService(repo)

    updated = service.update(current_role=Role.ADMIN, office_id=1, name="HQ", latitude=1.0, longitude=2.0)

    assert updated.radius_meters == 250
    assert repo.get_by_id(1).radius_meters == 250
