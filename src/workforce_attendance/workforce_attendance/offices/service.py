from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..common.validators import require_latitude, require_longitude, require_non_empty, require_positive
from ..core.constants import DEFAULT_FENCE_RADIUS_METERS
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError
from .model import OfficeLocation
from .repository import OfficeLocationRepository

logger = logging.getLogger(__name__)


class OfficeLocationService:
    """Administration of office geofences."""

    def __init__(self, offices: OfficeLocationRepository, *, default_radius_meters: float = DEFAULT_FENCE_RADIUS_METERS):
        self._offices = offices
        self._default_radius = float(default_radius_meters)

    def list_for_company(self, company_id: Optional[int]) -> Sequence[OfficeLocation]:
        return self._offices.list_for_company(company_id)

    def _radius(self, radius_meters: Any, fallback: float) -> float:
        if radius_meters is None or radius_meters == "":
            return fallback
        return require_positive(radius_meters, "Radius")

    def create(
        self,
        *,
        current_role: Role,
        name: str,
        latitude: Any,
        longitude: Any,
        radius_meters: Any = None,
        company_id: Optional[int] = None,
    ) -> OfficeLocation:
        if not current_role.is_admin:
            raise AuthorizationError("Only administrators can manage office locations")

        name = require_non_empty(name, "Name")
        lat = require_latitude(latitude)
        lon = require_longitude(longitude)
        radius = self._radius(radius_meters, self._default_radius)

        office_id = self._offices.create(
            name=name,
            latitude=lat,
            longitude=lon,
            radius_meters=radius,
            company_id=int(company_id) if company_id is not None else None,
        )
        logger.info("Office location %s created (%s, radius=%sm)", office_id, name, radius)
        return OfficeLocation(
            office_id=office_id,
            name=name,
            latitude=lat,
            longitude=lon,
            radius_meters=radius,
            company_id=company_id,
        )

    def update(
        self,
        *,
        current_role: Role,
        office_id: int,
        name: str,
        latitude: Any,
        longitude: Any,
        radius_meters: Any = None,
    ) -> OfficeLocation:
        if not current_role.is_admin:
            raise AuthorizationError("Only administrators can manage office locations")

        existing = self._offices.get_by_id(int(office_id))
        if not existing:
            raise NotFoundError("Office location not found")

        name = require_non_empty(name, "Name")
        lat = require_latitude(latitude)
        lon = require_longitude(longitude)
        radius = self._radius(radius_meters, existing.radius_meters)

        if not self._offices.update(office_id=int(office_id), name=name, latitude=lat, longitude=lon, radius_meters=radius):
            raise NotFoundError("Office location not found")
        return OfficeLocation(
            office_id=existing.office_id,
            name=name,
            latitude=lat,
            longitude=lon,
            radius_meters=radius,
            company_id=existing.company_id,
        )

    def delete(self, *, current_role: Role, office_id: int) -> None:
        if not current_role.is_admin:
            raise AuthorizationError("Only administrators can manage office locations")

        if not self._offices.delete(office_id=int(office_id)):
            raise NotFoundError("Office location not found")
        logger.info("Office location %s deleted", office_id)
