from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import OfficeLocation


class OfficeLocationRepository(Protocol):
    def list_for_company(self, company_id: Optional[int]) -> Sequence[OfficeLocation]:
        """Fences of the company plus global (unscoped) fences."""

        raise NotImplementedError

    def get_by_id(self, office_id: int) -> Optional[OfficeLocation]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        latitude: float,
        longitude: float,
        radius_meters: float,
        company_id: Optional[int],
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        office_id: int,
        name: str,
        latitude: float,
        longitude: float,
        radius_meters: float,
    ) -> bool:
        raise NotImplementedError

    def delete(self, *, office_id: int) -> bool:
        raise NotImplementedError
