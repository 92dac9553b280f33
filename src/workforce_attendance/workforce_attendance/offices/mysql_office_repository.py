from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import OfficeLocation
from .repository import OfficeLocationRepository

_COLUMNS = "office_id, name, latitude, longitude, radius_meters, company_id"


def _to_model(r: dict) -> OfficeLocation:
    return OfficeLocation(
        office_id=int(r["office_id"]),
        name=r["name"],
        latitude=float(r["latitude"]),
        longitude=float(r["longitude"]),
        radius_meters=float(r["radius_meters"]),
        company_id=int(r["company_id"]) if r.get("company_id") is not None else None,
    )


class MySQLOfficeLocationRepository(OfficeLocationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_company(self, company_id: Optional[int]) -> Sequence[OfficeLocation]:
        with db_cursor(self._conn_factory) as (_, cur):
            if company_id is None:
                cur.execute(f"SELECT {_COLUMNS} FROM office_locations ORDER BY name")
            else:
                cur.execute(
                    f"""
                    SELECT {_COLUMNS}
                    FROM office_locations
                    WHERE company_id=%s OR company_id IS NULL
                    ORDER BY name
                    """,
                    (int(company_id),),
                )
            return [_to_model(r) for r in fetchall(cur)]

    def get_by_id(self, office_id: int) -> Optional[OfficeLocation]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM office_locations WHERE office_id=%s", (int(office_id),))
            r = fetchone(cur)
            return _to_model(r) if r else None

    def create(
        self,
        *,
        name: str,
        latitude: float,
        longitude: float,
        radius_meters: float,
        company_id: Optional[int],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO office_locations(name, latitude, longitude, radius_meters, company_id)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (name, latitude, longitude, radius_meters, company_id),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        office_id: int,
        name: str,
        latitude: float,
        longitude: float,
        radius_meters: float,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE office_locations
                SET name=%s, latitude=%s, longitude=%s, radius_meters=%s
                WHERE office_id=%s
                """,
                (name, latitude, longitude, radius_meters, int(office_id)),
            )
            return cur.rowcount > 0

    def delete(self, *, office_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM office_locations WHERE office_id=%s", (int(office_id),))
            return cur.rowcount > 0
