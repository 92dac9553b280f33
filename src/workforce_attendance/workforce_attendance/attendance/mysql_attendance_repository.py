from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, optional_float
from ..geo.location import Coordinate
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = """
    attendance_id, employee_id, clock_in_time, clock_in_latitude, clock_in_longitude,
    clock_out_time, clock_out_latitude, clock_out_longitude, is_remote, status
"""


def _location(lat, lon) -> Optional[Coordinate]:
    if lat is None or lon is None:
        return None
    return Coordinate(latitude=optional_float(lat), longitude=optional_float(lon))


def _to_model(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        clock_in_time=r["clock_in_time"],
        clock_in_location=_location(r.get("clock_in_latitude"), r.get("clock_in_longitude")),
        clock_out_time=r.get("clock_out_time"),
        clock_out_location=_location(r.get("clock_out_latitude"), r.get("clock_out_longitude")),
        is_remote=bool(r.get("is_remote")),
        status=AttendanceStatus(r["status"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE attendance_id=%s", (int(attendance_id),))
            r = fetchone(cur)
            return _to_model(r) if r else None

    def get_active_for_employee(self, employee_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_id=%s AND status=%s
                """,
                (int(employee_id), AttendanceStatus.ACTIVE.value),
            )
            r = fetchone(cur)
            return _to_model(r) if r else None

    def get_recent_for_employee(self, employee_id: int, limit: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_id=%s
                ORDER BY clock_in_time DESC
                LIMIT %s
                """,
                (int(employee_id), int(limit)),
            )
            return [_to_model(r) for r in fetchall(cur)]

    def create_clock_in(
        self,
        *,
        employee_id: int,
        clock_in_time: datetime,
        location: Optional[Coordinate],
        is_remote: bool,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(
                    employee_id, clock_in_time, clock_in_latitude, clock_in_longitude, is_remote, status
                )
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(employee_id),
                    clock_in_time,
                    location.latitude if location else None,
                    location.longitude if location else None,
                    int(bool(is_remote)),
                    AttendanceStatus.ACTIVE.value,
                ),
            )
            return int(cur.lastrowid)

    def complete(
        self,
        *,
        attendance_id: int,
        clock_out_time: datetime,
        location: Optional[Coordinate],
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET clock_out_time=%s, clock_out_latitude=%s, clock_out_longitude=%s, status=%s
                WHERE attendance_id=%s AND status=%s
                """,
                (
                    clock_out_time,
                    location.latitude if location else None,
                    location.longitude if location else None,
                    AttendanceStatus.COMPLETED.value,
                    int(attendance_id),
                    AttendanceStatus.ACTIVE.value,
                ),
            )
            return cur.rowcount > 0
