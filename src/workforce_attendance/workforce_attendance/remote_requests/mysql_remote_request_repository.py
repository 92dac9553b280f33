from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..geo.location import Coordinate
from .model import RemoteClockInRequest
from .repository import RemoteRequestRepository

_COLUMNS = """
    request_id, employee_id, supervisor_id, requested_at, latitude, longitude,
    reason, status, responded_at, consumed_at, attendance_id
"""


def _to_model(r: dict) -> RemoteClockInRequest:
    return RemoteClockInRequest(
        request_id=int(r["request_id"]),
        employee_id=int(r["employee_id"]),
        supervisor_id=int(r["supervisor_id"]),
        requested_at=r["requested_at"],
        location=Coordinate(latitude=float(r["latitude"]), longitude=float(r["longitude"])),
        reason=r.get("reason"),
        status=RequestStatus(r["status"]),
        responded_at=r.get("responded_at"),
        consumed_at=r.get("consumed_at"),
        attendance_id=int(r["attendance_id"]) if r.get("attendance_id") is not None else None,
    )


class MySQLRemoteRequestRepository(RemoteRequestRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        employee_id: int,
        supervisor_id: int,
        requested_at: datetime,
        location: Coordinate,
        reason: Optional[str],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO remote_clockin_requests(
                    employee_id, supervisor_id, requested_at, latitude, longitude, reason, status
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(employee_id),
                    int(supervisor_id),
                    requested_at,
                    location.latitude,
                    location.longitude,
                    reason,
                    RequestStatus.PENDING.value,
                ),
            )
            return int(cur.lastrowid)

    def get_by_id(self, request_id: int) -> Optional[RemoteClockInRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM remote_clockin_requests WHERE request_id=%s", (int(request_id),))
            r = fetchone(cur)
            return _to_model(r) if r else None

    def get_pending_for_employee(self, employee_id: int) -> Optional[RemoteClockInRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM remote_clockin_requests
                WHERE employee_id=%s AND status=%s
                ORDER BY requested_at DESC
                LIMIT 1
                """,
                (int(employee_id), RequestStatus.PENDING.value),
            )
            r = fetchone(cur)
            return _to_model(r) if r else None

    def list_pending_for_supervisor(self, supervisor_id: int) -> Sequence[RemoteClockInRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM remote_clockin_requests
                WHERE supervisor_id=%s AND status=%s
                ORDER BY requested_at DESC
                """,
                (int(supervisor_id), RequestStatus.PENDING.value),
            )
            return [_to_model(r) for r in fetchall(cur)]

    def decide(self, *, request_id: int, status: RequestStatus, responded_at: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE remote_clockin_requests
                SET status=%s, responded_at=%s
                WHERE request_id=%s AND status=%s
                """,
                (status.value, responded_at, int(request_id), RequestStatus.PENDING.value),
            )
            return cur.rowcount > 0

    def consume(self, *, request_id: int, consumed_at: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE remote_clockin_requests
                SET consumed_at=%s
                WHERE request_id=%s AND status=%s AND consumed_at IS NULL
                """,
                (consumed_at, int(request_id), RequestStatus.APPROVED.value),
            )
            return cur.rowcount > 0

    def link_attendance(self, *, request_id: int, attendance_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE remote_clockin_requests SET attendance_id=%s WHERE request_id=%s AND attendance_id IS NULL",
                (int(attendance_id), int(request_id)),
            )
            return cur.rowcount > 0
