from __future__ import annotations

from datetime import time
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import ShiftDefinition
from .repository import ShiftRepository

_COLUMNS = "shift_id, employee_id, shift_name, shift_start, shift_end, days_of_week, is_active, updated_at"


def encode_days(days: Sequence[int]) -> str:
    return ",".join(str(int(d)) for d in sorted(set(days)))


def decode_days(value: Optional[str]) -> tuple[int, ...]:
    if not value:
        return ()
    return tuple(sorted({int(p) for p in str(value).split(",") if p.strip()}))


def _to_model(r: dict) -> ShiftDefinition:
    return ShiftDefinition(
        shift_id=int(r["shift_id"]),
        employee_id=int(r["employee_id"]),
        shift_name=r["shift_name"],
        start_time=normalize_mysql_time(r["shift_start"]),
        end_time=normalize_mysql_time(r["shift_end"]),
        days_of_week=decode_days(r.get("days_of_week")),
        is_active=bool(r.get("is_active")),
        updated_at=r.get("updated_at"),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active_for_employee(self, employee_id: int) -> Sequence[ShiftDefinition]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employee_shifts
                WHERE employee_id=%s AND is_active=1
                ORDER BY updated_at DESC, shift_id DESC
                """,
                (int(employee_id),),
            )
            return [_to_model(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[ShiftDefinition]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employee_shifts ORDER BY employee_id, shift_id")
            return [_to_model(r) for r in fetchall(cur)]

    def get_by_id(self, shift_id: int) -> Optional[ShiftDefinition]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employee_shifts WHERE shift_id=%s", (int(shift_id),))
            r = fetchone(cur)
            return _to_model(r) if r else None

    def create(
        self,
        *,
        employee_id: int,
        shift_name: str,
        start_time: time,
        end_time: time,
        days_of_week: Sequence[int],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employee_shifts(employee_id, shift_name, shift_start, shift_end, days_of_week, is_active)
                VALUES(%s,%s,%s,%s,%s,1)
                """,
                (int(employee_id), shift_name, start_time, end_time, encode_days(days_of_week)),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        shift_id: int,
        shift_name: str,
        start_time: time,
        end_time: time,
        days_of_week: Sequence[int],
        is_active: bool,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employee_shifts
                SET shift_name=%s, shift_start=%s, shift_end=%s, days_of_week=%s, is_active=%s
                WHERE shift_id=%s
                """,
                (shift_name, start_time, end_time, encode_days(days_of_week), int(bool(is_active)), int(shift_id)),
            )
            return cur.rowcount > 0

    def delete(self, *, shift_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employee_shifts WHERE shift_id=%s", (int(shift_id),))
            return cur.rowcount > 0
