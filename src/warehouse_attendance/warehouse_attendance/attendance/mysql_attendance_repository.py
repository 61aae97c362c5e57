from __future__ import annotations

from datetime import date, time
from typing import Sequence

from ..core.enums import AttendanceKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = """
    attendance_id, employee_id, dni, full_name, work_date, work_time,
    kind, latitude, longitude, created_at
"""


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        dni=r["dni"],
        full_name=r["full_name"],
        work_date=r["work_date"],
        work_time=normalize_mysql_time(r["work_time"]),
        kind=AttendanceKind(r["kind"]),
        latitude=float(r["latitude"]),
        longitude=float(r["longitude"]),
        created_at=r.get("created_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_kinds_for_dni_and_date(self, dni: str, work_date: date) -> set[AttendanceKind]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT kind
                FROM attendance_records
                WHERE dni=%s AND work_date=%s
                """,
                (dni, work_date),
            )
            return {AttendanceKind(r["kind"]) for r in fetchall(cur)}

    def create(
        self,
        *,
        employee_id: int,
        dni: str,
        full_name: str,
        work_date: date,
        work_time: time,
        kind: AttendanceKind,
        latitude: float,
        longitude: float,
    ) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(
                    employee_id, dni, full_name, work_date, work_time, kind, latitude, longitude
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (employee_id, dni, full_name, work_date, work_time, kind.value, latitude, longitude),
            )
            attendance_id = int(cur.lastrowid)
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records WHERE attendance_id=%s",
                (attendance_id,),
            )
            return _to_record(fetchone(cur))

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE work_date BETWEEN %s AND %s
                ORDER BY work_date ASC, work_time ASC
                """,
                (start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]
