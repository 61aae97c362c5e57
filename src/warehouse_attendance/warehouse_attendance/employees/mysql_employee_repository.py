from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=int(row["employee_id"]),
        dni=row["dni"],
        full_name=row["full_name"],
        position=row["position"],
        created_at=row.get("created_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_dni(self, dni: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, dni, full_name, position, created_at
                FROM employees
                WHERE dni=%s
                """,
                (dni,),
            )
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def create(self, *, dni: str, full_name: str, position: str) -> Employee:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(dni, full_name, position)
                VALUES(%s,%s,%s)
                """,
                (dni, full_name, position),
            )
            employee_id = int(cur.lastrowid)
            cur.execute(
                """
                SELECT employee_id, dni, full_name, position, created_at
                FROM employees
                WHERE employee_id=%s
                """,
                (employee_id,),
            )
            return _to_employee(fetchone(cur))

    def list_by_name(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, dni, full_name, position, created_at
                FROM employees
                ORDER BY full_name ASC
                """
            )
            return [_to_employee(r) for r in fetchall(cur)]
