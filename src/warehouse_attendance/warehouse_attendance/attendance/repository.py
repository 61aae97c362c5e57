from __future__ import annotations

from datetime import date, time
from typing import Protocol, Sequence

from ..core.enums import AttendanceKind
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_kinds_for_dni_and_date(self, dni: str, work_date: date) -> set[AttendanceKind]:
        raise NotImplementedError

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
        """Insert a record; raises ``UniqueViolation`` on a repeated (dni, date, kind)."""

        raise NotImplementedError

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        """Records with ``start_date <= work_date <= end_date`` ordered by date, then time."""

        raise NotImplementedError
