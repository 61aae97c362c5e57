from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

import pytest

from warehouse_attendance.attendance.geofence import Geofence
from warehouse_attendance.attendance.model import AttendanceRecord
from warehouse_attendance.container import build_services
from warehouse_attendance.core.enums import AttendanceKind
from warehouse_attendance.core.exceptions import UniqueViolation
from warehouse_attendance.employees.model import Employee

WAREHOUSE = Geofence(latitude=-12.0464, longitude=-77.0428, max_radius_meters=100)


class InMemoryEmployees:
    def __init__(self, employees: Optional[list[Employee]] = None):
        self._by_dni: dict[str, Employee] = {e.dni: e for e in employees or []}
        self._id = max((e.employee_id for e in self._by_dni.values()), default=0)

    def get_by_dni(self, dni: str) -> Optional[Employee]:
        return self._by_dni.get(dni)

    def create(self, *, dni: str, full_name: str, position: str) -> Employee:
        if dni in self._by_dni:
            raise UniqueViolation("Duplicate entry for key 'uq_employees_dni'")
        self._id += 1
        employee = Employee(
            employee_id=self._id,
            dni=dni,
            full_name=full_name,
            position=position,
            created_at=datetime(2025, 2, 1, 12, 0, 0),
        )
        self._by_dni[dni] = employee
        return employee

    def list_by_name(self):
        return sorted(self._by_dni.values(), key=lambda e: e.full_name)


class InMemoryAttendance:
    def __init__(self):
        self.records: list[AttendanceRecord] = []
        self._id = 0

    def list_kinds_for_dni_and_date(self, dni: str, work_date: date) -> set[AttendanceKind]:
        return {r.kind for r in self.records if r.dni == dni and r.work_date == work_date}

    def create(self, *, employee_id, dni, full_name, work_date, work_time, kind, latitude, longitude) -> AttendanceRecord:
        if kind in self.list_kinds_for_dni_and_date(dni, work_date):
            raise UniqueViolation("Duplicate entry for key 'uq_attendance_dni_date_kind'")
        self._id += 1
        record = AttendanceRecord(
            attendance_id=self._id,
            employee_id=employee_id,
            dni=dni,
            full_name=full_name,
            work_date=work_date,
            work_time=work_time,
            kind=kind,
            latitude=latitude,
            longitude=longitude,
        )
        self.records.append(record)
        return record

    def list_between(self, *, start_date: date, end_date: date):
        rows = [r for r in self.records if start_date <= r.work_date <= end_date]
        return sorted(rows, key=lambda r: (r.work_date, r.work_time))


@pytest.fixture
def warehouse() -> Geofence:
    return WAREHOUSE


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 2, 14, 7, 58, 30, tzinfo=ZoneInfo("America/Lima"))


@pytest.fixture
def juan() -> Employee:
    return Employee(employee_id=1, dni="12345678", full_name="QUISPE MAMANI, JUAN", position="Almacenero")


@pytest.fixture
def employees_repo(juan) -> InMemoryEmployees:
    return InMemoryEmployees([juan])


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def container(employees_repo, attendance_repo):
    return build_services(employees_repo=employees_repo, attendance_repo=attendance_repo, geofence=WAREHOUSE)
