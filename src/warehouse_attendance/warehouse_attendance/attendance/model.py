from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..common.datetime_utils import utc_isoformat
from ..core.enums import AttendanceKind


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance event.

    ``dni`` and ``full_name`` are copied from the employee when the record is
    created so historical rows stay stable if the roster changes.
    """

    attendance_id: int
    employee_id: int
    dni: str
    full_name: str
    work_date: date
    work_time: time
    kind: AttendanceKind
    latitude: float
    longitude: float
    created_at: Optional[datetime] = None

    def to_api(self) -> dict:
        return {
            "id": self.attendance_id,
            "empleado_id": self.employee_id,
            "dni": self.dni,
            "nombre": self.full_name,
            "fecha": self.work_date.isoformat(),
            "hora": self.work_time.strftime("%H:%M:%S"),
            "tipo": self.kind.value,
            "latitud": self.latitude,
            "longitud": self.longitude,
            "created_at": utc_isoformat(self.created_at),
        }
