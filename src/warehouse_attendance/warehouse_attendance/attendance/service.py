from __future__ import annotations

from datetime import datetime
from typing import Any, Sequence

from ..common.datetime_utils import month_bounds, now_local
from ..common.validators import coerce_float, coerce_int, is_blank
from ..core.constants import DEFAULT_TIMEZONE
from ..core.enums import AttendanceKind
from ..core.exceptions import (
    DuplicateAttendanceError,
    InvalidKindError,
    OutOfRangeError,
    SequenceViolationError,
    UniqueViolation,
    UnknownEmployeeError,
    ValidationError,
)
from ..employees.repository import EmployeeRepository
from .geofence import Geofence
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .sequence import SequenceOutcome, check_sequence


class AttendanceService:
    """Use case: register attendance events and query them by month."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        geofence: Geofence,
        timezone: str = DEFAULT_TIMEZONE,
    ):
        self._attendance = attendance
        self._employees = employees
        self._geofence = geofence
        self._timezone = timezone

    @property
    def timezone(self) -> str:
        return self._timezone

    def register(
        self,
        *,
        dni: Any,
        kind: Any,
        latitude: Any,
        longitude: Any,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        """Validate and persist one attendance event.

        Checks run in a fixed order (input, kind, geofence, employee, duplicate,
        sequence) so the first failing rule decides the reported error. Date and
        time always come from the server clock in the configured timezone.
        """

        lat = coerce_float(latitude)
        lon = coerce_float(longitude)
        if is_blank(dni) or is_blank(kind) or lat is None or lon is None:
            raise ValidationError("Faltan campos requeridos")

        parsed_kind = AttendanceKind.parse(str(kind))
        if parsed_kind is None:
            raise InvalidKindError("Tipo de asistencia no válido")

        location = self._geofence.evaluate(lat, lon)
        if not location.in_range:
            raise OutOfRangeError(location.distance_meters, self._geofence.max_radius_meters)

        dni = str(dni).strip()
        employee = self._employees.get_by_dni(dni)
        if not employee:
            raise UnknownEmployeeError("DNI no registrado. Contacte al administrador.")

        now = now or now_local(self._timezone)
        today = now.date()

        check = check_sequence(parsed_kind, self._attendance.list_kinds_for_dni_and_date(dni, today))
        if check.outcome == SequenceOutcome.ALREADY_RECORDED:
            raise DuplicateAttendanceError(parsed_kind)
        if check.outcome == SequenceOutcome.MISSING_PREDECESSOR:
            raise SequenceViolationError(check.missing)

        try:
            return self._attendance.create(
                employee_id=employee.employee_id,
                dni=dni,
                full_name=employee.full_name,
                work_date=today,
                work_time=now.time().replace(microsecond=0, tzinfo=None),
                kind=parsed_kind,
                latitude=lat,
                longitude=lon,
            )
        except UniqueViolation as exc:
            # A concurrent request inserted the same (dni, date, kind) first.
            raise DuplicateAttendanceError(parsed_kind) from exc

    def list_month(self, *, month: Any, year: Any) -> Sequence[AttendanceRecord]:
        month_num, year_num = parse_month_year(month, year)
        start, end = month_bounds(year_num, month_num)
        return self._attendance.list_between(start_date=start, end_date=end)


def parse_month_year(month: Any, year: Any) -> tuple[int, int]:
    if is_blank(month) or is_blank(year):
        raise ValidationError("Se requieren mes y año")

    month_num = coerce_int(month)
    year_num = coerce_int(year)
    if month_num is None or year_num is None or not 1 <= month_num <= 12 or not 1 <= year_num <= 9999:
        raise ValidationError("Mes o año no válido")
    return month_num, year_num
