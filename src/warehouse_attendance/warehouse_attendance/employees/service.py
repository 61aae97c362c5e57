from __future__ import annotations

from typing import Sequence

from ..common.validators import is_blank, require_digits
from ..core.constants import DNI_LENGTH
from ..core.exceptions import DuplicateEmployeeError, UniqueViolation, ValidationError
from .model import Employee
from .repository import EmployeeRepository

DUPLICATE_DNI_MESSAGE = "Ya existe un empleado con ese DNI"


class EmployeeService:
    """Use case: manage the warehouse roster (admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def register(self, *, dni: str, full_name: str, position: str) -> Employee:
        if is_blank(dni) or is_blank(full_name) or is_blank(position):
            raise ValidationError("Todos los campos son requeridos")

        dni = require_digits(str(dni).strip(), DNI_LENGTH, f"El DNI debe tener {DNI_LENGTH} dígitos")

        if self._employees.get_by_dni(dni):
            raise DuplicateEmployeeError(DUPLICATE_DNI_MESSAGE)

        try:
            return self._employees.create(
                dni=dni,
                full_name=str(full_name).strip().upper(),
                position=str(position).strip(),
            )
        except UniqueViolation as exc:
            raise DuplicateEmployeeError(DUPLICATE_DNI_MESSAGE) from exc

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_by_name()
