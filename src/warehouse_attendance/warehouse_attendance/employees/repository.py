from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_by_dni(self, dni: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, *, dni: str, full_name: str, position: str) -> Employee:
        """Insert an employee; raises ``UniqueViolation`` on a repeated DNI."""

        raise NotImplementedError

    def list_by_name(self) -> Sequence[Employee]:
        raise NotImplementedError
