from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import utc_isoformat


@dataclass(frozen=True)
class Employee:
    """Domain entity: warehouse employee.

    Note: Plain data object (no DB access code). Created once, never updated.
    """

    employee_id: int
    dni: str
    full_name: str
    position: str
    created_at: Optional[datetime] = None

    def to_api(self) -> dict:
        return {
            "id": self.employee_id,
            "dni": self.dni,
            "nombre": self.full_name,
            "cargo": self.position,
            "created_at": utc_isoformat(self.created_at),
        }
