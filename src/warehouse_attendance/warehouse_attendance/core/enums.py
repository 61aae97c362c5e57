from __future__ import annotations

from enum import Enum


class AttendanceKind(str, Enum):
    """Daily attendance events, declared in the order they must be registered."""

    ENTRADA = "entrada"
    SALIDA_ALMUERZO = "salida_almuerzo"
    ENTRADA_ALMUERZO = "entrada_almuerzo"
    SALIDA = "salida"

    @property
    def label(self) -> str:
        return KIND_LABELS[self]

    @classmethod
    def parse(cls, value: str) -> "AttendanceKind | None":
        try:
            return cls(value)
        except ValueError:
            return None


KIND_LABELS = {
    AttendanceKind.ENTRADA: "Entrada",
    AttendanceKind.SALIDA_ALMUERZO: "Salida Almuerzo",
    AttendanceKind.ENTRADA_ALMUERZO: "Entrada Almuerzo",
    AttendanceKind.SALIDA: "Salida",
}
