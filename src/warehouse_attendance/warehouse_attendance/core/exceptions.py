from __future__ import annotations

from typing import Optional

from .enums import AttendanceKind


class DomainError(Exception):
    """Base exception for business rule violations.

    Subclasses carry a stable ``code`` for API clients and the HTTP status the
    controllers answer with. Messages are safe to show to the end user.
    """

    code = "DOMAIN_ERROR"
    http_status = 400


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""

    code = "INVALID_INPUT"


class InvalidKindError(DomainError):
    """Raised when the attendance kind is not one of the four known values."""

    code = "INVALID_KIND"


class OutOfRangeError(DomainError):
    """Raised when the reported position is outside the warehouse geofence."""

    code = "OUT_OF_RANGE"
    http_status = 403

    def __init__(self, distance_meters: int, max_radius_meters: int):
        super().__init__(
            "No estás dentro del rango del almacén. "
            f"Distancia: {distance_meters}m (máximo: {max_radius_meters}m)"
        )
        self.distance_meters = distance_meters
        self.max_radius_meters = max_radius_meters


class UnknownEmployeeError(DomainError):
    code = "UNKNOWN_EMPLOYEE"
    http_status = 404


class DuplicateAttendanceError(DomainError):
    """Raised when the employee already registered this kind today."""

    code = "DUPLICATE_TODAY"
    http_status = 409

    def __init__(self, kind: AttendanceKind):
        super().__init__(f"Ya registraste tu {kind.label} hoy.")
        self.kind = kind


class DuplicateEmployeeError(DomainError):
    code = "DUPLICATE_EMPLOYEE"
    http_status = 409


class SequenceViolationError(DomainError):
    code = "SEQUENCE_VIOLATION"

    def __init__(self, missing: AttendanceKind):
        super().__init__(f'Debes registrar "{missing.label}" primero.')
        self.missing = missing


class PersistenceError(DomainError):
    """Raised when the data store fails. The message is never shown to users."""

    code = "PERSISTENCE_FAILURE"
    http_status = 500

    def __init__(self, message: str = "Database error", *, errno: Optional[int] = None):
        super().__init__(message)
        self.errno = errno


class UniqueViolation(PersistenceError):
    """Raised when an insert hits a unique index."""
