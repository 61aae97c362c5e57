from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Optional

from ..core.enums import AttendanceKind

# Each kind may only be registered once its predecessor exists for the same day.
REQUIRED_PREDECESSOR: dict[AttendanceKind, Optional[AttendanceKind]] = {
    AttendanceKind.ENTRADA: None,
    AttendanceKind.SALIDA_ALMUERZO: AttendanceKind.ENTRADA,
    AttendanceKind.ENTRADA_ALMUERZO: AttendanceKind.SALIDA_ALMUERZO,
    AttendanceKind.SALIDA: AttendanceKind.ENTRADA_ALMUERZO,
}


class SequenceOutcome(str, Enum):
    OK = "OK"
    ALREADY_RECORDED = "ALREADY_RECORDED"
    MISSING_PREDECESSOR = "MISSING_PREDECESSOR"


@dataclass(frozen=True)
class SequenceCheck:
    outcome: SequenceOutcome
    missing: Optional[AttendanceKind] = None


def check_sequence(kind: AttendanceKind, recorded_today: AbstractSet[AttendanceKind]) -> SequenceCheck:
    """Decide whether ``kind`` may be registered given today's recorded kinds."""

    if kind in recorded_today:
        return SequenceCheck(SequenceOutcome.ALREADY_RECORDED)

    previous = REQUIRED_PREDECESSOR[kind]
    if previous is not None and previous not in recorded_today:
        return SequenceCheck(SequenceOutcome.MISSING_PREDECESSOR, missing=previous)

    return SequenceCheck(SequenceOutcome.OK)
