from __future__ import annotations

import pytest

from warehouse_attendance.attendance.sequence import REQUIRED_PREDECESSOR, SequenceOutcome, check_sequence
from warehouse_attendance.core.enums import AttendanceKind

ENTRADA = AttendanceKind.ENTRADA
SALIDA_ALMUERZO = AttendanceKind.SALIDA_ALMUERZO
ENTRADA_ALMUERZO = AttendanceKind.ENTRADA_ALMUERZO
SALIDA = AttendanceKind.SALIDA


def test_predecessor_table():
    assert REQUIRED_PREDECESSOR == {
        ENTRADA: None,
        SALIDA_ALMUERZO: ENTRADA,
        ENTRADA_ALMUERZO: SALIDA_ALMUERZO,
        SALIDA: ENTRADA_ALMUERZO,
    }


def test_entrada_on_empty_day_is_ok():
    check = check_sequence(ENTRADA, set())

    assert check.outcome == SequenceOutcome.OK
    assert check.missing is None


def test_salida_almuerzo_on_empty_day_is_missing_entrada():
    check = check_sequence(SALIDA_ALMUERZO, set())

    assert check.outcome == SequenceOutcome.MISSING_PREDECESSOR
    assert check.missing == ENTRADA


def test_repeated_entrada_is_already_recorded():
    check = check_sequence(ENTRADA, {ENTRADA})

    assert check.outcome == SequenceOutcome.ALREADY_RECORDED


@pytest.mark.parametrize(
    "kind, recorded, missing",
    [
        (ENTRADA_ALMUERZO, {ENTRADA}, SALIDA_ALMUERZO),
        (SALIDA, {ENTRADA, SALIDA_ALMUERZO}, ENTRADA_ALMUERZO),
        (SALIDA, set(), ENTRADA_ALMUERZO),
    ],
)
def test_missing_predecessor_names_the_required_kind(kind, recorded, missing):
    check = check_sequence(kind, recorded)

    assert check.outcome == SequenceOutcome.MISSING_PREDECESSOR
    assert check.missing == missing


def test_full_day_in_order():
    recorded: set[AttendanceKind] = set()
    for kind in AttendanceKind:
        assert check_sequence(kind, recorded).outcome == SequenceOutcome.OK
        recorded.add(kind)


def test_duplicate_wins_over_missing_predecessor():
    # Inconsistent day set: salida present but its predecessor is not.
    check = check_sequence(SALIDA, {SALIDA})

    assert check.outcome == SequenceOutcome.ALREADY_RECORDED
