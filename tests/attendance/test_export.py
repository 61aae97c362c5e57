from __future__ import annotations

import io
from datetime import date, time

from openpyxl import load_workbook

from warehouse_attendance.attendance.export import build_attendance_workbook
from warehouse_attendance.attendance.model import AttendanceRecord
from warehouse_attendance.core.enums import AttendanceKind


def _record(attendance_id: int, work_date: date, work_time: time, kind: AttendanceKind) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=attendance_id,
        employee_id=1,
        dni="12345678",
        full_name="QUISPE MAMANI, JUAN",
        work_date=work_date,
        work_time=work_time,
        kind=kind,
        latitude=-12.0464,
        longitude=-77.0428,
    )


def test_workbook_layout_and_translated_labels():
    records = [
        _record(1, date(2025, 2, 3), time(7, 55, 2), AttendanceKind.ENTRADA),
        _record(2, date(2025, 2, 3), time(13, 1, 0), AttendanceKind.SALIDA_ALMUERZO),
    ]

    export = build_attendance_workbook(records, month=2, year=2025)

    assert export.filename == "asistencia_Febrero_2025.xlsx"
    assert export.sheet_name == "Asistencia Febrero 2025"

    wb = load_workbook(io.BytesIO(export.content))
    ws = wb["Asistencia Febrero 2025"]
    rows = list(ws.iter_rows(values_only=True))

    assert rows[0] == ("DNI", "Nombre", "Fecha", "Hora", "Tipo", "Latitud", "Longitud")
    assert rows[1] == ("12345678", "QUISPE MAMANI, JUAN", "2025-02-03", "07:55:02", "Entrada", -12.0464, -77.0428)
    assert rows[2][4] == "Salida Almuerzo"
    assert ws.column_dimensions["A"].width == 12
    assert ws.column_dimensions["B"].width == 30
    assert ws.column_dimensions["G"].width == 14


def test_empty_month_still_has_header_row():
    export = build_attendance_workbook([], month=9, year=2026)

    wb = load_workbook(io.BytesIO(export.content))
    ws = wb["Asistencia Septiembre 2026"]
    rows = list(ws.iter_rows(values_only=True))

    assert rows == [("DNI", "Nombre", "Fecha", "Hora", "Tipo", "Latitud", "Longitud")]
    assert export.filename == "asistencia_Septiembre_2026.xlsx"
