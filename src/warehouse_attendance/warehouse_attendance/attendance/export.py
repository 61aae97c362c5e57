from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Iterable

import pandas as pd
from openpyxl.utils import get_column_letter

from ..common.datetime_utils import month_name
from .model import AttendanceRecord

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# Column header -> width in characters.
COLUMNS = (
    ("DNI", 12),
    ("Nombre", 30),
    ("Fecha", 12),
    ("Hora", 10),
    ("Tipo", 18),
    ("Latitud", 14),
    ("Longitud", 14),
)


@dataclass(frozen=True)
class SpreadsheetExport:
    content: bytes
    filename: str
    sheet_name: str


def _to_row(r: AttendanceRecord) -> dict:
    return {
        "DNI": r.dni,
        "Nombre": r.full_name,
        "Fecha": r.work_date.isoformat(),
        "Hora": r.work_time.strftime("%H:%M:%S"),
        "Tipo": r.kind.label,
        "Latitud": r.latitude,
        "Longitud": r.longitude,
    }


def build_attendance_workbook(records: Iterable[AttendanceRecord], *, month: int, year: int) -> SpreadsheetExport:
    """Render attendance rows into an in-memory .xlsx file (nothing written to disk)."""

    name = month_name(month)
    sheet_name = f"Asistencia {name} {year}"

    df = pd.DataFrame([_to_row(r) for r in records], columns=[header for header, _ in COLUMNS])

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
        sheet = writer.sheets[sheet_name]
        for idx, (_, width) in enumerate(COLUMNS, start=1):
            sheet.column_dimensions[get_column_letter(idx)].width = width

    return SpreadsheetExport(
        content=output.getvalue(),
        filename=f"asistencia_{name}_{year}.xlsx",
        sheet_name=sheet_name,
    )
