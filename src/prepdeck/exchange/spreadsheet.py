# src/prepdeck/exchange/spreadsheet.py
"""Spreadsheet (xlsx) import and export using openpyxl."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from zipfile import BadZipFile

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Alignment, Font
from openpyxl.utils.exceptions import InvalidFileException

from prepdeck.exceptions import InvalidFormat
from prepdeck.models import Question

SHEET_TITLE = "Questions"

# Column order of the exported sheet; headers use the JSON field names.
COLUMNS: list[str] = [
    "id",
    "text",
    "answer",
    "category",
    "companyTag",
    "createdAt",
    "updatedAt",
    "isAiGenerated",
    "sources",
]

_WIDTHS = {"text": 50, "answer": 80, "sources": 50}


def _row(question: Question) -> list[Any]:
    record = question.to_record()
    uris = [s.uri for s in question.sources if s.uri]
    record["sources"] = "\n".join(uris)
    return [record[column] for column in COLUMNS]


def write_xlsx(questions: list[Question], path: Path) -> None:
    """Write one row per question with a bold header row."""
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE

    ws.append(COLUMNS)
    for cell in ws[1]:
        cell.font = Font(bold=True)
    for question in questions:
        ws.append(_row(question))

    for index, column in enumerate(COLUMNS, start=1):
        letter = ws.cell(row=1, column=index).column_letter
        ws.column_dimensions[letter].width = _WIDTHS.get(column, 16)
        if column in _WIDTHS:
            for cell in ws[letter][1:]:
                cell.alignment = Alignment(wrap_text=True, vertical="top")
    ws.freeze_panes = "A2"

    wb.save(path)


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    return str(value or "").strip().lower() in ("true", "1", "yes")


def _coerce_int(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return value


def _to_record(row: dict[str, Any]) -> dict[str, Any]:
    record: dict[str, Any] = {}
    for key, value in row.items():
        if value is None:
            continue
        if key in ("id", "text", "answer", "category", "companyTag"):
            record[key] = str(value)
        elif key in ("createdAt", "updatedAt"):
            record[key] = _coerce_int(value)
        elif key == "isAiGenerated":
            record[key] = _coerce_bool(value)
        elif key == "sources":
            uris = [line.strip() for line in str(value).splitlines() if line.strip()]
            record[key] = [{"uri": uri, "title": None} for uri in uris]
        else:
            record[key] = value
    return record


def read_xlsx_records(path: Path) -> list[dict[str, Any]]:
    """Convert the first sheet of a workbook into question-shaped records.

    The first row is the header. Rows that are entirely empty are dropped;
    anything else is passed on and validated by the import merge.
    """
    try:
        wb = load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, BadZipFile, OSError, KeyError, ValueError) as e:
        raise InvalidFormat(f"{path.name} is not a readable xlsx workbook: {e}") from e

    try:
        ws = wb.worksheets[0]
        rows = ws.iter_rows(values_only=True)
        header_row = next(rows, None)
        if header_row is None:
            return []
        headers = [str(h).strip() if h is not None else "" for h in header_row]

        records = []
        for values in rows:
            if all(v is None or v == "" for v in values):
                continue
            row = {h: v for h, v in zip(headers, values, strict=False) if h}
            records.append(_to_record(row))
        return records
    finally:
        wb.close()
