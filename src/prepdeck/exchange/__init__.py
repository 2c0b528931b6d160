# src/prepdeck/exchange/__init__.py
"""Export and import formats for question collections.

Formats:
- json: full-fidelity array of records (round-trips through import)
- xlsx: one row per question, sources flattened to newline-joined URIs
- markdown: human-readable, grouped by category (export only)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from prepdeck.exceptions import InvalidFormat
from prepdeck.exchange.json_format import dumps_questions, read_json_records
from prepdeck.exchange.markdown import render_markdown
from prepdeck.exchange.spreadsheet import read_xlsx_records, write_xlsx
from prepdeck.models import Question

ExportFormat = Literal["json", "xlsx", "markdown"]

EXPORT_EXTENSIONS: dict[str, str] = {
    "json": ".json",
    "xlsx": ".xlsx",
    "markdown": ".md",
}


def format_from_path(path: str | Path) -> ExportFormat:
    """Infer the export format from a file extension."""
    suffix = Path(path).suffix.lower()
    if suffix == ".json":
        return "json"
    if suffix == ".xlsx":
        return "xlsx"
    if suffix in (".md", ".markdown"):
        return "markdown"
    raise InvalidFormat(f"Unsupported file type '{suffix or path}'. Use .json, .xlsx or .md")


def export_questions(
    questions: list[Question],
    path: str | Path,
    fmt: ExportFormat | None = None,
) -> Path:
    """Write questions to path in the given (or inferred) format."""
    target = Path(path)
    fmt = fmt or format_from_path(target)
    target.parent.mkdir(parents=True, exist_ok=True)

    if fmt == "json":
        target.write_text(dumps_questions(questions), encoding="utf-8")
    elif fmt == "markdown":
        target.write_text(render_markdown(questions), encoding="utf-8")
    elif fmt == "xlsx":
        write_xlsx(questions, target)
    else:
        raise InvalidFormat(f"Unknown export format '{fmt}'")
    return target


def read_import_file(path: str | Path) -> list[Any]:
    """Read an import file into raw records ready for import_merge().

    Raises:
        InvalidFormat: If the file cannot be parsed or has the wrong shape.
        FileNotFoundError: If the file does not exist.
    """
    source = Path(path)
    suffix = source.suffix.lower()
    if suffix == ".xlsx":
        return read_xlsx_records(source)
    if suffix == ".json":
        return read_json_records(source)
    raise InvalidFormat(f"Cannot import '{suffix or path}' files. Use .json or .xlsx")


__all__ = [
    "ExportFormat",
    "EXPORT_EXTENSIONS",
    "format_from_path",
    "export_questions",
    "read_import_file",
    "dumps_questions",
    "render_markdown",
]
