# src/prepdeck/commands/export.py
"""Export command - write the collection to JSON, xlsx or Markdown."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from prepdeck.commands.base import ExportResult, open_tracker
from prepdeck.config import ConfigError
from prepdeck.exceptions import InvalidFormat
from prepdeck.exchange import EXPORT_EXTENSIONS, ExportFormat, export_questions, format_from_path
from prepdeck.filtering import ALL_CATEGORIES, filter_questions

if TYPE_CHECKING:
    from prepdeck.tracker import Tracker


def default_export_path(fmt: ExportFormat) -> Path:
    """File name used when no output path is given."""
    return Path(f"interview_questions{EXPORT_EXTENSIONS[fmt]}")


def export(
    output: str | Path | None = None,
    fmt: ExportFormat | None = None,
    category: str = ALL_CATEGORIES,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    tracker: Tracker | None = None,
) -> ExportResult:
    """Export questions to a file.

    Args:
        output: Target file. Defaults to interview_questions.<ext> in the current directory.
        fmt: "json", "xlsx" or "markdown". Inferred from output when omitted.
        category: Export only one category ("All" for everything)
        data_dir: Override data directory
        config_path: Override config file path
        tracker: Use this tracker instead of building one from config

    Returns:
        ExportResult with the written path and question count
    """
    try:
        if fmt is None:
            fmt = format_from_path(output) if output is not None else "json"
    except InvalidFormat as e:
        return ExportResult(success=False, error=str(e))
    if fmt not in EXPORT_EXTENSIONS:
        return ExportResult(success=False, error=f"Unknown export format '{fmt}'")

    opened = open_tracker(tracker, data_dir, config_path)
    if isinstance(opened, ConfigError):
        return ExportResult(success=False, error=opened.message)

    questions = filter_questions(
        opened.question_store.get_all(),
        category=category,
        known_categories=opened.category_store.get_all(),
    )
    target = Path(output) if output is not None else default_export_path(fmt)

    try:
        written = export_questions(questions, target, fmt)
    except OSError as e:
        return ExportResult(success=False, path=str(target), format=fmt, error=str(e))

    return ExportResult(success=True, path=str(written), format=fmt, count=len(questions))
