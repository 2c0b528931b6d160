# src/prepdeck/commands/import_cmd.py
"""Import command - merge a JSON or xlsx file into the store."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from prepdeck.commands.base import ImportResult, open_tracker
from prepdeck.config import ConfigError
from prepdeck.exceptions import InvalidFormat
from prepdeck.exchange import read_import_file

if TYPE_CHECKING:
    from prepdeck.tracker import Tracker


def import_file(
    path: str | Path,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    tracker: Tracker | None = None,
) -> ImportResult:
    """Merge questions from a file, keyed by id.

    Records with an id already in the store replace the stored copy;
    records without an id or text are skipped. A file that cannot be
    parsed leaves the store untouched.
    """
    source = Path(path)
    if not source.exists():
        return ImportResult(success=False, path=str(source), error=f"File not found: {source}")

    try:
        records = read_import_file(source)
    except InvalidFormat as e:
        return ImportResult(success=False, path=str(source), error=str(e))

    opened = open_tracker(tracker, data_dir, config_path)
    if isinstance(opened, ConfigError):
        return ImportResult(success=False, path=str(source), error=opened.message)

    try:
        summary = opened.question_store.import_merge(records)
    except InvalidFormat as e:
        return ImportResult(success=False, path=str(source), error=str(e))

    return ImportResult(success=True, path=str(source), summary=summary)
