# src/prepdeck/commands/sync.py
"""Sync command - mirror the collection into a project directory."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from prepdeck.commands.base import SyncResult, open_tracker
from prepdeck.config import ConfigError

if TYPE_CHECKING:
    from prepdeck.tracker import Tracker


def sync(
    directory: str | Path,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    tracker: Tracker | None = None,
) -> SyncResult:
    """Write the current collection to <directory>/data/interview_questions.json.

    To mirror on every change, set sync_dir in prepdeck.yaml instead.
    """
    opened = open_tracker(tracker, data_dir, config_path)
    if isinstance(opened, ConfigError):
        return SyncResult(success=False, directory=str(directory), error=opened.message)

    if not Path(directory).expanduser().is_dir():
        return SyncResult(
            success=False,
            directory=str(directory),
            error=f"Not a directory: {directory}",
        )

    if not opened.attach_sync(directory):
        return SyncResult(
            success=False,
            directory=str(directory),
            error="Could not write the mirror file. See the log for details.",
        )

    return SyncResult(
        success=True,
        directory=str(opened.sync.directory),
        target_path=str(opened.sync.target_path),
        count=opened.question_store.count_questions(),
    )
