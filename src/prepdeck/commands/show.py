# src/prepdeck/commands/show.py
"""Show command - display one question."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from prepdeck.commands.base import QuestionResult, find_question, open_tracker
from prepdeck.config import ConfigError

if TYPE_CHECKING:
    from prepdeck.tracker import Tracker


def show(
    question_id: str,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    tracker: Tracker | None = None,
) -> QuestionResult:
    """Look up a question by id or unique id prefix."""
    opened = open_tracker(tracker, data_dir, config_path)
    if isinstance(opened, ConfigError):
        return QuestionResult(success=False, error=opened.message)

    found = find_question(opened, question_id)
    if isinstance(found, str):
        return QuestionResult(success=False, error=found)
    return QuestionResult(
        success=True,
        question=found,
        categories=opened.category_store.get_all(),
    )
