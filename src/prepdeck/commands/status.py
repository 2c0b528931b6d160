# src/prepdeck/commands/status.py
"""Status command - show collection statistics."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from prepdeck.commands.base import StatusResult, count_by_category
from prepdeck.config import ConfigError, create_tracker, get_tracker_config

if TYPE_CHECKING:
    from prepdeck.tracker import Tracker


def status(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    tracker: Tracker | None = None,
) -> StatusResult:
    """Get collection statistics.

    Args:
        data_dir: Override data directory
        config_path: Override config file path
        tracker: Use this tracker instead of building one from config

    Returns:
        StatusResult with counts per category
    """
    llm_model = None
    effective_data_dir = ""
    if tracker is None:
        config = get_tracker_config(data_dir, config_path)
        if isinstance(config, ConfigError):
            return StatusResult(success=False, error=config.message)
        tracker = create_tracker(config)
        tracker.bootstrap()
        llm_model = config.llm_model
        effective_data_dir = config.data_dir

    questions = tracker.question_store.get_all()
    return StatusResult(
        success=True,
        data_dir=effective_data_dir,
        total_questions=len(questions),
        answered=sum(1 for q in questions if q.answer.strip()),
        ai_generated=sum(1 for q in questions if q.is_ai_generated),
        categories=count_by_category(tracker),
        llm_model=llm_model,
        sync_dir=str(tracker.sync.directory) if tracker.sync.is_attached else None,
    )
