# src/prepdeck/commands/list.py
"""List command - show stored questions through the view filters.

This module provides the list logic that the CLI uses.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from prepdeck.commands.base import ListResult, open_tracker
from prepdeck.config import ConfigError
from prepdeck.filtering import ALL_CATEGORIES, filter_questions, validate_date_filter

if TYPE_CHECKING:
    from prepdeck.tracker import Tracker


def list_questions(
    category: str = ALL_CATEGORIES,
    search: str = "",
    date_filter: str | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    tracker: Tracker | None = None,
) -> ListResult:
    """List questions matching category, text and date filters.

    Args:
        category: "All" or a category label
        search: Case-insensitive text matched against question text and company tag
        date_filter: "today", "week", "month", "year", or a YYYY-MM-DD day
        data_dir: Override data directory
        config_path: Override config file path
        tracker: Use this tracker instead of building one from config

    Returns:
        ListResult with the matching questions
    """
    try:
        date_filter = validate_date_filter(date_filter)
    except ValueError as e:
        return ListResult(success=False, error=str(e))

    opened = open_tracker(tracker, data_dir, config_path)
    if isinstance(opened, ConfigError):
        return ListResult(success=False, error=opened.message)

    questions = opened.question_store.get_all()
    matching = filter_questions(
        questions,
        category=category,
        search=search,
        date_filter=date_filter,
        known_categories=opened.category_store.get_all(),
    )
    return ListResult(
        success=True,
        questions=matching,
        total=len(questions),
        category=category,
        search=search,
        date_filter=date_filter,
    )
