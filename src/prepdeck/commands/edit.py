# src/prepdeck/commands/edit.py
"""Edit command - change fields of a stored question."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from prepdeck.commands.base import QuestionResult, find_question, open_tracker
from prepdeck.config import ConfigError

if TYPE_CHECKING:
    from prepdeck.tracker import Tracker


def edit(
    question_id: str,
    text: str | None = None,
    answer: str | None = None,
    category: str | None = None,
    company_tag: str | None = None,
    clear_sources: bool = False,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    tracker: Tracker | None = None,
) -> QuestionResult:
    """Update a question. Fields left as None are unchanged.

    Args:
        question_id: Question id or unique id prefix
        text: New question text
        answer: New answer (marks the answer as hand-written)
        category: New category label
        company_tag: New company tag ("" clears it)
        clear_sources: Drop the stored web citations
        data_dir: Override data directory
        config_path: Override config file path
        tracker: Use this tracker instead of building one from config

    Returns:
        QuestionResult with the updated question
    """
    opened = open_tracker(tracker, data_dir, config_path)
    if isinstance(opened, ConfigError):
        return QuestionResult(success=False, error=opened.message)

    found = find_question(opened, question_id)
    if isinstance(found, str):
        return QuestionResult(success=False, error=found)

    changes: dict[str, Any] = {}
    if text is not None:
        changes["text"] = text
    if answer is not None:
        changes["answer"] = answer
    if category is not None:
        changes["category"] = category
    if company_tag is not None:
        changes["company_tag"] = company_tag
    if clear_sources:
        changes["sources"] = []

    if not changes:
        return QuestionResult(success=False, question=found, error="Nothing to change.")

    try:
        updated = opened.update_question(found.id, **changes)
    except ValueError as e:
        return QuestionResult(success=False, question=found, error=str(e))

    return QuestionResult(
        success=True,
        question=updated,
        categories=opened.category_store.get_all(),
    )
