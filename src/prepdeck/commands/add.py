# src/prepdeck/commands/add.py
"""Add command - record a new question.

This module provides the add logic that the CLI uses.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from prepdeck.commands.base import QuestionResult, open_tracker
from prepdeck.config import ConfigError
from prepdeck.exceptions import ExternalServiceError
from prepdeck.models import OTHER_CATEGORY

if TYPE_CHECKING:
    from prepdeck.tracker import Tracker


def add(
    text: str,
    answer: str = "",
    category: str = OTHER_CATEGORY,
    company_tag: str = "",
    generate: bool = False,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    tracker: Tracker | None = None,
) -> QuestionResult:
    """Create a question, optionally with a generated answer.

    With generate=True the answer, category and sources come from the
    model (an explicit non-Other category is kept). If generation fails
    nothing is saved.

    Args:
        text: Question text
        answer: Answer text (ignored when generate is True)
        category: Category label
        company_tag: Company the question was asked at
        generate: Ask the model for the answer before saving
        data_dir: Override data directory
        config_path: Override config file path
        tracker: Use this tracker instead of building one from config

    Returns:
        QuestionResult with the saved question
    """
    if not text.strip():
        return QuestionResult(success=False, error="Question text must not be empty.")

    opened = open_tracker(tracker, data_dir, config_path)
    if isinstance(opened, ConfigError):
        return QuestionResult(success=False, error=opened.message)

    sources = None
    is_ai_generated = False
    if generate:
        try:
            generated = opened.generate_answer(text)
        except ExternalServiceError as e:
            return QuestionResult(success=False, error=f"Generation failed: {e}")
        answer = generated.answer
        sources = generated.sources
        is_ai_generated = True
        if (category or OTHER_CATEGORY) == OTHER_CATEGORY:
            category = generated.category

    question = opened.create_question(
        text=text,
        answer=answer,
        category=category,
        company_tag=company_tag,
        is_ai_generated=is_ai_generated,
        sources=sources,
    )
    return QuestionResult(
        success=True,
        question=question,
        categories=opened.category_store.get_all(),
    )
