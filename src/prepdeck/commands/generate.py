# src/prepdeck/commands/generate.py
"""Generate command - ask the model to answer a stored question.

This module provides the generation logic that the CLI uses.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from prepdeck.commands.base import GenerateResult, find_question, open_tracker
from prepdeck.config import ConfigError
from prepdeck.exceptions import ExternalServiceError

if TYPE_CHECKING:
    from prepdeck.tracker import Tracker


def generate(
    question_id: str,
    save: bool = True,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    tracker: Tracker | None = None,
) -> GenerateResult:
    """Generate an answer, category and sources for a stored question.

    The stored question is left unchanged when generation fails or when
    save is False.

    Args:
        question_id: Question id or unique id prefix
        save: Write the generated answer back to the question
        data_dir: Override data directory
        config_path: Override config file path
        tracker: Use this tracker instead of building one from config

    Returns:
        GenerateResult with the generated answer
    """
    opened = open_tracker(tracker, data_dir, config_path)
    if isinstance(opened, ConfigError):
        return GenerateResult(success=False, error=opened.message)

    found = find_question(opened, question_id)
    if isinstance(found, str):
        return GenerateResult(success=False, error=found)

    try:
        generated = opened.generate_answer(found.text)
    except ExternalServiceError as e:
        return GenerateResult(success=False, question=found, error=f"Generation failed: {e}")

    question = opened.apply_generated(found.id, generated) if save else found
    return GenerateResult(
        success=True,
        question=question,
        answer=generated.answer,
        category=generated.category,
        sources=generated.sources,
        saved=save,
    )
