# src/prepdeck/commands/delete.py
"""Delete command - remove a question from the store.

It uses callbacks for interactive confirmation, allowing each UI to
implement their own confirmation method.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from prepdeck.commands.base import (
    ConfirmCallback,
    ConfirmRequest,
    DeleteResult,
    find_question,
    open_tracker,
)
from prepdeck.config import ConfigError

if TYPE_CHECKING:
    from prepdeck.tracker import Tracker


def delete(
    question_id: str,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    on_confirm: ConfirmCallback | None = None,
    tracker: Tracker | None = None,
) -> DeleteResult:
    """Delete a question.

    Args:
        question_id: Question id or unique id prefix
        data_dir: Override data directory
        config_path: Override config file path
        on_confirm: Optional callback for confirmation. Return True to
            proceed, False to cancel. If None, deletion proceeds without
            confirmation (equivalent to --force).
        tracker: Use this tracker instead of building one from config

    Returns:
        DeleteResult describing the removed question, or cancelled result
    """
    opened = open_tracker(tracker, data_dir, config_path)
    if isinstance(opened, ConfigError):
        return DeleteResult(success=False, question_id=question_id, error=opened.message)

    found = find_question(opened, question_id)
    if isinstance(found, str):
        return DeleteResult(success=False, question_id=question_id, error=found)

    if on_confirm is not None:
        confirm_request = ConfirmRequest(
            message="Delete this question?",
            details=found.text,
        )
        if not on_confirm(confirm_request):
            return DeleteResult(
                success=False,
                question_id=found.id,
                text=found.text,
                error="Cancelled.",
            )

    opened.delete_question(found.id)
    return DeleteResult(success=True, question_id=found.id, text=found.text)
