# src/prepdeck/commands/chat.py
"""Chat command - open a refinement conversation about a question.

The command only opens the session; the UI drives the conversation by
calling ChatSession.send() and renders each ChatReply.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from prepdeck.commands.base import ChatStartResult, find_question, open_tracker
from prepdeck.config import ConfigError
from prepdeck.exceptions import ExternalServiceError

if TYPE_CHECKING:
    from prepdeck.tracker import Tracker


def start_chat(
    question_id: str,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    tracker: Tracker | None = None,
) -> ChatStartResult:
    """Open a chat session bound to a stored question and its current answer."""
    opened = open_tracker(tracker, data_dir, config_path)
    if isinstance(opened, ConfigError):
        return ChatStartResult(success=False, error=opened.message)

    found = find_question(opened, question_id)
    if isinstance(found, str):
        return ChatStartResult(success=False, error=found)

    try:
        session = opened.chat(found.id)
    except ExternalServiceError as e:
        return ChatStartResult(success=False, question=found, error=str(e))

    return ChatStartResult(success=True, question=found, session=session)
