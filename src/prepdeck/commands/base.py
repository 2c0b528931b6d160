# src/prepdeck/commands/base.py
"""Base types for the commands layer.

This module defines the data structures used by all commands:
- Confirm callbacks for destructive commands (like delete)
- Result types for each command
- open_tracker(), the shared way commands obtain a Tracker
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from prepdeck.config import ConfigError, get_tracker
from prepdeck.models import OTHER_CATEGORY

if TYPE_CHECKING:
    from prepdeck.assistant import ChatSession
    from prepdeck.models import ImportSummary, Question, Source
    from prepdeck.tracker import Tracker


@dataclass
class ConfirmRequest:
    """Request for a yes/no confirmation before a destructive action.

    Attributes:
        message: The question to display to the user
        details: Optional extra context about what will change
    """

    message: str
    details: str | None = None


# Callback type for confirmations - returns True to proceed
ConfirmCallback = Callable[[ConfirmRequest], bool]


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None


@dataclass
class QuestionResult(CommandResult):
    """Result of commands that produce or show a single question.

    Attributes:
        question: The question after the command ran
        categories: Category list at the time of the command
    """

    question: Question | None = None
    categories: list[str] = field(default_factory=list)


@dataclass
class ListResult(CommandResult):
    """Result of the list command.

    Attributes:
        questions: Questions passing the filters, in stored order
        total: Number of questions in the store before filtering
        category: Category filter that was applied
        search: Text filter that was applied
        date_filter: Date filter that was applied
    """

    questions: list[Question] = field(default_factory=list)
    total: int = 0
    category: str = "All"
    search: str = ""
    date_filter: str | None = None


@dataclass
class DeleteResult(CommandResult):
    """Result of the delete command."""

    question_id: str = ""
    text: str = ""


@dataclass
class ImportResult(CommandResult):
    """Result of the import command."""

    path: str = ""
    summary: ImportSummary | None = None


@dataclass
class ExportResult(CommandResult):
    """Result of the export command."""

    path: str = ""
    format: str = ""
    count: int = 0


@dataclass
class GenerateResult(CommandResult):
    """Result of the generate command.

    Attributes:
        question: The stored question (updated when saved)
        answer: Generated answer text
        category: Category parsed from the response
        sources: Web citations returned with the answer
        saved: True if the answer was written to the store
    """

    question: Question | None = None
    answer: str = ""
    category: str = ""
    sources: list[Source] = field(default_factory=list)
    saved: bool = False


@dataclass
class ChatStartResult(CommandResult):
    """Result of opening a chat session about a stored question."""

    question: Question | None = None
    session: ChatSession | None = None


@dataclass
class SeedResult(CommandResult):
    """Result of the seed command."""

    seed_path: str = ""
    merged: int = 0
    total: int = 0


@dataclass
class SyncResult(CommandResult):
    """Result of the sync command."""

    directory: str = ""
    target_path: str = ""
    count: int = 0


@dataclass
class CategoryCount:
    """A category label with the number of questions using it."""

    name: str
    question_count: int = 0


@dataclass
class CategoriesResult(CommandResult):
    """Result of the category commands."""

    categories: list[CategoryCount] = field(default_factory=list)
    moved: int = 0


@dataclass
class StatusResult(CommandResult):
    """Result of the status command.

    Attributes:
        data_dir: Data directory in use
        total_questions: Number of stored questions
        answered: Questions with a non-empty answer
        ai_generated: Questions whose answer came from the model
        categories: Per-category counts, in category-list order
        llm_model: Configured model, if any
        sync_dir: Attached mirror directory, if any
    """

    data_dir: str = ""
    total_questions: int = 0
    answered: int = 0
    ai_generated: int = 0
    categories: list[CategoryCount] = field(default_factory=list)
    llm_model: str | None = None
    sync_dir: str | None = None


@dataclass
class SettingInfo:
    """Information about a single setting."""

    name: str
    value: str
    source: str  # "env var", "yaml", "default"


@dataclass
class ConfigResult(CommandResult):
    """Result of the config command."""

    llm_model: str | None = None
    api_key: str = ""
    data_dir: str = ""
    seed_path: str = ""
    sync_dir: str | None = None
    settings: list[SettingInfo] = field(default_factory=list)
    config_path: str | None = None
    warnings: list[str] = field(default_factory=list)


def open_tracker(
    tracker: Tracker | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    bootstrap: bool = True,
) -> Tracker | ConfigError:
    """Return the given tracker, or build one from configuration.

    A freshly built tracker is bootstrapped with the project seed file
    according to its seed policy.
    """
    if tracker is not None:
        return tracker
    result = get_tracker(data_dir, config_path)
    if isinstance(result, ConfigError):
        return result
    if bootstrap:
        result.bootstrap()
    return result


def find_question(tracker: Tracker, question_id: str) -> Question | str:
    """Look up a question by id or unique id prefix.

    Returns:
        The question, or an error message when nothing or several match.
    """
    exact = tracker.question_store.get(question_id)
    if exact is not None:
        return exact

    prefix = question_id.strip()
    if not prefix:
        return "Question id must not be empty."
    matches = [q for q in tracker.question_store.get_all() if q.id.startswith(prefix)]
    if not matches:
        return f"Question not found: {question_id}"
    if len(matches) > 1:
        return f"Ambiguous id prefix '{question_id}' matches {len(matches)} questions."
    return matches[0]


def count_by_category(tracker: Tracker) -> list[CategoryCount]:
    """Per-category question counts. Labels missing from the list count as Other."""
    labels = tracker.category_store.get_all()
    counts = {label: 0 for label in labels}
    for question in tracker.question_store.get_all():
        label = question.category if question.category in counts else OTHER_CATEGORY
        counts[label] = counts.get(label, 0) + 1
    return [CategoryCount(name=label, question_count=n) for label, n in counts.items()]
