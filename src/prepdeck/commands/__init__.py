# src/prepdeck/commands/__init__.py
"""UI-agnostic command layer for prepdeck.

This module provides command functions that the CLI (or any other UI) can
call. Commands return data structures, allowing UIs to render results
appropriately. They never raise for expected failures; check
``result.success`` and ``result.error`` instead.

Usage:
    from prepdeck.commands import add, list_cmd, status

    # Record a question
    result = add.add("What is RLHF?", category="Reinforcement Learning")

    # Filter the collection
    result = list_cmd.list_questions(search="rlhf", date_filter="week")

    # Get collection statistics
    result = status.status()
"""

# Import command modules for easy access
from prepdeck.commands import (
    add,
    categories,
    chat,
    config_cmd,
    delete,
    edit,
    export,
    generate,
    import_cmd,
    seed,
    show,
    status,
    sync,
)
from prepdeck.commands import list as list_cmd
from prepdeck.commands.base import (
    CategoriesResult,
    CategoryCount,
    ChatStartResult,
    CommandResult,
    ConfigResult,
    ConfirmCallback,
    ConfirmRequest,
    DeleteResult,
    ExportResult,
    GenerateResult,
    ImportResult,
    ListResult,
    QuestionResult,
    SeedResult,
    SettingInfo,
    StatusResult,
    SyncResult,
    find_question,
    open_tracker,
)

__all__ = [
    # Base types
    "ConfirmRequest",
    "ConfirmCallback",
    "CommandResult",
    "open_tracker",
    "find_question",
    # Result types
    "QuestionResult",
    "ListResult",
    "DeleteResult",
    "ImportResult",
    "ExportResult",
    "GenerateResult",
    "ChatStartResult",
    "SeedResult",
    "SyncResult",
    "CategoriesResult",
    "CategoryCount",
    "StatusResult",
    "ConfigResult",
    "SettingInfo",
    # Command modules
    "add",
    "edit",
    "show",
    "list_cmd",
    "delete",
    "import_cmd",
    "export",
    "generate",
    "chat",
    "seed",
    "sync",
    "categories",
    "status",
    "config_cmd",
]
