# src/prepdeck/commands/categories.py
"""Category commands - list, add, rename and remove category labels.

Rename and remove cascade into the questions that use the label.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from prepdeck.commands.base import CategoriesResult, count_by_category, open_tracker
from prepdeck.config import ConfigError
from prepdeck.models import OTHER_CATEGORY

if TYPE_CHECKING:
    from prepdeck.tracker import Tracker


def _usage(tracker: Tracker, label: str) -> int:
    return sum(1 for q in tracker.question_store.get_all() if q.category == label)


def list_categories(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    tracker: Tracker | None = None,
) -> CategoriesResult:
    """List category labels with their question counts."""
    opened = open_tracker(tracker, data_dir, config_path)
    if isinstance(opened, ConfigError):
        return CategoriesResult(success=False, error=opened.message)
    return CategoriesResult(success=True, categories=count_by_category(opened))


def add_category(
    label: str,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    tracker: Tracker | None = None,
) -> CategoriesResult:
    """Append a new label to the category list."""
    opened = open_tracker(tracker, data_dir, config_path)
    if isinstance(opened, ConfigError):
        return CategoriesResult(success=False, error=opened.message)

    if not label.strip():
        return CategoriesResult(success=False, error="Category name must not be empty.")
    if not opened.category_store.add(label):
        return CategoriesResult(
            success=False,
            categories=count_by_category(opened),
            error=f"Category already exists: {label.strip()}",
        )
    return CategoriesResult(success=True, categories=count_by_category(opened))


def rename_category(
    old: str,
    new: str,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    tracker: Tracker | None = None,
) -> CategoriesResult:
    """Rename a label and move its questions along with it."""
    opened = open_tracker(tracker, data_dir, config_path)
    if isinstance(opened, ConfigError):
        return CategoriesResult(success=False, error=opened.message)

    if old == OTHER_CATEGORY:
        return CategoriesResult(success=False, error=f"'{OTHER_CATEGORY}' cannot be renamed.")
    if old not in opened.category_store.get_all():
        return CategoriesResult(success=False, error=f"Category not found: {old}")

    moved = _usage(opened, old)
    if not opened.category_store.rename(old, new):
        return CategoriesResult(
            success=False,
            categories=count_by_category(opened),
            error=f"Cannot rename '{old}' to '{new}'.",
        )
    return CategoriesResult(success=True, categories=count_by_category(opened), moved=moved)


def remove_category(
    label: str,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    tracker: Tracker | None = None,
) -> CategoriesResult:
    """Remove a label. Its questions are moved to "Other"."""
    opened = open_tracker(tracker, data_dir, config_path)
    if isinstance(opened, ConfigError):
        return CategoriesResult(success=False, error=opened.message)

    if label == OTHER_CATEGORY:
        return CategoriesResult(success=False, error=f"'{OTHER_CATEGORY}' cannot be removed.")

    moved = _usage(opened, label)
    if not opened.category_store.remove(label):
        return CategoriesResult(success=False, error=f"Category not found: {label}")
    return CategoriesResult(success=True, categories=count_by_category(opened), moved=moved)
