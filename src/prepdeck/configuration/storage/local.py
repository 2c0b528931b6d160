# src/prepdeck/configuration/storage/local.py
"""Local storage configurations."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prepdeck.settings import Settings
    from prepdeck.stores import CategoryStore, DirectorySync, KeyValueBackend, QuestionStore

DB_FILENAME = "prepdeck.db"


def _build(
    backend: KeyValueBackend,
    settings: Settings,
    sync: DirectorySync | None,
) -> tuple[QuestionStore, CategoryStore]:
    from prepdeck.stores import KeyValueCategoryStore, KeyValueQuestionStore

    question_store = KeyValueQuestionStore(backend, sync=sync)
    category_store = KeyValueCategoryStore(
        backend,
        question_store,
        defaults=settings.default_categories,
    )
    return question_store, category_store


@dataclass(frozen=True)
class LocalStorage:
    """Local filesystem storage using SQLite.

    All data is persisted to <data_dir>/prepdeck.db, which holds the
    question collection, the category list and any legacy keys.

    Args:
        data_dir: Base directory for the database. Created if it doesn't exist.

    Example:
        storage = LocalStorage("./prepdeck_data")
    """

    data_dir: str

    @property
    def db_path(self) -> str:
        return os.path.join(self.data_dir, DB_FILENAME)

    def build_stores(
        self,
        settings: Settings,
        sync: DirectorySync | None = None,
    ) -> tuple[QuestionStore, CategoryStore]:
        """Build the question and category stores over one SQLite backend."""
        from prepdeck.stores import SQLiteBackend

        Path(self.data_dir).mkdir(parents=True, exist_ok=True)
        return _build(SQLiteBackend(self.db_path), settings, sync)


@dataclass(frozen=True)
class MemoryStorage:
    """In-memory storage. Pass a shared dict to inspect or pre-populate keys."""

    data: dict[str, str] = field(default_factory=dict)

    def build_stores(
        self,
        settings: Settings,
        sync: DirectorySync | None = None,
    ) -> tuple[QuestionStore, CategoryStore]:
        """Build the question and category stores over a dict backend."""
        from prepdeck.stores import MemoryBackend

        backend = MemoryBackend()
        backend.data = self.data
        return _build(backend, settings, sync)
