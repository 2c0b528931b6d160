# src/prepdeck/stores/__init__.py
"""Storage abstractions for prepdeck."""

from prepdeck.stores.base import CategoryStore, KeyValueBackend, QuestionStore
from prepdeck.stores.categories import CATEGORIES_KEY, KeyValueCategoryStore
from prepdeck.stores.legacy import LEGACY_QUESTION_KEYS, recover_from_legacy
from prepdeck.stores.memory import MemoryBackend
from prepdeck.stores.questions import QUESTIONS_KEY, KeyValueQuestionStore
from prepdeck.stores.sqlite_kv import SQLiteBackend
from prepdeck.stores.sync import DirectorySync

__all__ = [
    "KeyValueBackend",
    "QuestionStore",
    "CategoryStore",
    "MemoryBackend",
    "SQLiteBackend",
    "KeyValueQuestionStore",
    "KeyValueCategoryStore",
    "DirectorySync",
    "recover_from_legacy",
    "QUESTIONS_KEY",
    "CATEGORIES_KEY",
    "LEGACY_QUESTION_KEYS",
]
