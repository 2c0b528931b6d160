# src/prepdeck/stores/categories.py
"""Key-value backed category store."""

from __future__ import annotations

import json
import logging

from prepdeck.models import DEFAULT_CATEGORIES, OTHER_CATEGORY
from prepdeck.stores.base import CategoryStore, KeyValueBackend, QuestionStore

logger = logging.getLogger(__name__)

CATEGORIES_KEY = "interview_prep_categories_v1"


class KeyValueCategoryStore(CategoryStore):
    """Category labels persisted as one JSON array.

    Rename and remove cascade into the question store passed here.

    Args:
        backend: Persistence medium.
        question_store: Store whose questions reference these labels.
        defaults: Labels returned while nothing has been stored yet.
        key: Key holding the label list.
    """

    def __init__(
        self,
        backend: KeyValueBackend,
        question_store: QuestionStore,
        defaults: list[str] | None = None,
        key: str = CATEGORIES_KEY,
    ) -> None:
        self.backend = backend
        self.question_store = question_store
        self.defaults = list(defaults) if defaults is not None else list(DEFAULT_CATEGORIES)
        self.key = key

    def get_all(self) -> list[str]:
        """Return stored labels, or the defaults. "Other" is always included."""
        labels = self._load()
        if OTHER_CATEGORY not in labels:
            labels.append(OTHER_CATEGORY)
        return labels

    def _load(self) -> list[str]:
        raw = self.backend.get(self.key)
        if not raw:
            return list(self.defaults)
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Stored categories are not valid JSON; using defaults")
            return list(self.defaults)
        if not isinstance(parsed, list):
            logger.warning("Stored categories are not a list; using defaults")
            return list(self.defaults)
        return [label for label in parsed if isinstance(label, str) and label]

    def _save(self, labels: list[str]) -> None:
        self.backend.set(self.key, json.dumps(labels, ensure_ascii=False))

    def add(self, label: str) -> bool:
        """Append a label."""
        label = label.strip()
        labels = self.get_all()
        if not label:
            logger.warning("Refusing to add an empty category")
            return False
        if label in labels:
            logger.warning("Category already exists: %s", label)
            return False
        labels.append(label)
        self._save(labels)
        return True

    def rename(self, old: str, new: str) -> bool:
        """Rename a label in place.

        If new already exists the two labels are merged into the existing
        entry. Every question tagged old is retagged new.
        """
        new = new.strip()
        labels = self.get_all()
        if old not in labels or not new or new == old:
            return False
        if old == OTHER_CATEGORY:
            logger.warning("The %r category cannot be renamed", OTHER_CATEGORY)
            return False

        if new in labels:
            labels.remove(old)
        else:
            labels[labels.index(old)] = new
        self._save(labels)

        moved = self.question_store.reassign_category(old, new)
        logger.info("Renamed category %r to %r (%d questions)", old, new, moved)
        return True

    def remove(self, label: str) -> bool:
        """Remove a label; its questions fall back to "Other"."""
        if label == OTHER_CATEGORY:
            logger.warning("The %r category cannot be removed", OTHER_CATEGORY)
            return False
        labels = self.get_all()
        if label not in labels:
            return False
        labels.remove(label)
        self._save(labels)

        moved = self.question_store.reassign_category(label, OTHER_CATEGORY)
        logger.info("Removed category %r (%d questions moved to %r)", label, moved, OTHER_CATEGORY)
        return True
