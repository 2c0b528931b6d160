# src/prepdeck/stores/base.py
"""Abstract base classes for storage."""

from abc import ABC, abstractmethod

from prepdeck.models import ImportSummary, Question


class KeyValueBackend(ABC):
    """Persistence medium holding string values under string keys.

    Stores serialize whole collections into a single value, so a backend
    only needs atomic single-key reads and writes.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, overwriting any previous value."""
        ...


class QuestionStore(ABC):
    """Abstract base class for question storage."""

    @abstractmethod
    def get_all(self) -> list[Question]:
        """Return all questions, newest first unless an import re-sorted them."""
        ...

    @abstractmethod
    def get(self, question_id: str) -> Question | None:
        """Retrieve a question by ID. Returns None if not found."""
        ...

    @abstractmethod
    def save(self, question: Question) -> None:
        """Replace the question with the same ID in place, or insert it first."""
        ...

    @abstractmethod
    def delete(self, question_id: str) -> bool:
        """Delete a question by ID. Returns False if it was not present."""
        ...

    @abstractmethod
    def import_merge(self, records: object) -> ImportSummary:
        """Upsert a batch of raw records by ID and re-sort by creation time.

        Raises:
            InvalidFormat: If records is not a list.
        """
        ...

    @abstractmethod
    def export_all(self) -> str:
        """Serialize the full collection as a JSON array."""
        ...

    @abstractmethod
    def reassign_category(self, old: str, new: str) -> int:
        """Rewrite the category of every question tagged old. Returns the count."""
        ...

    def count_questions(self) -> int:
        """Count the total number of questions in the store."""
        return len(self.get_all())


class CategoryStore(ABC):
    """Abstract base class for category label storage."""

    @abstractmethod
    def get_all(self) -> list[str]:
        """Return labels in insertion order, or the default list."""
        ...

    @abstractmethod
    def add(self, label: str) -> bool:
        """Append a label. Returns False if it is empty or already present."""
        ...

    @abstractmethod
    def rename(self, old: str, new: str) -> bool:
        """Rename a label in place and cascade to questions."""
        ...

    @abstractmethod
    def remove(self, label: str) -> bool:
        """Remove a label and move its questions to "Other"."""
        ...
