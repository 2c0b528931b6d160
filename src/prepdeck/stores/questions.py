# src/prepdeck/stores/questions.py
"""Key-value backed question store."""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from prepdeck.exceptions import InvalidFormat, StorageReadError
from prepdeck.models import ImportSummary, Question
from prepdeck.stores.base import KeyValueBackend, QuestionStore
from prepdeck.stores.legacy import LEGACY_QUESTION_KEYS, recover_from_legacy
from prepdeck.stores.sync import DirectorySync

logger = logging.getLogger(__name__)

QUESTIONS_KEY = "interview_prep_questions_v1"


def decode_records(raw: str) -> list[Any]:
    """Decode a stored collection.

    Raises:
        StorageReadError: If raw is not JSON or not a JSON array.
    """
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise StorageReadError(f"Stored questions are not valid JSON: {e}") from e
    if not isinstance(parsed, list):
        raise StorageReadError(f"Stored questions are a {type(parsed).__name__}, not a list")
    return parsed


def parse_questions(records: list[Any]) -> list[Question]:
    """Validate raw records, dropping the ones that are not questions."""
    questions = []
    for record in records:
        try:
            questions.append(Question.model_validate(record))
        except ValidationError as e:
            logger.warning("Dropping invalid question record: %s", e.errors()[0]["msg"])
    return questions


_TIMESTAMP_KEYS = frozenset(("createdAt", "updatedAt"))


def is_importable(record: Any) -> bool:
    """True for a record carrying a non-empty id and text."""
    return isinstance(record, dict) and bool(record.get("id")) and bool(record.get("text"))


class KeyValueQuestionStore(QuestionStore):
    """Question store persisting the whole collection as one JSON array.

    Args:
        backend: Persistence medium.
        sync: Optional directory mirror, written after every mutation.
        key: Canonical key holding the collection.
        legacy_keys: Keys consulted, in order, while the canonical key is absent.
    """

    def __init__(
        self,
        backend: KeyValueBackend,
        sync: DirectorySync | None = None,
        key: str = QUESTIONS_KEY,
        legacy_keys: tuple[str, ...] = LEGACY_QUESTION_KEYS,
    ) -> None:
        self.backend = backend
        self.sync = sync
        self.key = key
        self.legacy_keys = legacy_keys

    def _load_records(self) -> list[Any]:
        raw = self.backend.get(self.key)
        if raw:
            try:
                return decode_records(raw)
            except StorageReadError as e:
                logger.warning("Treating stored questions as empty: %s", e)
                return []

        recovered = recover_from_legacy(self.backend.get(k) for k in self.legacy_keys)
        if recovered is None:
            return []
        logger.info("Migrated %d questions from a legacy key", len(recovered))
        self.backend.set(self.key, json.dumps(recovered, ensure_ascii=False))
        return recovered

    def _persist(self, questions: list[Question]) -> None:
        payload = json.dumps([q.to_record() for q in questions], ensure_ascii=False)
        self.backend.set(self.key, payload)
        if self.sync is not None:
            self.sync.mirror(questions)

    def get_all(self) -> list[Question]:
        """Return all stored questions, migrating legacy data on first read.

        Records without an id are hidden. Records missing createdAt or
        updatedAt get them stamped once and written back, so both stay
        stable across reads.
        """
        records = self._load_records()
        identified = [r for r in records if isinstance(r, dict) and r.get("id")]
        if len(identified) < len(records):
            logger.warning(
                "Ignoring %d stored records without an id", len(records) - len(identified)
            )
        questions = parse_questions(identified)
        if any(_TIMESTAMP_KEYS - r.keys() for r in identified):
            self.backend.set(
                self.key, json.dumps([q.to_record() for q in questions], ensure_ascii=False)
            )
        return questions

    def get(self, question_id: str) -> Question | None:
        """Retrieve a question by ID."""
        for question in self.get_all():
            if question.id == question_id:
                return question
        return None

    def save(self, question: Question) -> None:
        """Upsert a question, keeping the position of an existing record."""
        questions = self.get_all()
        for i, existing in enumerate(questions):
            if existing.id == question.id:
                questions[i] = question
                break
        else:
            questions.insert(0, question)
        self._persist(questions)

    def delete(self, question_id: str) -> bool:
        """Delete a question by ID."""
        questions = self.get_all()
        remaining = [q for q in questions if q.id != question_id]
        if len(remaining) == len(questions):
            return False
        self._persist(remaining)
        return True

    def import_merge(self, records: object) -> ImportSummary:
        """Merge an imported batch by ID.

        Records without a non-empty id and text are skipped, as are records
        that otherwise fail validation. The merged collection is ordered by
        createdAt, newest first.
        """
        if not isinstance(records, list):
            raise InvalidFormat(
                f"Import data must be a JSON array, got {type(records).__name__}"
            )

        summary = ImportSummary(received=len(records))
        incoming: list[Question] = []
        for record in records:
            if not is_importable(record):
                summary.skipped += 1
                continue
            try:
                incoming.append(Question.model_validate(record))
            except ValidationError:
                summary.skipped += 1

        current = self.get_all()
        if not incoming:
            summary.total = len(current)
            return summary

        merged: dict[str, Question] = {q.id: q for q in current}
        for question in incoming:
            merged[question.id] = question
        ordered = sorted(merged.values(), key=lambda q: q.created_at, reverse=True)
        self._persist(ordered)

        summary.merged = len(incoming)
        summary.total = len(ordered)
        return summary

    def export_all(self) -> str:
        """Serialize the full collection as a JSON array."""
        return json.dumps([q.to_record() for q in self.get_all()], ensure_ascii=False, indent=2)

    def reassign_category(self, old: str, new: str) -> int:
        """Rewrite the category of every question tagged old."""
        questions = self.get_all()
        touched = 0
        for question in questions:
            if question.category == old:
                question.category = new
                touched += 1
        if touched:
            self._persist(questions)
        return touched
