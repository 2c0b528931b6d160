# src/prepdeck/filtering.py
"""Derived-view filtering over a snapshot of questions."""

from __future__ import annotations

import re
from collections.abc import Collection, Iterable
from datetime import date, datetime

from prepdeck.models import OTHER_CATEGORY, Question, now_ms

ALL_CATEGORIES = "All"

DAY_MS = 24 * 60 * 60 * 1000

# Relative buckets, in days, measured against updatedAt.
DATE_BUCKETS: dict[str, int] = {
    "today": 1,
    "week": 7,
    "month": 30,
    "year": 365,
}

_ISO_DAY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _local_day(timestamp_ms: int) -> date:
    return datetime.fromtimestamp(timestamp_ms / 1000).date()


def _category_matches(
    question: Question,
    category: str,
    known_categories: Collection[str] | None,
) -> bool:
    if category == ALL_CATEGORIES:
        return True
    label = question.category
    if known_categories is not None and label not in known_categories:
        label = OTHER_CATEGORY
    return label == category


def _text_matches(question: Question, needle: str) -> bool:
    if not needle:
        return True
    if needle in question.text.lower():
        return True
    return bool(question.company_tag) and needle in question.company_tag.lower()


def validate_date_filter(date_filter: str | None) -> str | None:
    """Normalize a date filter, rejecting values the filter cannot apply.

    Returns:
        None when no date filtering applies, otherwise the normalized value.

    Raises:
        ValueError: For strings that are neither a bucket nor YYYY-MM-DD.
    """
    if date_filter is None:
        return None
    value = date_filter.strip().lower()
    if value in ("", "all"):
        return None
    if value in DATE_BUCKETS:
        return value
    if _ISO_DAY.match(value):
        date.fromisoformat(value)
        return value
    raise ValueError(
        f"Unknown date filter '{date_filter}'. "
        f"Use one of {', '.join(DATE_BUCKETS)}, 'all', or YYYY-MM-DD."
    )


def filter_questions(
    questions: Iterable[Question],
    category: str = ALL_CATEGORIES,
    search: str = "",
    date_filter: str | None = None,
    *,
    now: int | None = None,
    known_categories: Collection[str] | None = None,
) -> list[Question]:
    """Filter questions by category, free text and date.

    Args:
        questions: Snapshot to filter; its order is preserved.
        category: Exact label to keep, or "All".
        search: Case-insensitive substring matched against text or company tag.
        date_filter: None/"all", a bucket (today, week, month, year) compared
            against updatedAt, or a YYYY-MM-DD day matched against the local
            calendar day of createdAt or updatedAt.
        now: Reference time in epoch ms for buckets. Defaults to the current
            time, read on every call.
        known_categories: If given, labels outside this set are treated as
            "Other" when matching the category.

    Returns:
        The matching questions in input order.
    """
    normalized = validate_date_filter(date_filter)
    needle = search.strip().lower()
    reference = now_ms() if now is None else now

    day: date | None = None
    window_ms: int | None = None
    if normalized in DATE_BUCKETS:
        window_ms = DATE_BUCKETS[normalized] * DAY_MS
    elif normalized is not None:
        day = date.fromisoformat(normalized)

    result = []
    for question in questions:
        if not _category_matches(question, category, known_categories):
            continue
        if not _text_matches(question, needle):
            continue
        if window_ms is not None and reference - question.updated_at >= window_ms:
            continue
        if day is not None and day not in (
            _local_day(question.created_at),
            _local_day(question.updated_at),
        ):
            continue
        result.append(question)
    return result
