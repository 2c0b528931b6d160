# src/prepdeck/stores/legacy.py
"""Recovery of question records from deprecated storage keys."""

import json
import logging
from collections.abc import Iterable
from typing import Any

logger = logging.getLogger(__name__)

# Consulted in this order, only while the canonical key is absent.
LEGACY_QUESTION_KEYS: tuple[str, ...] = (
    "interview_questions",
    "interview_prep_questions",
    "interview_app_data",
)


def recover_from_legacy(sources: Iterable[str | None]) -> list[Any] | None:
    """Return the first non-empty JSON array among the legacy values.

    Args:
        sources: Raw stored values in priority order. None marks an absent
            key. The iterable is consumed lazily, so a generator stops
            reading keys as soon as one yields data.

    Returns:
        The decoded array, or None if no source held a non-empty array.
    """
    for index, raw in enumerate(sources):
        if not raw:
            continue
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Skipping unparseable legacy source #%d", index)
            continue
        if isinstance(parsed, list) and parsed:
            return parsed
    return None
