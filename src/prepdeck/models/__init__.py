# src/prepdeck/models/__init__.py
"""Data models for prepdeck."""

from prepdeck.models.question import (
    DEFAULT_CATEGORIES,
    OTHER_CATEGORY,
    Question,
    Source,
    now_ms,
)
from prepdeck.models.results import ChatReply, Completion, GeneratedAnswer, ImportSummary

__all__ = [
    "DEFAULT_CATEGORIES",
    "OTHER_CATEGORY",
    "Question",
    "Source",
    "now_ms",
    "Completion",
    "GeneratedAnswer",
    "ChatReply",
    "ImportSummary",
]
