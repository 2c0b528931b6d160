# src/prepdeck/assistant/__init__.py
"""AI answer generation and chat refinement for prepdeck."""

from prepdeck.assistant.base import AnswerGenerator
from prepdeck.assistant.chat import ChatSession
from prepdeck.assistant.client import ClientAnswerGenerator, parse_category_tag

__all__ = [
    "AnswerGenerator",
    "ClientAnswerGenerator",
    "ChatSession",
    "parse_category_tag",
]
