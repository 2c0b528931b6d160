# src/prepdeck/assistant/base.py
"""AnswerGenerator abstract base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from prepdeck.models import GeneratedAnswer

if TYPE_CHECKING:
    from prepdeck.assistant.chat import ChatSession


class AnswerGenerator(ABC):
    """Abstract base class for AI answer generation."""

    @abstractmethod
    def generate(self, question_text: str, categories: list[str]) -> GeneratedAnswer:
        """Generate an answer, a category and citations for a question.

        Raises:
            ExternalServiceError: If the service call fails.
        """
        ...

    async def agenerate(self, question_text: str, categories: list[str]) -> GeneratedAnswer:
        """Generate an answer (async).

        Default implementation calls sync generate() for backwards compatibility.
        Override in subclasses for true async behavior.
        """
        return self.generate(question_text, categories)

    @abstractmethod
    def categorize(self, question_text: str, categories: list[str]) -> str:
        """Pick one of categories for a question. Returns "Other" on failure."""
        ...

    @abstractmethod
    def create_chat_session(self, question_text: str, current_answer: str) -> ChatSession:
        """Start a refinement conversation about one question and answer."""
        ...
