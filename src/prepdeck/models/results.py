# src/prepdeck/models/results.py
"""Result data models for AI calls and bulk operations."""

from pydantic import BaseModel, Field

from prepdeck.models.question import Source


class Completion(BaseModel):
    """Raw text from an LLM call plus any web citations it carried."""

    text: str
    sources: list[Source] = Field(default_factory=list)


class GeneratedAnswer(BaseModel):
    """Answer produced by the answer generator for one question."""

    answer: str
    category: str
    sources: list[Source] = Field(default_factory=list)


class ChatReply(BaseModel):
    """One assistant turn in a chat session.

    ``failed`` is True when the reply is a placeholder standing in for an
    error from the underlying service.
    """

    text: str
    sources: list[Source] = Field(default_factory=list)
    failed: bool = False


class ImportSummary(BaseModel):
    """Outcome of merging an imported batch into the question store."""

    received: int = 0
    merged: int = 0
    skipped: int = 0
    total: int = 0
