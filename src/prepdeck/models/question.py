# src/prepdeck/models/question.py
"""Question data models."""

import time
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

OTHER_CATEGORY = "Other"

DEFAULT_CATEGORIES: list[str] = [
    "Algorithm",
    "Reinforcement Learning",
    "SFT",
    "Machine Learning",
    "NLP",
    "Multimodal",
    "Software Engineering",
    "Behavioral",
    OTHER_CATEGORY,
]


def now_ms() -> int:
    """Current time as integer milliseconds since the epoch."""
    return int(time.time() * 1000)


class Source(BaseModel):
    """A grounding citation returned alongside an AI answer."""

    uri: str | None = None
    title: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _unwrap_web(cls, data: Any) -> Any:
        # Older exports nest the citation as {"web": {"uri": ..., "title": ...}}
        if isinstance(data, dict) and isinstance(data.get("web"), dict):
            return data["web"]
        return data


class Question(BaseModel):
    """An interview question and its answer.

    Serialized with camelCase keys (``companyTag``, ``createdAt``, ...) so that
    exports stay compatible with files written by earlier versions.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    text: str
    answer: str = ""
    category: str = OTHER_CATEGORY
    company_tag: str = Field(default="", alias="companyTag")
    created_at: int = Field(default_factory=now_ms, alias="createdAt")
    updated_at: int = Field(default_factory=now_ms, alias="updatedAt")
    is_ai_generated: bool = Field(default=False, alias="isAiGenerated")
    sources: list[Source] = Field(default_factory=list)
    drawing: str | None = None

    @field_validator("answer", "company_tag", "category", mode="before")
    @classmethod
    def _none_to_default(cls, value: Any, info: Any) -> Any:
        if value is None:
            return OTHER_CATEGORY if info.field_name == "category" else ""
        return value

    @field_validator("sources", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_record(self) -> dict[str, Any]:
        """Serialize to the persisted (camelCase) dict shape."""
        return self.model_dump(by_alias=True, mode="json")
