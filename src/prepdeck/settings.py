# src/prepdeck/settings.py
"""Behavioral settings for prepdeck.

Settings are passed programmatically - the library does not read from
environment variables. The CLI reads env vars and YAML in prepdeck.config
and passes the resulting values explicitly.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from prepdeck.models import DEFAULT_CATEGORIES, OTHER_CATEGORY

SeedPolicy = Literal["if_empty", "always", "never"]


class Settings(BaseModel):
    """Behavioral settings for prepdeck.

    Example:
        settings = Settings(seed_policy="never", auto_categorize=False)
    """

    # Categories used until the user edits the list
    default_categories: list[str] = Field(default_factory=lambda: list(DEFAULT_CATEGORIES))

    # When to merge the project seed file into the store:
    # "if_empty" only into an empty store, "always" on every bootstrap
    # (can resurrect deleted seed questions), "never" to skip it.
    seed_policy: SeedPolicy = "if_empty"

    # Ask the model for a category when a new question is saved as "Other"
    auto_categorize: bool = True

    # Rewrite labels missing from the category list to "Other" on save
    coerce_unknown_categories: bool = True

    # Generation
    web_search: bool = True
    answer_temperature: float | None = None
    chat_temperature: float | None = None
    answer_prompt: str | None = None
    chat_prompt: str | None = None

    # Retry configuration (LiteLLM handles exponential backoff for RateLimitError)
    num_retries: int = 3

    @field_validator("default_categories")
    @classmethod
    def _keep_other(cls, value: list[str]) -> list[str]:
        labels = [label.strip() for label in value if label and label.strip()]
        if OTHER_CATEGORY not in labels:
            labels.append(OTHER_CATEGORY)
        return labels
