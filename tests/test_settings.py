# tests/test_settings.py
"""Tests for Settings.

Settings is a plain BaseModel (no env var reading).
Env vars and YAML are read by prepdeck.config.
"""

import pytest
from pydantic import ValidationError

from prepdeck.models import DEFAULT_CATEGORIES, OTHER_CATEGORY
from prepdeck.settings import Settings


class TestSettings:
    def test_default_settings(self):
        """Test Settings has correct defaults."""
        settings = Settings()
        assert settings.default_categories == DEFAULT_CATEGORIES
        assert settings.seed_policy == "if_empty"
        assert settings.auto_categorize is True
        assert settings.coerce_unknown_categories is True
        assert settings.web_search is True
        assert settings.answer_temperature is None
        assert settings.chat_temperature is None
        assert settings.answer_prompt is None
        assert settings.chat_prompt is None
        assert settings.num_retries == 3

    def test_settings_with_custom_values(self):
        settings = Settings(
            seed_policy="always",
            auto_categorize=False,
            web_search=False,
            answer_temperature=0.2,
            chat_prompt="Chat about {question}: {answer}",
        )
        assert settings.seed_policy == "always"
        assert settings.auto_categorize is False
        assert settings.web_search is False
        assert settings.answer_temperature == 0.2
        assert settings.chat_prompt == "Chat about {question}: {answer}"

    def test_invalid_seed_policy(self):
        with pytest.raises(ValidationError):
            Settings(seed_policy="sometimes")

    def test_default_categories_keep_other(self):
        settings = Settings(default_categories=["Algorithm", " ", "NLP "])
        assert settings.default_categories == ["Algorithm", "NLP", OTHER_CATEGORY]

    def test_default_categories_other_not_duplicated(self):
        settings = Settings(default_categories=[OTHER_CATEGORY, "NLP"])
        assert settings.default_categories == [OTHER_CATEGORY, "NLP"]

    def test_default_categories_not_shared(self):
        first = Settings()
        first.default_categories.append("Mutated")
        assert "Mutated" not in Settings().default_categories
