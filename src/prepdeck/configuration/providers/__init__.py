# src/prepdeck/configuration/providers/__init__.py
"""Provider configurations."""

from prepdeck.configuration.providers.litellm import LiteLLMProvider

__all__ = ["LiteLLMProvider"]
