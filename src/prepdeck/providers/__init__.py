# src/prepdeck/providers/__init__.py
"""LLM provider abstractions for prepdeck."""

from prepdeck.providers.base import LLMClient

__all__ = ["LLMClient"]
