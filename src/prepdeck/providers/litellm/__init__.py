# src/prepdeck/providers/litellm/__init__.py
"""LiteLLM provider client for prepdeck.

Usage:
    from prepdeck.providers.litellm import LiteLLMClient, ChatModels

    client = LiteLLMClient(model=ChatModels.GEMINI_3_FLASH)
    completion = client.complete([{"role": "user", "content": "Hello"}], web_search=True)
"""

from prepdeck.providers.litellm.client import LiteLLMClient, extract_sources
from prepdeck.providers.litellm.models import ChatModels

__all__ = ["ChatModels", "LiteLLMClient", "extract_sources"]
