# src/prepdeck/providers/litellm/models.py
"""Curated chat model constants for the LiteLLM provider.

You can always pass any valid LiteLLM model string directly.
"""

# Model prefixes whose web grounding is requested through the googleSearch tool.
GOOGLE_SEARCH_PREFIXES = ("gemini/", "vertex_ai/")


class ChatModels:
    """Chat/completion models for LiteLLMClient."""

    # Google Gemini 3
    GEMINI_3_PRO = "gemini/gemini-3-pro-preview"
    GEMINI_3_FLASH = "gemini/gemini-3-flash-preview"

    # OpenAI - GPT 5 Series
    GPT_5_MINI = "openai/gpt-5-mini"
    GPT_5_NANO = "openai/gpt-5-nano"

    # OpenAI - search-enabled
    GPT_4O_SEARCH = "openai/gpt-4o-search-preview"

    # Anthropic - Claude 4.5 Series
    CLAUDE_SONNET_45 = "anthropic/claude-sonnet-4-5-20250929"
    CLAUDE_HAIKU_45 = "anthropic/claude-haiku-4-5-20251001"
