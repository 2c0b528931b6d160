# src/prepdeck/configuration/providers/litellm.py
"""LiteLLM provider configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prepdeck.assistant import AnswerGenerator
    from prepdeck.providers import LLMClient
    from prepdeck.settings import Settings


@dataclass(frozen=True)
class LiteLLMProvider:
    """Provider configuration using LiteLLM.

    LiteLLM provides a unified interface to 100+ LLM providers including
    Gemini, OpenAI, Anthropic, Azure, Bedrock, and more.

    Args:
        llm: LiteLLM model identifier.
             Examples: "gemini/gemini-3-flash-preview", "openai/gpt-5-mini"
        api_key: Optional explicit API key; otherwise LiteLLM uses the
                 provider's environment variable.

    Example:
        provider = LiteLLMProvider(llm="gemini/gemini-3-flash-preview")
    """

    llm: str
    api_key: str | None = None

    def build_llm_client(self, settings: Settings) -> LLMClient:
        """Build a LiteLLMClient.

        Args:
            settings: Settings containing num_retries for rate limit handling.
        """
        from prepdeck.providers.litellm import LiteLLMClient

        return LiteLLMClient(
            model=self.llm,
            num_retries=settings.num_retries,
            api_key=self.api_key,
        )

    def build_answer_generator(self, settings: Settings) -> AnswerGenerator:
        """Build a ClientAnswerGenerator on top of a LiteLLMClient."""
        from prepdeck.assistant import ClientAnswerGenerator

        return ClientAnswerGenerator(
            llm_client=self.build_llm_client(settings),
            prompt_template=settings.answer_prompt,
            chat_prompt_template=settings.chat_prompt,
            temperature=settings.answer_temperature,
            chat_temperature=settings.chat_temperature,
            web_search=settings.web_search,
        )
