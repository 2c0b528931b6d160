# src/prepdeck/providers/base.py
"""Abstract base class for LLM providers."""

from abc import ABC, abstractmethod

from prepdeck.models import Completion


class LLMClient(ABC):
    """Abstract base class for LLM completion providers.

    Implementations return the generated text together with any web
    citations the provider attached to it.

    Example:
        class MyLLMClient(LLMClient):
            def complete(self, messages, temperature=None, web_search=False):
                return Completion(text=my_api.chat(messages, temp=temperature))
    """

    @abstractmethod
    def complete(
        self,
        messages: list[dict],
        temperature: float | None = None,
        web_search: bool = False,
    ) -> Completion:
        """Generate a completion for the given messages.

        Args:
            messages: List of message dicts with 'role' and 'content' keys.
                      Example: [{"role": "user", "content": "Hello"}]
            temperature: Optional temperature for generation (0.0-1.0).
                         If None, use provider default.
            web_search: Ask the provider to ground the answer in a web search
                        and report the pages it used.

        Returns:
            The generated text and its citations.
        """
        ...

    async def acomplete(
        self,
        messages: list[dict],
        temperature: float | None = None,
        web_search: bool = False,
    ) -> Completion:
        """Generate a completion for the given messages (async).

        Default implementation calls sync complete() for backwards compatibility.
        Override in subclasses for true async behavior.
        """
        return self.complete(messages, temperature, web_search)
