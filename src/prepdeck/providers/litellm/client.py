# src/prepdeck/providers/litellm/client.py
"""LiteLLM client implementation for LLM completion APIs."""

from typing import Any

import litellm

from prepdeck.models import Completion, Source
from prepdeck.providers.base import LLMClient
from prepdeck.providers.litellm.models import GOOGLE_SEARCH_PREFIXES, ChatModels


def _field(obj: Any, name: str) -> Any:
    """Read a field from either a dict or an attribute-style object."""
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def _gemini_sources(response: Any) -> list[Source]:
    metadata = _field(response, "vertex_ai_grounding_metadata")
    if not isinstance(metadata, list):
        hidden = _field(response, "_hidden_params")
        metadata = hidden.get("vertex_ai_grounding_metadata") if isinstance(hidden, dict) else None
    if not isinstance(metadata, list):
        return []

    sources = []
    for candidate in metadata:
        chunks = _field(candidate, "groundingChunks") or _field(candidate, "grounding_chunks")
        if not isinstance(chunks, list):
            continue
        for chunk in chunks:
            web = _field(chunk, "web")
            uri = _field(web, "uri") if web is not None else None
            if isinstance(uri, str) and uri:
                sources.append(Source(uri=uri, title=_field(web, "title")))
    return sources


def _annotation_sources(message: Any) -> list[Source]:
    annotations = _field(message, "annotations")
    if not isinstance(annotations, list):
        return []

    sources = []
    for annotation in annotations:
        if _field(annotation, "type") != "url_citation":
            continue
        citation = _field(annotation, "url_citation")
        url = _field(citation, "url") if citation is not None else None
        if isinstance(url, str) and url:
            sources.append(Source(uri=url, title=_field(citation, "title")))
    return sources


def extract_sources(response: Any) -> list[Source]:
    """Collect web citations from a LiteLLM response, de-duplicated by URI.

    Understands Gemini grounding metadata and OpenAI-style url_citation
    annotations.
    """
    found = _gemini_sources(response)
    choices = _field(response, "choices")
    if isinstance(choices, list) and choices:
        found.extend(_annotation_sources(_field(choices[0], "message")))

    seen: set[str] = set()
    unique = []
    for source in found:
        if source.uri in seen:
            continue
        seen.add(source.uri or "")
        unique.append(source)
    return unique


class LiteLLMClient(LLMClient):
    """LiteLLM-based LLM client for text generation.

    Supports any model available through LiteLLM (Gemini, OpenAI, Anthropic,
    Bedrock, etc.).

    Example:
        from prepdeck.providers.litellm import LiteLLMClient, ChatModels

        client = LiteLLMClient(model=ChatModels.GEMINI_3_FLASH)
        completion = client.complete([{"role": "user", "content": "Hello"}])

        # With retry for rate-limited APIs
        client = LiteLLMClient(model=ChatModels.GEMINI_3_FLASH, num_retries=5)
    """

    def __init__(
        self,
        model: str = ChatModels.GEMINI_3_FLASH,
        num_retries: int = 3,
        api_key: str | None = None,
    ) -> None:
        """Initialize the LiteLLM client.

        Args:
            model: LiteLLM model identifier.
                   Examples: "gemini/gemini-3-flash-preview", "openai/gpt-5-mini"
            num_retries: Number of retries on rate limit errors. LiteLLM handles
                        exponential backoff automatically. Default: 3.
            api_key: Explicit API key. If None, LiteLLM reads the provider's
                     usual environment variable.
        """
        self.model = model
        self.num_retries = num_retries
        self.api_key = api_key

    def _completion_kwargs(
        self,
        messages: list[dict],
        temperature: float | None,
        web_search: bool,
    ) -> dict[str, Any]:
        completion_kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "drop_params": True,
            "num_retries": self.num_retries,
        }
        if temperature is not None:
            completion_kwargs["temperature"] = temperature
        if self.api_key:
            completion_kwargs["api_key"] = self.api_key
        if web_search:
            if self.model.lower().startswith(GOOGLE_SEARCH_PREFIXES):
                completion_kwargs["tools"] = [{"googleSearch": {}}]
            else:
                completion_kwargs["web_search_options"] = {}
        return completion_kwargs

    def _to_completion(self, response: Any) -> Completion:
        if not response.choices:
            raise ValueError(f"LLM returned no choices for model {self.model}")
        content = response.choices[0].message.content
        if content is None:
            raise ValueError(f"LLM returned None content for model {self.model}")
        return Completion(text=str(content), sources=extract_sources(response))

    def complete(
        self,
        messages: list[dict],
        temperature: float | None = None,
        web_search: bool = False,
    ) -> Completion:
        """Generate a completion using LiteLLM."""
        response = litellm.completion(
            **self._completion_kwargs(messages, temperature, web_search)
        )
        return self._to_completion(response)

    async def acomplete(
        self,
        messages: list[dict],
        temperature: float | None = None,
        web_search: bool = False,
    ) -> Completion:
        """Generate a completion using LiteLLM (async)."""
        response = await litellm.acompletion(
            **self._completion_kwargs(messages, temperature, web_search)
        )
        return self._to_completion(response)
