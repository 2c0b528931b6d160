# src/prepdeck/assistant/chat.py
"""Stateful chat session for refining one answer."""

from __future__ import annotations

import logging

from prepdeck.models import ChatReply, Completion
from prepdeck.providers.base import LLMClient

logger = logging.getLogger(__name__)

CHAT_SYSTEM_PROMPT = """You are a helpful interview preparation assistant.
The user is currently editing an answer for the interview question: "{question}".
The current answer is: "{answer}".
Help the user refine, expand, or correct this answer based on the latest industry \
standards and web search.
Keep your responses professional and helpful."""

EMPTY_REPLY = "The assistant could not answer right now."
FAILED_REPLY = "Sorry, something went wrong. Please try again later."


class ChatSession:
    """Conversation bound to one question and its current answer.

    The session keeps the message history and replays it on every turn.
    Service failures never raise: send() returns a placeholder reply with
    failed=True and drops the user turn, so the history stays consistent.
    """

    def __init__(
        self,
        llm_client: LLMClient,
        system_prompt: str,
        temperature: float | None = None,
        web_search: bool = True,
    ) -> None:
        self._client = llm_client
        self.temperature = temperature
        self.web_search = web_search
        self.messages: list[dict] = [{"role": "system", "content": system_prompt}]

    @property
    def history(self) -> list[dict]:
        """User and assistant turns so far, without the system prompt."""
        return [m for m in self.messages if m["role"] != "system"]

    def _accept(self, completion: Completion) -> ChatReply:
        text = completion.text.strip()
        if not text:
            self.messages.pop()
            return ChatReply(text=EMPTY_REPLY, failed=True)
        self.messages.append({"role": "assistant", "content": text})
        return ChatReply(text=text, sources=completion.sources)

    def _reject(self, error: Exception) -> ChatReply:
        logger.error("Chat turn failed: %s", error)
        self.messages.pop()
        return ChatReply(text=FAILED_REPLY, failed=True)

    def send(self, message: str) -> ChatReply:
        """Send a user message and return the assistant's reply."""
        self.messages.append({"role": "user", "content": message})
        try:
            completion = self._client.complete(
                list(self.messages), temperature=self.temperature, web_search=self.web_search
            )
        except Exception as e:
            return self._reject(e)
        return self._accept(completion)

    async def asend(self, message: str) -> ChatReply:
        """Send a user message and return the assistant's reply (async)."""
        self.messages.append({"role": "user", "content": message})
        try:
            completion = await self._client.acomplete(
                list(self.messages), temperature=self.temperature, web_search=self.web_search
            )
        except Exception as e:
            return self._reject(e)
        return self._accept(completion)
