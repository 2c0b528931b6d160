# src/prepdeck/assistant/client.py
"""Client-based answer generator implementation."""

from __future__ import annotations

import logging
import re

from prepdeck.assistant.base import AnswerGenerator
from prepdeck.assistant.chat import CHAT_SYSTEM_PROMPT, ChatSession
from prepdeck.exceptions import ExternalServiceError
from prepdeck.models import OTHER_CATEGORY, GeneratedAnswer
from prepdeck.providers.base import LLMClient

logger = logging.getLogger(__name__)

ANSWER_SYSTEM_PROMPT = """Always start your response with the category in brackets, \
like [Category Name], followed by the answer. The Category Name MUST be one of: {categories}."""

ANSWER_PROMPT = """You are an expert career coach.
1. Provide a professional, concise answer to the question.
2. Classify the question into one of these categories: {categories}.

Question: {question}"""

CATEGORIZE_PROMPT = """Classify this interview question into exactly one category \
from this list: {categories}.
Return ONLY the category name.

Question: {question}"""

_CATEGORY_TAG = re.compile(r"^\[(.*?)\]")


def parse_category_tag(text: str) -> tuple[str, str]:
    """Split a leading [Category] tag from a response.

    Returns:
        (category, answer). Without a tag the category is "Other" and the
        whole text is the answer.
    """
    text = text.strip()
    match = _CATEGORY_TAG.match(text)
    if not match or not match.group(1).strip():
        return OTHER_CATEGORY, text
    return match.group(1).strip(), text[match.end() :].strip()


def match_category(label: str, categories: list[str]) -> str:
    """Map a model-produced label onto the known list, case-insensitively.

    Unknown labels are returned unchanged; callers decide how to treat them.
    """
    cleaned = label.strip().strip("[]\"'`.").strip()
    for category in categories:
        if category.lower() == cleaned.lower():
            return category
    return cleaned


class ClientAnswerGenerator(AnswerGenerator):
    """Answer generator that uses an LLMClient with web grounding.

    Example:
        from prepdeck.providers.litellm import LiteLLMClient
        from prepdeck.assistant import ClientAnswerGenerator

        client = LiteLLMClient(model="gemini/gemini-3-flash-preview")
        generator = ClientAnswerGenerator(llm_client=client)
        result = generator.generate("What is RLHF?", ["NLP", "Other"])
    """

    def __init__(
        self,
        llm_client: LLMClient,
        prompt_template: str | None = None,
        chat_prompt_template: str | None = None,
        temperature: float | None = None,
        chat_temperature: float | None = None,
        web_search: bool = True,
    ) -> None:
        """Initialize the answer generator.

        Args:
            llm_client: Any LLMClient implementation
            prompt_template: Custom answer prompt with {question} and {categories}
            chat_prompt_template: Custom chat system prompt with {question} and {answer}
            temperature: Temperature for answers. None to use model default.
            chat_temperature: Temperature for chat turns. None to use model default.
            web_search: Ground answers and chat replies in a web search.
        """
        self._client = llm_client
        self.prompt_template = prompt_template or ANSWER_PROMPT
        self.chat_prompt_template = chat_prompt_template or CHAT_SYSTEM_PROMPT
        self.temperature = temperature
        self.chat_temperature = chat_temperature
        self.web_search = web_search

    def _build_messages(self, question_text: str, categories: list[str]) -> list[dict]:
        joined = ", ".join(categories)
        return [
            {"role": "system", "content": ANSWER_SYSTEM_PROMPT.format(categories=joined)},
            {
                "role": "user",
                "content": self.prompt_template.format(question=question_text, categories=joined),
            },
        ]

    def _to_answer(self, text: str, sources: list, categories: list[str]) -> GeneratedAnswer:
        category, answer = parse_category_tag(text)
        if category != OTHER_CATEGORY:
            category = match_category(category, categories)
        return GeneratedAnswer(answer=answer, category=category, sources=sources)

    def generate(self, question_text: str, categories: list[str]) -> GeneratedAnswer:
        """Generate an answer using the LLM client."""
        messages = self._build_messages(question_text, categories)
        try:
            completion = self._client.complete(
                messages, temperature=self.temperature, web_search=self.web_search
            )
        except Exception as e:
            logger.error("Answer generation failed: %s", e)
            raise ExternalServiceError(f"Failed to generate answer: {e}") from e
        return self._to_answer(completion.text, completion.sources, categories)

    async def agenerate(self, question_text: str, categories: list[str]) -> GeneratedAnswer:
        """Generate an answer using the LLM client (async)."""
        messages = self._build_messages(question_text, categories)
        try:
            completion = await self._client.acomplete(
                messages, temperature=self.temperature, web_search=self.web_search
            )
        except Exception as e:
            logger.error("Answer generation failed: %s", e)
            raise ExternalServiceError(f"Failed to generate answer: {e}") from e
        return self._to_answer(completion.text, completion.sources, categories)

    def categorize(self, question_text: str, categories: list[str]) -> str:
        """Classify a question into one of categories."""
        prompt = CATEGORIZE_PROMPT.format(categories=", ".join(categories), question=question_text)
        try:
            completion = self._client.complete(
                [{"role": "user", "content": prompt}], temperature=0.0
            )
        except Exception as e:
            logger.warning("Auto-categorization failed, using %r: %s", OTHER_CATEGORY, e)
            return OTHER_CATEGORY

        label = match_category(completion.text, categories)
        return label if label in categories else OTHER_CATEGORY

    def create_chat_session(self, question_text: str, current_answer: str) -> ChatSession:
        """Start a chat session seeded with the question and current answer."""
        system_prompt = self.chat_prompt_template.format(
            question=question_text, answer=current_answer
        )
        return ChatSession(
            llm_client=self._client,
            system_prompt=system_prompt,
            temperature=self.chat_temperature,
            web_search=self.web_search,
        )
