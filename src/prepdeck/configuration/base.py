# src/prepdeck/configuration/base.py
"""Protocol definitions for configuration objects.

Implementations can use @dataclass(frozen=True) for immutability. Stores use
ABCs instead (see stores/base.py) because they share implementation through
inheritance; configuration objects only need the right methods.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from prepdeck.assistant import AnswerGenerator
    from prepdeck.providers import LLMClient
    from prepdeck.settings import Settings
    from prepdeck.stores import CategoryStore, DirectorySync, QuestionStore


@runtime_checkable
class ProviderConfig(Protocol):
    """Protocol for provider configurations.

    Example implementation:
        @dataclass(frozen=True)
        class LiteLLMProvider:
            llm: str

            def build_llm_client(self, settings: Settings) -> LLMClient: ...
            def build_answer_generator(self, settings: Settings) -> AnswerGenerator: ...
    """

    def build_llm_client(self, settings: Settings) -> LLMClient:
        """Build an LLM client for general-purpose completions."""
        ...

    def build_answer_generator(self, settings: Settings) -> AnswerGenerator:
        """Build the answer generator used for answers, categories and chat.

        Args:
            settings: Settings containing prompts, temperatures and retries.
        """
        ...


@runtime_checkable
class StorageConfig(Protocol):
    """Protocol for storage configurations.

    Example implementation:
        @dataclass(frozen=True)
        class LocalStorage:
            data_dir: str

            def build_stores(self, settings, sync) -> tuple[QuestionStore, CategoryStore]: ...
    """

    def build_stores(
        self,
        settings: Settings,
        sync: DirectorySync | None = None,
    ) -> tuple[QuestionStore, CategoryStore]:
        """Build the question and category stores.

        Returns:
            Tuple of (question_store, category_store)
        """
        ...
