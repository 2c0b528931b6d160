# src/prepdeck/tracker.py
"""Central object bundling the stores, sync, seed loader and AI components."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from prepdeck.exceptions import ExternalServiceError
from prepdeck.models import OTHER_CATEGORY, GeneratedAnswer, Question, Source, now_ms
from prepdeck.seed import DEFAULT_SEED_PATH, SeedLoader
from prepdeck.settings import SeedPolicy, Settings
from prepdeck.stores.sync import DirectorySync

if TYPE_CHECKING:
    from prepdeck.assistant import AnswerGenerator, ChatSession
    from prepdeck.configuration import ProviderConfig, StorageConfig
    from prepdeck.stores import CategoryStore, QuestionStore

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = {
    "text",
    "answer",
    "category",
    "company_tag",
    "is_ai_generated",
    "sources",
    "drawing",
}


class Tracker:
    """Central configuration for the prepdeck stores and AI components.

    There are two ways to create a Tracker:

    1. With a storage bundle:

        from prepdeck import Tracker, LiteLLMProvider, LocalStorage

        tracker = Tracker(
            provider=LiteLLMProvider(llm="gemini/gemini-3-flash-preview"),
            storage=LocalStorage("./prepdeck_data"),
        )

    2. With explicit stores:

        tracker = Tracker.from_stores(
            question_store=my_question_store,
            category_store=my_category_store,
        )

    The provider is optional; without it the AI operations raise
    ExternalServiceError and auto-categorization is skipped.
    """

    def __init__(
        self,
        *,
        storage: StorageConfig | None = None,
        provider: ProviderConfig | None = None,
        settings: Settings | None = None,
        sync_dir: str | Path | None = None,
        seed_path: str | Path | None = None,
        question_store: QuestionStore | None = None,
        category_store: CategoryStore | None = None,
        answer_generator: AnswerGenerator | None = None,
    ) -> None:
        """Create a Tracker.

        Args:
            storage: Storage bundle. Mutually exclusive with explicit stores.
            provider: Provider configuration for the answer generator.
            settings: Behavioral settings.
            sync_dir: Directory to mirror the collection into after each write.
            seed_path: Project seed file used by bootstrap().
            question_store: Explicit question store (with category_store).
            category_store: Explicit category store (with question_store).
            answer_generator: Explicit answer generator. Overrides provider.

        Raises:
            ValueError: If neither storage nor both explicit stores are given,
                       or if both are given.
        """
        self.settings = settings if settings is not None else Settings()
        self.sync = DirectorySync()

        if storage is not None:
            if question_store is not None or category_store is not None:
                raise ValueError("Cannot mix 'storage' bundle with explicit stores")
            self.question_store, self.category_store = storage.build_stores(
                self.settings, self.sync
            )
        elif question_store is not None and category_store is not None:
            self.question_store = question_store
            self.category_store = category_store
            # Share one sync session with stores that support mirroring
            if isinstance(getattr(question_store, "sync", None), DirectorySync):
                self.sync = question_store.sync  # type: ignore[attr-defined]
            elif hasattr(question_store, "sync"):
                question_store.sync = self.sync  # type: ignore[attr-defined]
        else:
            raise ValueError(
                "Must provide either 'storage' bundle or both explicit stores "
                "(question_store, category_store)"
            )

        if sync_dir is not None:
            self.sync.acquire(sync_dir)

        if answer_generator is None and provider is not None:
            answer_generator = provider.build_answer_generator(self.settings)
        self.answer_generator = answer_generator

        self.seed_loader = SeedLoader(seed_path if seed_path is not None else DEFAULT_SEED_PATH)

    @classmethod
    def from_stores(
        cls,
        question_store: QuestionStore,
        category_store: CategoryStore,
        answer_generator: AnswerGenerator | None = None,
        settings: Settings | None = None,
        seed_path: str | Path | None = None,
    ) -> Tracker:
        """Create a Tracker from explicit stores."""
        return cls(
            question_store=question_store,
            category_store=category_store,
            answer_generator=answer_generator,
            settings=settings,
            seed_path=seed_path,
        )

    # ------------------------------------------------------------------
    # Sync
    # ------------------------------------------------------------------

    def attach_sync(self, directory: str | Path) -> bool:
        """Attach a mirror directory and write the current collection to it."""
        if not self.sync.acquire(directory):
            return False
        return self.sync.mirror(self.question_store.get_all())

    def detach_sync(self) -> None:
        """Stop mirroring."""
        self.sync.release()

    # ------------------------------------------------------------------
    # Questions
    # ------------------------------------------------------------------

    def _resolve_category(self, category: str) -> str:
        category = (category or "").strip() or OTHER_CATEGORY
        if not self.settings.coerce_unknown_categories:
            return category
        if category not in self.category_store.get_all():
            logger.warning("Unknown category %r saved as %r", category, OTHER_CATEGORY)
            return OTHER_CATEGORY
        return category

    def create_question(
        self,
        text: str,
        answer: str = "",
        category: str = OTHER_CATEGORY,
        company_tag: str = "",
        is_ai_generated: bool = False,
        sources: list[Source] | None = None,
        drawing: str | None = None,
    ) -> Question:
        """Create and save a new question.

        A question left in "Other" is auto-categorized when a generator is
        configured and settings.auto_categorize is on.

        Raises:
            ValueError: If text is empty.
        """
        if not text.strip():
            raise ValueError("Question text must not be empty")

        if (
            (category or OTHER_CATEGORY) == OTHER_CATEGORY
            and self.settings.auto_categorize
            and self.answer_generator is not None
        ):
            category = self.answer_generator.categorize(text, self.category_store.get_all())

        now = now_ms()
        question = Question(
            text=text,
            answer=answer,
            category=self._resolve_category(category),
            company_tag=company_tag,
            created_at=now,
            updated_at=now,
            is_ai_generated=is_ai_generated,
            sources=sources or [],
            drawing=drawing,
        )
        self.question_store.save(question)
        return question

    def update_question(self, question_id: str, **changes: Any) -> Question:
        """Apply field changes to a stored question and save it.

        The id and createdAt never change; updatedAt is refreshed and never
        moves backwards. Editing the answer by hand clears isAiGenerated
        unless is_ai_generated is passed explicitly.

        Raises:
            KeyError: If no question has this id.
            ValueError: For unknown fields or an empty text.
        """
        unknown = set(changes) - _EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot edit fields: {', '.join(sorted(unknown))}")

        current = self.question_store.get(question_id)
        if current is None:
            raise KeyError(question_id)

        if "text" in changes and not str(changes["text"]).strip():
            raise ValueError("Question text must not be empty")
        if "category" in changes:
            changes["category"] = self._resolve_category(changes["category"])
        if (
            "answer" in changes
            and "is_ai_generated" not in changes
            and changes["answer"] != current.answer
        ):
            changes["is_ai_generated"] = False

        changes["updated_at"] = max(now_ms(), current.updated_at)
        updated = Question.model_validate(current.model_copy(update=changes).model_dump())
        self.question_store.save(updated)
        return updated

    def delete_question(self, question_id: str) -> bool:
        """Delete a question. Returns False if it did not exist."""
        return self.question_store.delete(question_id)

    # ------------------------------------------------------------------
    # AI
    # ------------------------------------------------------------------

    def _require_generator(self) -> AnswerGenerator:
        if self.answer_generator is None:
            raise ExternalServiceError(
                "No LLM configured. Set llm_model in prepdeck.yaml or PREPDECK_LLM_MODEL."
            )
        return self.answer_generator

    def generate_answer(self, question_text: str) -> GeneratedAnswer:
        """Generate an answer for question text. Nothing is saved.

        Raises:
            ExternalServiceError: If no generator is configured or the call fails.
        """
        generator = self._require_generator()
        return generator.generate(question_text, self.category_store.get_all())

    async def agenerate_answer(self, question_text: str) -> GeneratedAnswer:
        """Generate an answer for question text (async). Nothing is saved."""
        generator = self._require_generator()
        return await generator.agenerate(question_text, self.category_store.get_all())

    def apply_generated(self, question_id: str, result: GeneratedAnswer) -> Question:
        """Store a generated answer, category and sources on a question."""
        return self.update_question(
            question_id,
            answer=result.answer,
            category=result.category,
            sources=result.sources,
            is_ai_generated=True,
        )

    def chat(self, question_id: str) -> ChatSession:
        """Start a chat session about a stored question.

        Raises:
            KeyError: If no question has this id.
            ExternalServiceError: If no generator is configured.
        """
        generator = self._require_generator()
        question = self.question_store.get(question_id)
        if question is None:
            raise KeyError(question_id)
        return generator.create_chat_session(question.text, question.answer)

    # ------------------------------------------------------------------
    # Seed
    # ------------------------------------------------------------------

    def bootstrap(self, policy: SeedPolicy | None = None) -> int:
        """Merge the project seed file according to the seed policy.

        Args:
            policy: Overrides settings.seed_policy for this call.

        Returns:
            Number of seed questions merged (0 when skipped).
        """
        policy = policy or self.settings.seed_policy
        if policy == "never":
            return 0
        if policy == "if_empty" and self.question_store.get_all():
            return 0

        seed = self.seed_loader.load()
        if not seed:
            return 0
        summary = self.question_store.import_merge([q.to_record() for q in seed])
        logger.info("Merged %d seed questions from %s", summary.merged, self.seed_loader.path)
        return summary.merged
