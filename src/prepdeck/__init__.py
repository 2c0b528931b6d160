"""prepdeck - Interview question tracker.

Record interview questions and answers by category and company, draft
answers with an LLM (with web citations), and keep the collection in a
local SQLite file with optional JSON mirroring.

Quick Start (LiteLLM + Local Storage):
    from prepdeck import Tracker, LiteLLMProvider, LocalStorage

    tracker = Tracker(
        provider=LiteLLMProvider(llm="gemini/gemini-3-flash-preview"),
        storage=LocalStorage("./prepdeck_data"),
    )

    question = tracker.create_question("Explain the attention mechanism.")
    generated = tracker.generate_answer(question.text)
    tracker.apply_generated(question.id, generated)

    # Filter the collection
    recent = filter_questions(tracker.question_store.get_all(), date_filter="week")

Explicit Stores:
    from prepdeck import Tracker
    from prepdeck.stores import KeyValueCategoryStore, KeyValueQuestionStore, SQLiteBackend

    backend = SQLiteBackend("./prepdeck_data/prepdeck.db")
    questions = KeyValueQuestionStore(backend)
    tracker = Tracker.from_stores(
        question_store=questions,
        category_store=KeyValueCategoryStore(backend, questions),
    )
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("prepdeck")
except PackageNotFoundError:
    # Development / source-tree fallback (e.g. running tests without installing the wheel).
    try:
        import tomllib
        from pathlib import Path

        def _read_version_from_pyproject() -> str | None:
            for parent in Path(__file__).resolve().parents:
                pyproject = parent / "pyproject.toml"
                if pyproject.exists():
                    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
                    version = data.get("project", {}).get("version")
                    return str(version) if version is not None else None
            return None

        __version__ = _read_version_from_pyproject() or "unknown"
    except Exception:
        __version__ = "unknown"

# AI components
from prepdeck.assistant import AnswerGenerator, ChatSession, ClientAnswerGenerator

# Configuration objects
from prepdeck.configuration import (
    LiteLLMProvider,
    LocalStorage,
    MemoryStorage,
    ProviderConfig,
    StorageConfig,
)
from prepdeck.exceptions import (
    ExternalServiceError,
    InvalidFormat,
    PrepdeckError,
    StorageReadError,
    SyncWriteError,
)

# Views
from prepdeck.filtering import filter_questions

# Core models
from prepdeck.models import (
    DEFAULT_CATEGORIES,
    OTHER_CATEGORY,
    ChatReply,
    GeneratedAnswer,
    ImportSummary,
    Question,
    Source,
)

# Providers
from prepdeck.providers import LLMClient
from prepdeck.seed import SeedLoader

# Settings
from prepdeck.settings import Settings

# Storage
from prepdeck.stores import CategoryStore, DirectorySync, QuestionStore

# Central configuration
from prepdeck.tracker import Tracker

__all__ = [
    "__version__",
    # Central configuration
    "Tracker",
    "Settings",
    # Configuration objects
    "LiteLLMProvider",
    "LocalStorage",
    "MemoryStorage",
    "ProviderConfig",
    "StorageConfig",
    # Models
    "Question",
    "Source",
    "GeneratedAnswer",
    "ChatReply",
    "ImportSummary",
    "DEFAULT_CATEGORIES",
    "OTHER_CATEGORY",
    # Stores
    "QuestionStore",
    "CategoryStore",
    "DirectorySync",
    "SeedLoader",
    # AI
    "LLMClient",
    "AnswerGenerator",
    "ClientAnswerGenerator",
    "ChatSession",
    # Views
    "filter_questions",
    # Errors
    "PrepdeckError",
    "StorageReadError",
    "InvalidFormat",
    "ExternalServiceError",
    "SyncWriteError",
]
