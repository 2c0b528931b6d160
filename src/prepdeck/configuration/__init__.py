# src/prepdeck/configuration/__init__.py
"""Configuration objects for prepdeck.

Instead of factory methods, you pass configuration objects that know how to
build their components.

Provider configurations (build AI components):
- LiteLLMProvider: Uses LiteLLM for answer generation and chat

Storage configurations (build the stores):
- LocalStorage: SQLite file in a data directory
- MemoryStorage: In-process dict, for tests and throwaway sessions

Example:
    from prepdeck import Tracker, LiteLLMProvider, LocalStorage

    tracker = Tracker(
        provider=LiteLLMProvider(llm="gemini/gemini-3-flash-preview"),
        storage=LocalStorage("./prepdeck_data"),
    )
"""

from prepdeck.configuration.base import ProviderConfig, StorageConfig
from prepdeck.configuration.providers import LiteLLMProvider
from prepdeck.configuration.storage import LocalStorage, MemoryStorage

__all__ = [
    "ProviderConfig",
    "StorageConfig",
    "LiteLLMProvider",
    "LocalStorage",
    "MemoryStorage",
]
