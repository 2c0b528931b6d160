# src/prepdeck/configuration/storage/__init__.py
"""Storage configurations."""

from prepdeck.configuration.storage.local import LocalStorage, MemoryStorage

__all__ = ["LocalStorage", "MemoryStorage"]
