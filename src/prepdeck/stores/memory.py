# src/prepdeck/stores/memory.py
"""In-memory key-value backend."""

from prepdeck.stores.base import KeyValueBackend


class MemoryBackend(KeyValueBackend):
    """Dict-backed backend. Contents are lost when the process exits."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value
