# src/prepdeck/exceptions.py
"""Exception hierarchy for prepdeck."""


class PrepdeckError(Exception):
    """Base class for all prepdeck errors."""


class StorageReadError(PrepdeckError):
    """Persisted data could not be parsed.

    Stores recover from this locally by treating the data as empty; it is
    only raised by the low-level decoding helpers.
    """


class InvalidFormat(PrepdeckError):
    """An import payload or file did not have the expected shape."""


class ExternalServiceError(PrepdeckError):
    """The AI service failed, including missing credentials."""


class SyncWriteError(PrepdeckError):
    """Writing the directory mirror failed. Logged, never propagated."""
