# src/prepdeck/stores/sync.py
"""Optional mirroring of the question collection into a project directory.

A DirectorySync is an explicit session object: it starts unattached, is
attached to a directory with acquire(), and detached again with release().
Stores call mirror() after every write; while unattached that is a no-op.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import TYPE_CHECKING

from prepdeck.exceptions import SyncWriteError

if TYPE_CHECKING:
    from prepdeck.models import Question

logger = logging.getLogger(__name__)

SYNC_SUBDIR = "data"
SYNC_FILENAME = "interview_questions.json"


class DirectorySync:
    """Best-effort JSON mirror of the question collection."""

    def __init__(self) -> None:
        self._directory: Path | None = None

    @property
    def is_attached(self) -> bool:
        return self._directory is not None

    @property
    def directory(self) -> Path | None:
        return self._directory

    @property
    def target_path(self) -> Path | None:
        """File the mirror writes to, or None while unattached."""
        if self._directory is None:
            return None
        return self._directory / SYNC_SUBDIR / SYNC_FILENAME

    def acquire(self, directory: str | Path) -> bool:
        """Attach to a directory. Returns False if it is not a usable directory."""
        path = Path(directory).expanduser()
        if not path.is_dir():
            logger.error("Sync directory does not exist: %s", path)
            return False
        self._directory = path
        logger.debug("Attached sync directory %s", path)
        return True

    def release(self) -> None:
        """Detach from the current directory, if any."""
        if self._directory is not None:
            logger.debug("Released sync directory %s", self._directory)
        self._directory = None

    def mirror(self, questions: list[Question]) -> bool:
        """Write the collection to the mirror file.

        Failures are logged and reported through the return value only.

        Returns:
            True if the file was written, False if unattached or on failure.
        """
        target = self.target_path
        if target is None:
            return False
        try:
            self._write(target, [q.to_record() for q in questions])
        except SyncWriteError as e:
            logger.error("Failed to sync to local file: %s", e)
            return False
        logger.info("Synced %d questions to %s", len(questions), target)
        return True

    def _write(self, target: Path, records: list[dict]) -> None:
        # atomic write
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                "w", dir=target.parent, delete=False, encoding="utf-8", suffix=".tmp"
            ) as tf:
                json.dump(records, tf, ensure_ascii=False, indent=2)
                tmpname = tf.name
            os.replace(tmpname, target)
        except OSError as e:
            raise SyncWriteError(f"{target}: {e}") from e
