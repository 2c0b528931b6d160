# src/prepdeck/seed.py
"""Loading of the project seed file shipped alongside the data."""

import json
import logging
from pathlib import Path

from prepdeck.models import Question
from prepdeck.stores.questions import is_importable, parse_questions

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = "data/interview_questions.json"


class SeedLoader:
    """Reads the bundled question file used to populate a fresh store.

    Any failure is reported as "no seed" rather than an error, since a
    missing seed is the normal case for most users.
    """

    def __init__(self, path: str | Path = DEFAULT_SEED_PATH) -> None:
        self.path = Path(path)

    def load(self) -> list[Question] | None:
        """Return the seed questions, or None if the file is absent or unusable.

        Records without a non-empty id and text are dropped, the same way an
        import drops them.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No seed file at %s", self.path)
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read seed file %s: %s", self.path, e)
            return None

        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Seed file %s is not valid JSON: %s", self.path, e)
            return None
        if not isinstance(parsed, list):
            logger.warning("Seed file %s does not contain a JSON array", self.path)
            return None

        records = [record for record in parsed if is_importable(record)]
        if len(records) < len(parsed):
            logger.warning(
                "Skipping %d seed records without an id or text", len(parsed) - len(records)
            )
        return parse_questions(records)
