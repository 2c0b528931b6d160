# src/prepdeck/exchange/json_format.py
"""JSON import and export."""

import json
from pathlib import Path
from typing import Any

from prepdeck.exceptions import InvalidFormat
from prepdeck.models import Question


def dumps_questions(questions: list[Question]) -> str:
    """Serialize questions as a pretty-printed JSON array."""
    return json.dumps([q.to_record() for q in questions], ensure_ascii=False, indent=2)


def read_json_records(path: Path) -> list[Any]:
    """Read a JSON import file. The top level must be an array."""
    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InvalidFormat(f"{path.name} is not UTF-8 text: {e}") from e
    except OSError as e:
        raise InvalidFormat(f"Could not read {path.name}: {e}") from e
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidFormat(f"{path.name} is not valid JSON: {e}") from e
    if not isinstance(parsed, list):
        raise InvalidFormat(f"{path.name} must contain a JSON array of questions")
    return parsed
