# tests/test_seed.py
"""Tests for the seed loader."""

import json
import os

from prepdeck.seed import DEFAULT_SEED_PATH, SeedLoader


def _write(path, content):
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


class TestSeedLoader:
    def test_default_path(self):
        assert DEFAULT_SEED_PATH == "data/interview_questions.json"
        assert str(SeedLoader().path) == os.path.join("data", "interview_questions.json")

    def test_missing_file(self, temp_dir):
        assert SeedLoader(os.path.join(temp_dir, "missing.json")).load() is None

    def test_bad_json(self, temp_dir):
        path = os.path.join(temp_dir, "seed.json")
        _write(path, "{broken")
        assert SeedLoader(path).load() is None

    def test_non_array(self, temp_dir):
        path = os.path.join(temp_dir, "seed.json")
        _write(path, json.dumps({"id": "a", "text": "A"}))
        assert SeedLoader(path).load() is None

    def test_directory_instead_of_file(self, temp_dir):
        assert SeedLoader(temp_dir).load() is None

    def test_loads_questions(self, temp_dir):
        path = os.path.join(temp_dir, "seed.json")
        _write(
            path,
            json.dumps(
                [
                    {"id": "a", "text": "What is PPO?", "category": "Reinforcement Learning"},
                    {"id": "b"},
                ]
            ),
        )
        questions = SeedLoader(path).load()
        assert questions is not None
        assert [q.id for q in questions] == ["a"]
        assert questions[0].category == "Reinforcement Learning"

    def test_not_utf8(self, temp_dir):
        path = os.path.join(temp_dir, "seed.json")
        with open(path, "wb") as f:
            f.write(b"\xff\xfe[]")
        assert SeedLoader(path).load() is None

    def test_drops_records_without_id(self, temp_dir):
        path = os.path.join(temp_dir, "seed.json")
        records = [{"text": "no id"}, {"id": "", "text": "blank"}, {"id": "s1", "text": "ok"}]
        _write(path, json.dumps(records))
        questions = SeedLoader(path).load()
        assert [q.id for q in questions] == ["s1"]
