# tests/stores/test_kv_backends.py
"""Tests for the key-value backends."""

import os

import pytest

from prepdeck.stores import KeyValueBackend, MemoryBackend, SQLiteBackend


@pytest.fixture
def sqlite_backend(temp_dir):
    return SQLiteBackend(os.path.join(temp_dir, "nested", "test.db"))


class TestMemoryBackend:
    def test_is_backend(self):
        assert isinstance(MemoryBackend(), KeyValueBackend)

    def test_get_missing(self):
        assert MemoryBackend().get("missing") is None

    def test_set_and_get(self):
        backend = MemoryBackend()
        backend.set("k", "v")
        assert backend.get("k") == "v"

    def test_initial_data_is_copied(self):
        initial = {"k": "v"}
        backend = MemoryBackend(initial)
        backend.set("k", "changed")
        assert initial["k"] == "v"


class TestSQLiteBackend:
    def test_is_backend(self, sqlite_backend):
        assert isinstance(sqlite_backend, KeyValueBackend)

    def test_creates_parent_directory(self, temp_dir, sqlite_backend):
        assert os.path.exists(os.path.join(temp_dir, "nested", "test.db"))

    def test_get_missing(self, sqlite_backend):
        assert sqlite_backend.get("missing") is None

    def test_set_overwrites(self, sqlite_backend):
        sqlite_backend.set("k", "one")
        sqlite_backend.set("k", "two")
        assert sqlite_backend.get("k") == "two"

    def test_persists_across_instances(self, temp_dir):
        path = os.path.join(temp_dir, "p.db")
        SQLiteBackend(path).set("k", "kept")
        assert SQLiteBackend(path).get("k") == "kept"
