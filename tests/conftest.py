# tests/conftest.py
"""Shared pytest fixtures."""

import tempfile

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for stores and exported files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def isolated_env(temp_dir, monkeypatch):
    """Run in an empty working directory with no PREPDECK_* variables.

    Keeps config discovery, .env loading and the relative seed path from
    picking up files outside the test.
    """
    import os

    for name in list(os.environ):
        if name.startswith("PREPDECK_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(temp_dir)
    return temp_dir


@pytest.fixture
def backend():
    """Create an empty in-memory key-value backend."""
    from prepdeck.stores import MemoryBackend

    return MemoryBackend()


@pytest.fixture
def question_store(backend):
    """Create a question store over the in-memory backend."""
    from prepdeck.stores import KeyValueQuestionStore

    return KeyValueQuestionStore(backend)


@pytest.fixture
def category_store(backend, question_store):
    """Create a category store sharing the question store's backend."""
    from prepdeck.stores import KeyValueCategoryStore

    return KeyValueCategoryStore(backend, question_store)


@pytest.fixture
def make_question():
    """Factory for questions with explicit timestamps."""
    from prepdeck.models import Question

    def _make(text="What is attention?", created_at=1_000, updated_at=None, **kwargs):
        return Question(
            text=text,
            created_at=created_at,
            updated_at=updated_at if updated_at is not None else created_at,
            **kwargs,
        )

    return _make


@pytest.fixture
def mock_llm_client():
    """Create a scripted LLM client.

    Queue replies with ``client.replies.append(...)``; an Exception instance
    is raised instead of returned. Every call is recorded in ``client.calls``.
    """
    from prepdeck.models import Completion
    from prepdeck.providers import LLMClient

    class MockLLMClient(LLMClient):
        """LLM client that replays queued completions."""

        def __init__(self):
            self.replies = []
            self.calls = []

        def complete(self, messages, temperature=None, web_search=False):
            self.calls.append(
                {"messages": list(messages), "temperature": temperature, "web_search": web_search}
            )
            reply = self.replies.pop(0) if self.replies else Completion(text="")
            if isinstance(reply, Exception):
                raise reply
            if isinstance(reply, str):
                return Completion(text=reply)
            return reply

    return MockLLMClient()


@pytest.fixture
def answer_generator(mock_llm_client):
    """Create an answer generator over the scripted client."""
    from prepdeck.assistant import ClientAnswerGenerator

    return ClientAnswerGenerator(llm_client=mock_llm_client)


@pytest.fixture
def tracker(answer_generator):
    """Create an in-memory tracker with a scripted answer generator."""
    from prepdeck import MemoryStorage, Settings, Tracker

    settings = Settings(seed_policy="never")
    return Tracker(
        storage=MemoryStorage(),
        settings=settings,
        answer_generator=answer_generator,
    )


@pytest.fixture
def offline_tracker():
    """Create an in-memory tracker with no LLM configured."""
    from prepdeck import MemoryStorage, Settings, Tracker

    return Tracker(storage=MemoryStorage(), settings=Settings(seed_policy="never"))
