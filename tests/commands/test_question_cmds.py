# tests/commands/test_question_cmds.py
"""Tests for the add, edit, show, list and delete commands."""

import os

from prepdeck.commands import add, delete, edit, list_cmd, show
from prepdeck.commands.base import ConfirmRequest, find_question
from prepdeck.models import OTHER_CATEGORY


class TestAddCommand:
    """Tests for add.add()."""

    def test_add(self, offline_tracker) -> None:
        result = add.add("What is RLHF?", category="NLP", company_tag="Acme", tracker=offline_tracker)

        assert result.success is True
        assert result.error is None
        assert result.question.text == "What is RLHF?"
        assert result.question.company_tag == "Acme"
        assert "NLP" in result.categories
        assert offline_tracker.question_store.get(result.question.id) is not None

    def test_add_empty_text(self, offline_tracker) -> None:
        result = add.add("  ", tracker=offline_tracker)
        assert result.success is False
        assert "must not be empty" in result.error
        assert offline_tracker.question_store.get_all() == []

    def test_add_with_generate(self, tracker, mock_llm_client) -> None:
        mock_llm_client.replies.append("[SFT] Fine-tune on labeled pairs.")

        result = add.add("What is SFT?", generate=True, tracker=tracker)

        assert result.success is True
        assert result.question.answer == "Fine-tune on labeled pairs."
        assert result.question.category == "SFT"
        assert result.question.is_ai_generated is True

    def test_add_with_generate_keeps_explicit_category(self, tracker, mock_llm_client) -> None:
        mock_llm_client.replies.append("[SFT] Answer.")
        result = add.add("What is SFT?", category="NLP", generate=True, tracker=tracker)
        assert result.question.category == "NLP"

    def test_add_generate_failure_saves_nothing(self, tracker, mock_llm_client) -> None:
        mock_llm_client.replies.append(RuntimeError("quota exceeded"))

        result = add.add("What is SFT?", generate=True, tracker=tracker)

        assert result.success is False
        assert result.error.startswith("Generation failed")
        assert tracker.question_store.get_all() == []

    def test_add_generate_without_llm(self, offline_tracker) -> None:
        result = add.add("What is SFT?", generate=True, tracker=offline_tracker)
        assert result.success is False
        assert "No LLM configured" in result.error

    def test_add_from_config(self, isolated_env) -> None:
        data_dir = os.path.join(isolated_env, "data_store")
        result = add.add("Persisted", data_dir=data_dir)

        assert result.success is True
        assert os.path.exists(os.path.join(data_dir, "prepdeck.db"))
        assert show.show(result.question.id, data_dir=data_dir).question.text == "Persisted"


class TestFindQuestion:
    def test_exact_and_prefix(self, offline_tracker) -> None:
        q = offline_tracker.create_question("x")
        assert find_question(offline_tracker, q.id) == q
        assert find_question(offline_tracker, q.id[:8]) == q

    def test_not_found(self, offline_tracker) -> None:
        assert find_question(offline_tracker, "zzz") == "Question not found: zzz"

    def test_empty_id(self, offline_tracker) -> None:
        assert find_question(offline_tracker, " ") == "Question id must not be empty."

    def test_ambiguous_prefix(self, offline_tracker, make_question) -> None:
        offline_tracker.question_store.save(make_question(id="abc-1"))
        offline_tracker.question_store.save(make_question(id="abc-2"))
        assert "Ambiguous" in find_question(offline_tracker, "abc")


class TestEditCommand:
    """Tests for edit.edit()."""

    def test_edit_fields(self, offline_tracker) -> None:
        q = offline_tracker.create_question("Old", answer="a", is_ai_generated=True)

        result = edit.edit(q.id, text="New", answer="b", company_tag="Acme", tracker=offline_tracker)

        assert result.success is True
        assert result.question.id == q.id
        assert result.question.text == "New"
        assert result.question.answer == "b"
        assert result.question.is_ai_generated is False
        assert result.question.company_tag == "Acme"

    def test_edit_unknown_category_becomes_other(self, offline_tracker) -> None:
        q = offline_tracker.create_question("x", category="NLP")
        result = edit.edit(q.id, category="Cooking", tracker=offline_tracker)
        assert result.question.category == OTHER_CATEGORY

    def test_edit_clear_sources(self, offline_tracker) -> None:
        q = offline_tracker.create_question("x", sources=[{"uri": "https://a.example"}])
        result = edit.edit(q.id, clear_sources=True, tracker=offline_tracker)
        assert result.question.sources == []

    def test_edit_nothing(self, offline_tracker) -> None:
        q = offline_tracker.create_question("x")
        result = edit.edit(q.id, tracker=offline_tracker)
        assert result.success is False
        assert result.error == "Nothing to change."

    def test_edit_empty_text(self, offline_tracker) -> None:
        q = offline_tracker.create_question("x")
        result = edit.edit(q.id, text="", tracker=offline_tracker)
        assert result.success is False
        assert offline_tracker.question_store.get(q.id).text == "x"

    def test_edit_missing(self, offline_tracker) -> None:
        result = edit.edit("missing", text="y", tracker=offline_tracker)
        assert result.success is False
        assert "not found" in result.error


class TestShowCommand:
    def test_show(self, offline_tracker) -> None:
        q = offline_tracker.create_question("Shown")
        result = show.show(q.id[:6], tracker=offline_tracker)
        assert result.success is True
        assert result.question == q

    def test_show_missing(self, offline_tracker) -> None:
        result = show.show("nope", tracker=offline_tracker)
        assert result.success is False
        assert result.question is None


class TestListCommand:
    """Tests for list_cmd.list_questions()."""

    def test_list_all(self, offline_tracker) -> None:
        offline_tracker.create_question("One", category="NLP")
        offline_tracker.create_question("Two", category="SFT")

        result = list_cmd.list_questions(tracker=offline_tracker)

        assert result.success is True
        assert result.total == 2
        assert {q.text for q in result.questions} == {"One", "Two"}
        assert result.category == "All"

    def test_list_filters(self, offline_tracker) -> None:
        offline_tracker.create_question("Attention heads", category="NLP", company_tag="Acme")
        offline_tracker.create_question("Policy gradients", category="Reinforcement Learning")
        offline_tracker.create_question("Tokenizers", category="NLP")

        by_category = list_cmd.list_questions(category="NLP", tracker=offline_tracker)
        assert len(by_category.questions) == 2
        assert by_category.total == 3

        by_company = list_cmd.list_questions(search="acme", tracker=offline_tracker)
        assert [q.text for q in by_company.questions] == ["Attention heads"]

        today = list_cmd.list_questions(date_filter="today", tracker=offline_tracker)
        assert len(today.questions) == 3

    def test_list_invalid_date(self, offline_tracker) -> None:
        result = list_cmd.list_questions(date_filter="fortnight", tracker=offline_tracker)
        assert result.success is False
        assert result.error is not None

    def test_list_empty(self, offline_tracker) -> None:
        result = list_cmd.list_questions(tracker=offline_tracker)
        assert result.success is True
        assert result.questions == []
        assert result.total == 0


class TestDeleteCommand:
    """Tests for delete.delete()."""

    def test_delete(self, offline_tracker) -> None:
        q = offline_tracker.create_question("Gone soon")

        result = delete.delete(q.id, tracker=offline_tracker)

        assert result.success is True
        assert result.question_id == q.id
        assert result.text == "Gone soon"
        assert offline_tracker.question_store.get(q.id) is None

    def test_delete_confirmed(self, offline_tracker) -> None:
        q = offline_tracker.create_question("Gone soon")
        requests = []

        def confirm(request: ConfirmRequest) -> bool:
            requests.append(request)
            return True

        result = delete.delete(q.id, on_confirm=confirm, tracker=offline_tracker)

        assert result.success is True
        assert requests[0].details == "Gone soon"

    def test_delete_cancelled(self, offline_tracker) -> None:
        q = offline_tracker.create_question("Keep me")

        result = delete.delete(q.id, on_confirm=lambda request: False, tracker=offline_tracker)

        assert result.success is False
        assert result.error == "Cancelled."
        assert offline_tracker.question_store.get(q.id) is not None

    def test_delete_missing(self, offline_tracker) -> None:
        result = delete.delete("missing", tracker=offline_tracker)
        assert result.success is False
        assert result.question_id == "missing"
        assert "not found" in result.error
