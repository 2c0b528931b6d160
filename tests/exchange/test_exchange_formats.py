# tests/exchange/test_exchange_formats.py
"""Tests for JSON, xlsx and Markdown exchange formats."""

import json
import os

import pytest
from openpyxl import Workbook, load_workbook

from prepdeck.exceptions import InvalidFormat
from prepdeck.exchange import (
    EXPORT_EXTENSIONS,
    export_questions,
    format_from_path,
    read_import_file,
    render_markdown,
)
from prepdeck.exchange.spreadsheet import COLUMNS, SHEET_TITLE
from prepdeck.models import Source


@pytest.fixture
def questions(make_question):
    return [
        make_question(
            "Explain KV caching",
            answer="Reuse keys and values.\n\nSaves compute.",
            category="NLP",
            company_tag="Acme",
            is_ai_generated=True,
            sources=[
                Source(uri="https://a.example", title="A"),
                Source(uri="https://b.example"),
            ],
            created_at=1_700_000_000_000,
            updated_at=1_700_000_500_000,
        ),
        make_question("Reverse a linked list", category="Algorithm"),
        make_question("What is dropout?", category="NLP", answer="Regularization."),
    ]


class TestFormatFromPath:
    def test_known_extensions(self):
        assert format_from_path("out.json") == "json"
        assert format_from_path("OUT.XLSX") == "xlsx"
        assert format_from_path("notes.md") == "markdown"
        assert format_from_path("notes.markdown") == "markdown"

    def test_unknown_extension(self):
        with pytest.raises(InvalidFormat):
            format_from_path("questions.csv")

    def test_extensions_cover_formats(self):
        for fmt, ext in EXPORT_EXTENSIONS.items():
            assert format_from_path(f"file{ext}") == fmt


class TestJsonExport:
    def test_export_records(self, temp_dir, questions):
        path = export_questions(questions, os.path.join(temp_dir, "out.json"))

        with open(path, encoding="utf-8") as f:
            records = json.load(f)
        assert [r["id"] for r in records] == [q.id for q in questions]
        assert records[0]["companyTag"] == "Acme"
        assert records[0]["isAiGenerated"] is True
        assert records[0]["sources"][0] == {"uri": "https://a.example", "title": "A"}

    def test_export_creates_parent(self, temp_dir, questions):
        path = export_questions(questions, os.path.join(temp_dir, "nested", "dir", "out.json"))
        assert path.exists()

    def test_import_round_trip(self, temp_dir, questions):
        path = export_questions(questions, os.path.join(temp_dir, "out.json"))
        records = read_import_file(path)
        assert records == [q.to_record() for q in questions]

    def test_non_ascii_kept(self, temp_dir, make_question):
        path = export_questions([make_question("什么是注意力?")], os.path.join(temp_dir, "q.json"))
        assert "什么是注意力?" in path.read_text(encoding="utf-8")


class TestJsonImport:
    def test_invalid_json(self, temp_dir):
        path = os.path.join(temp_dir, "bad.json")
        with open(path, "w", encoding="utf-8") as f:
            f.write("{not json")
        with pytest.raises(InvalidFormat):
            read_import_file(path)

    def test_not_an_array(self, temp_dir):
        path = os.path.join(temp_dir, "obj.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump({"id": "1", "text": "x"}, f)
        with pytest.raises(InvalidFormat, match="JSON array"):
            read_import_file(path)

    def test_not_utf8(self, temp_dir):
        path = os.path.join(temp_dir, "latin.json")
        with open(path, "wb") as f:
            f.write(b"\xff\xfe[\x00]")
        with pytest.raises(InvalidFormat, match="UTF-8"):
            read_import_file(path)

    def test_directory_named_json(self, temp_dir):
        path = os.path.join(temp_dir, "folder.json")
        os.mkdir(path)
        with pytest.raises(InvalidFormat, match="Could not read"):
            read_import_file(path)

    def test_unsupported_type(self, temp_dir):
        path = os.path.join(temp_dir, "questions.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write("[]")
        with pytest.raises(InvalidFormat):
            read_import_file(path)


class TestSpreadsheet:
    def test_export_layout(self, temp_dir, questions):
        path = export_questions(questions, os.path.join(temp_dir, "out.xlsx"))

        wb = load_workbook(path)
        ws = wb.active
        assert ws.title == SHEET_TITLE
        assert [c.value for c in ws[1]] == COLUMNS
        assert ws["A1"].font.bold
        assert ws.freeze_panes == "A2"
        assert ws.max_row == len(questions) + 1

        sources_col = COLUMNS.index("sources") + 1
        assert ws.cell(row=2, column=sources_col).value == "https://a.example\nhttps://b.example"

    def test_round_trip_fields(self, temp_dir, questions):
        path = export_questions(questions, os.path.join(temp_dir, "out.xlsx"))
        records = read_import_file(path)

        assert len(records) == 3
        first = records[0]
        assert first["id"] == questions[0].id
        assert first["text"] == "Explain KV caching"
        assert first["answer"] == "Reuse keys and values.\n\nSaves compute."
        assert first["category"] == "NLP"
        assert first["companyTag"] == "Acme"
        assert first["createdAt"] == 1_700_000_000_000
        assert first["updatedAt"] == 1_700_000_500_000
        assert first["isAiGenerated"] is True
        assert first["sources"] == [
            {"uri": "https://a.example", "title": None},
            {"uri": "https://b.example", "title": None},
        ]
        assert records[1].get("sources", []) == []

    def test_import_hand_made_sheet(self, temp_dir):
        wb = Workbook()
        ws = wb.active
        ws.append(["text", "category", "isAiGenerated", "createdAt", "extra"])
        ws.append(["From a sheet", "NLP", "yes", "12345", "kept"])
        ws.append([None, None, None, None, None])
        ws.append(["Second", None, 0, 2.0, None])
        path = os.path.join(temp_dir, "manual.xlsx")
        wb.save(path)

        records = read_import_file(path)

        assert records == [
            {
                "text": "From a sheet",
                "category": "NLP",
                "isAiGenerated": True,
                "createdAt": 12345,
                "extra": "kept",
            },
            {"text": "Second", "isAiGenerated": False, "createdAt": 2},
        ]

    def test_empty_workbook(self, temp_dir):
        path = os.path.join(temp_dir, "empty.xlsx")
        Workbook().save(path)
        assert read_import_file(path) == []

    def test_not_a_workbook(self, temp_dir):
        path = os.path.join(temp_dir, "fake.xlsx")
        with open(path, "w", encoding="utf-8") as f:
            f.write("not a zip file")
        with pytest.raises(InvalidFormat):
            read_import_file(path)


class TestMarkdown:
    def test_grouped_by_category(self, questions):
        text = render_markdown(questions)

        assert text.startswith("# Interview Questions\n")
        assert "## NLP (2)" in text
        assert "## Algorithm (1)" in text
        assert text.index("## NLP (2)") < text.index("## Algorithm (1)")
        assert text.index("Explain KV caching") < text.index("What is dropout?")

    def test_question_details(self, questions):
        text = render_markdown(questions)

        assert "### Explain KV caching" in text
        assert "Company: Acme" in text
        assert "AI generated" in text
        assert "> Reuse keys and values.\n>\n> Saves compute." in text
        assert "- [A](https://a.example)" in text
        assert "- [https://b.example](https://b.example)" in text

    def test_unanswered(self, questions):
        assert "> _No answer yet._" in render_markdown(questions)

    def test_custom_title_and_empty(self):
        assert render_markdown([], title="Prep") == "# Prep\n"

    def test_export_file(self, temp_dir, questions):
        path = export_questions(questions, os.path.join(temp_dir, "out.txt"), fmt="markdown")
        assert path.read_text(encoding="utf-8").startswith("# Interview Questions")

    def test_markdown_not_importable(self, temp_dir, questions):
        path = export_questions(questions, os.path.join(temp_dir, "out.md"))
        with pytest.raises(InvalidFormat):
            read_import_file(path)
