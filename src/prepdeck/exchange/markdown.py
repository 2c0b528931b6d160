# src/prepdeck/exchange/markdown.py
"""Markdown export."""

from collections import defaultdict
from datetime import datetime

from prepdeck.models import Question


def _format_day(timestamp_ms: int) -> str:
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%Y-%m-%d")


def _render_question(question: Question) -> list[str]:
    lines = [f"### {question.text}", ""]

    meta = [f"Updated {_format_day(question.updated_at)}"]
    if question.company_tag:
        meta.insert(0, f"Company: {question.company_tag}")
    if question.is_ai_generated:
        meta.append("AI generated")
    lines.extend([f"*{' | '.join(meta)}*", ""])

    if question.answer.strip():
        lines.extend(f"> {line}" if line else ">" for line in question.answer.strip().splitlines())
    else:
        lines.append("> _No answer yet._")
    lines.append("")

    linked = [s for s in question.sources if s.uri]
    if linked:
        lines.append("**Sources**")
        lines.append("")
        for source in linked:
            lines.append(f"- [{source.title or source.uri}]({source.uri})")
        lines.append("")
    return lines


def render_markdown(questions: list[Question], title: str = "Interview Questions") -> str:
    """Render questions as Markdown, one section per category.

    Categories appear in order of first occurrence; questions keep their
    order within each category.
    """
    groups: dict[str, list[Question]] = defaultdict(list)
    for question in questions:
        groups[question.category].append(question)

    lines = [f"# {title}", ""]
    for category, members in groups.items():
        lines.extend([f"## {category} ({len(members)})", ""])
        for question in members:
            lines.extend(_render_question(question))
    return "\n".join(lines).rstrip() + "\n"
