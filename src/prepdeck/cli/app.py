# src/prepdeck/cli/app.py
"""Command-line interface for prepdeck.

This module provides a thin Typer wrapper around the commands layer.
Each command:
1. Parses args (via Typer)
2. Calls commands module functions
3. Renders results with Rich
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import NoReturn

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.markdown import Markdown
    from rich.markup import escape
    from rich.panel import Panel
    from rich.table import Table
except ImportError as e:
    raise SystemExit(
        "CLI requires additional dependencies.\nInstall with: pip install prepdeck[cli]"
    ) from e

from prepdeck import __version__
from prepdeck.commands import (
    add,
    categories,
    chat,
    config_cmd,
    delete,
    edit,
    export,
    generate,
    import_cmd,
    list_cmd,
    seed,
    show,
    status,
    sync,
)
from prepdeck.commands.base import CategoriesResult, CommandResult, ConfirmRequest
from prepdeck.config import load_env_file
from prepdeck.models import OTHER_CATEGORY, Question, Source

app = typer.Typer(
    name="prepdeck",
    help="prepdeck - Track interview questions and answers, with AI-generated drafts.",
    no_args_is_help=True,
)
categories_app = typer.Typer(help="Manage category labels", no_args_is_help=True)
app.add_typer(categories_app, name="categories")
console = Console()
err_console = Console(stderr=True)

DATA_DIR_OPTION = typer.Option(
    None,
    "--data-dir",
    "-d",
    help="Data directory (default: from settings)",
)
CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Path to config file",
)
PLAIN_OPTION = typer.Option(
    False,
    "--plain",
    help="Plain output (no colors/formatting)",
)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"prepdeck {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Route library logging through Rich on stderr."""
    level_name = "DEBUG" if verbose else os.environ.get("PREPDECK_LOG_LEVEL", "WARNING")
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging.",
    ),
) -> None:
    """prepdeck - Interview question tracker."""
    load_env_file()
    setup_logging(verbose)


def _fail(result: CommandResult, plain: bool = False) -> NoReturn:
    """Print the error of a failed result and exit with code 1."""
    if plain:
        console.print(f"Error: {result.error}", markup=False)
    else:
        console.print(f"[red]Error: {escape(result.error or '')}[/red]")
    raise typer.Exit(1)


def _format_time(timestamp_ms: int) -> str:
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%Y-%m-%d %H:%M")


def _preview(text: str, width: int = 70) -> str:
    flat = " ".join(text.split())
    if len(flat) > width:
        return flat[: width - 3] + "..."
    return flat


def _print_sources(sources: list[Source], plain: bool) -> None:
    linked = [s for s in sources if s.uri]
    if not linked:
        return
    if plain:
        console.print("Sources:")
        for i, source in enumerate(linked, 1):
            console.print(f"  [{i}] {source.title or source.uri} {source.uri}", markup=False)
        return
    console.print("[bold]Sources:[/bold]")
    for i, source in enumerate(linked, 1):
        title = source.title or source.uri
        console.print(f"  [{i}] [link={source.uri}][cyan]{title}[/cyan][/link]")


def _render_question(question: Question, plain: bool) -> None:
    """Render one question with its answer and citations."""
    flags = []
    if question.company_tag:
        flags.append(question.company_tag)
    if question.is_ai_generated:
        flags.append("AI")

    if plain:
        console.print(f"ID: {question.id}")
        console.print(f"Question: {question.text}", markup=False)
        console.print(f"Category: {question.category}", markup=False)
        if question.company_tag:
            console.print(f"Company: {question.company_tag}", markup=False)
        console.print(f"Created: {_format_time(question.created_at)}")
        console.print(f"Updated: {_format_time(question.updated_at)}")
        if question.is_ai_generated:
            console.print("AI generated: yes")
        console.print()
        console.print(question.answer or "(no answer yet)", markup=False)
        console.print()
        _print_sources(question.sources, plain=True)
        return

    subtitle = " | ".join(
        [question.category, *flags, f"updated {_format_time(question.updated_at)}"]
    )
    body = Markdown(question.answer) if question.answer.strip() else "[dim]No answer yet.[/dim]"
    console.print(
        Panel(
            body,
            title=f"[bold]{escape(question.text)}[/bold]",
            subtitle=f"[dim]{question.id[:8]} | {subtitle}[/dim]",
            border_style="green" if question.answer.strip() else "yellow",
        )
    )
    _print_sources(question.sources, plain=False)


@app.command(name="add")
def add_cmd(
    text: str = typer.Argument(..., help="Question text"),
    answer: str = typer.Option("", "--answer", "-a", help="Answer text"),
    category: str = typer.Option(OTHER_CATEGORY, "--category", "-k", help="Category label"),
    company: str = typer.Option("", "--company", "-t", help="Company tag"),
    generate_answer: bool = typer.Option(
        False,
        "--generate",
        "-g",
        help="Generate the answer with the configured LLM",
    ),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Record a new interview question."""
    if generate_answer and not plain:
        with console.status("Generating answer..."):
            result = add.add(
                text=text,
                category=category,
                company_tag=company,
                generate=True,
                data_dir=data_dir,
                config_path=config_file,
            )
    else:
        result = add.add(
            text=text,
            answer=answer,
            category=category,
            company_tag=company,
            generate=generate_answer,
            data_dir=data_dir,
            config_path=config_file,
        )

    if not result.success or result.question is None:
        _fail(result, plain)

    question = result.question
    if plain:
        console.print(f"Added {question.id} ({question.category})", markup=False)
    else:
        console.print(
            f"[green]Added[/green] [cyan]{question.id[:8]}[/cyan] in [bold]{question.category}[/bold]"
        )
        if generate_answer:
            _render_question(question, plain=False)


@app.command(name="edit")
def edit_cmd(
    question_id: str = typer.Argument(..., help="Question id or unique id prefix"),
    text: str = typer.Option(None, "--text", help="New question text"),
    answer: str = typer.Option(None, "--answer", "-a", help="New answer text"),
    category: str = typer.Option(None, "--category", "-k", help="New category label"),
    company: str = typer.Option(None, "--company", "-t", help="New company tag"),
    clear_sources: bool = typer.Option(
        False,
        "--clear-sources",
        help="Remove stored web citations",
    ),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Edit a stored question."""
    result = edit.edit(
        question_id=question_id,
        text=text,
        answer=answer,
        category=category,
        company_tag=company,
        clear_sources=clear_sources,
        data_dir=data_dir,
        config_path=config_file,
    )
    if not result.success or result.question is None:
        _fail(result, plain)

    if plain:
        console.print(f"Updated {result.question.id}")
    else:
        console.print(f"[green]Updated[/green] [cyan]{result.question.id[:8]}[/cyan]")


@app.command(name="show")
def show_cmd(
    question_id: str = typer.Argument(..., help="Question id or unique id prefix"),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Show a question with its answer and sources."""
    result = show.show(question_id=question_id, data_dir=data_dir, config_path=config_file)
    if not result.success or result.question is None:
        _fail(result, plain)
    _render_question(result.question, plain)


@app.command(name="list")
def list_questions_cmd(
    category: str = typer.Option("All", "--category", "-k", help="Only this category"),
    search: str = typer.Option("", "--search", "-s", help="Text in question or company tag"),
    date_filter: str = typer.Option(
        None,
        "--date",
        help="today, week, month, year, or a YYYY-MM-DD day",
    ),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """List questions, newest first."""
    result = list_cmd.list_questions(
        category=category,
        search=search,
        date_filter=date_filter,
        data_dir=data_dir,
        config_path=config_file,
    )
    if not result.success:
        _fail(result, plain)

    if not result.questions:
        message = "No questions match." if result.total else "No questions yet."
        console.print(message if plain else f"[dim]{message}[/dim]")
        raise typer.Exit(0)

    if plain:
        console.print(f"Questions ({len(result.questions)} of {result.total}):")
        for q in result.questions:
            console.print(f"  {q.id}  [{q.category}]  {_preview(q.text)}", markup=False)
        return

    table = Table(title=f"Questions ({len(result.questions)} of {result.total})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Question")
    table.add_column("Category", style="magenta")
    table.add_column("Company", style="yellow")
    table.add_column("Updated", style="dim", no_wrap=True)
    table.add_column("AI", justify="center")
    for q in result.questions:
        table.add_row(
            q.id[:8],
            _preview(q.text),
            q.category,
            q.company_tag,
            _format_time(q.updated_at),
            "*" if q.is_ai_generated else "",
        )
    console.print(table)


@app.command(name="delete")
def delete_cmd(
    question_id: str = typer.Argument(..., help="Question id or unique id prefix"),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Skip confirmation prompt",
    ),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Delete a question."""

    def cli_confirm(request: ConfirmRequest) -> bool:
        """CLI confirmation callback using typer.confirm."""
        if request.details:
            if plain:
                console.print(request.details, markup=False)
            else:
                console.print(f"[yellow]{escape(request.details)}[/yellow]")
        return typer.confirm(request.message)

    on_confirm = None if force else cli_confirm

    result = delete.delete(
        question_id=question_id,
        data_dir=data_dir,
        config_path=config_file,
        on_confirm=on_confirm,
    )

    if not result.success:
        # Handle cancellation gracefully (exit 0, not error)
        if result.error == "Cancelled.":
            console.print("Cancelled.")
            raise typer.Exit(0)
        _fail(result, plain)

    if plain:
        console.print(f"Deleted {result.question_id}")
    else:
        console.print(f"[green]Deleted[/green] [cyan]{result.question_id[:8]}[/cyan]")


@app.command(name="import")
def import_cmd_handler(
    path: str = typer.Argument(..., help="JSON or xlsx file to import"),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Merge questions from a JSON or xlsx file (matching ids are replaced)."""
    result = import_cmd.import_file(path=path, data_dir=data_dir, config_path=config_file)
    if not result.success or result.summary is None:
        _fail(result, plain)

    summary = result.summary
    message = f"Imported {summary.merged} questions ({summary.total} total)"
    if plain:
        console.print(message)
        if summary.skipped:
            console.print(f"Skipped {summary.skipped} records without id or text")
    else:
        console.print(f"[green]{message}[/green]")
        if summary.skipped:
            console.print(f"[dim]Skipped {summary.skipped} records without id or text[/dim]")


@app.command(name="export")
def export_cmd(
    output: str = typer.Argument(None, help="Output file (.json, .xlsx or .md)"),
    fmt: str = typer.Option(
        None,
        "--format",
        "-F",
        help="json, xlsx or markdown (default: from the file extension)",
    ),
    category: str = typer.Option("All", "--category", "-k", help="Only this category"),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Export questions to JSON, a spreadsheet or Markdown."""
    if fmt == "md":
        fmt = "markdown"
    result = export.export(
        output=output,
        fmt=fmt,  # type: ignore[arg-type]
        category=category,
        data_dir=data_dir,
        config_path=config_file,
    )
    if not result.success:
        _fail(result, plain)

    message = f"Exported {result.count} questions to {result.path}"
    console.print(message if plain else f"[green]{message}[/green]")


@app.command(name="generate")
def generate_cmd(
    question_id: str = typer.Argument(..., help="Question id or unique id prefix"),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show the generated answer without saving it",
    ),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Generate an answer for a stored question with the configured LLM."""
    if plain:
        result = generate.generate(
            question_id=question_id,
            save=not dry_run,
            data_dir=data_dir,
            config_path=config_file,
        )
    else:
        with console.status("Generating answer..."):
            result = generate.generate(
                question_id=question_id,
                save=not dry_run,
                data_dir=data_dir,
                config_path=config_file,
            )

    if not result.success or result.question is None:
        _fail(result, plain)

    if result.saved:
        _render_question(result.question, plain)
        return

    if plain:
        console.print(f"Category: {result.category}", markup=False)
        console.print(result.answer, markup=False)
    else:
        console.print(
            Panel(
                Markdown(result.answer),
                title=f"[bold]{escape(result.question.text)}[/bold]",
                subtitle=f"[dim]{result.category} | not saved[/dim]",
                border_style="blue",
            )
        )
    _print_sources(result.sources, plain)


@app.command(name="chat")
def chat_cmd(
    question_id: str = typer.Argument(..., help="Question id or unique id prefix"),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Chat with the LLM to refine the answer of a question. Type /exit to leave."""
    result = chat.start_chat(question_id=question_id, data_dir=data_dir, config_path=config_file)
    if not result.success or result.session is None or result.question is None:
        _fail(result, plain)

    session = result.session
    if plain:
        console.print(f"Chatting about: {result.question.text}", markup=False)
    else:
        console.print(f"[bold]Chatting about:[/bold] {escape(result.question.text)}")
        console.print("[dim]Type /exit to leave.[/dim]")

    while True:
        try:
            message = typer.prompt("You", default="", show_default=False)
        except typer.Abort:
            break
        message = message.strip()
        if not message:
            continue
        if message in ("/exit", "/quit"):
            break

        if plain:
            reply = session.send(message)
            console.print(f"AI: {reply.text}", markup=False)
        else:
            with console.status("Thinking..."):
                reply = session.send(message)
            console.print(
                Panel(
                    Markdown(reply.text),
                    title="AI",
                    border_style="red" if reply.failed else "blue",
                )
            )
        _print_sources(reply.sources, plain)

    exchanges = len(session.history) // 2
    summary = f"Chat ended after {exchanges} exchange(s)."
    console.print(summary if plain else f"[dim]{summary}[/dim]")


@app.command(name="seed")
def seed_cmd(
    path: str = typer.Option(None, "--path", "-p", help="Seed file (default: from settings)"),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Merge even when questions already exist",
    ),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Load the project seed file into the store."""
    result = seed.seed(path=path, force=force, data_dir=data_dir, config_path=config_file)
    if not result.success:
        _fail(result, plain)

    if result.merged:
        message = f"Merged {result.merged} seed questions ({result.total} total)"
    else:
        message = "Store already has questions. Use --force to merge the seed anyway."
    console.print(message if plain else f"[green]{message}[/green]")


@app.command(name="sync")
def sync_cmd(
    directory: str = typer.Argument(..., help="Project directory to mirror into"),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Write the collection to <directory>/data/interview_questions.json."""
    result = sync.sync(directory=directory, data_dir=data_dir, config_path=config_file)
    if not result.success:
        _fail(result, plain)

    message = f"Mirrored {result.count} questions to {result.target_path}"
    console.print(message if plain else f"[green]{message}[/green]")


@app.command(name="status")
def status_cmd(
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Show collection statistics."""
    result = status.status(data_dir=data_dir, config_path=config_file)
    if not result.success:
        _fail(result, plain)

    if plain:
        console.print("Collection Status:")
        console.print(f"  Data directory: {result.data_dir}")
        console.print(f"  Questions: {result.total_questions}")
        console.print(f"  Answered: {result.answered}")
        console.print(f"  AI generated: {result.ai_generated}")
        console.print(f"  LLM: {result.llm_model or '(not set)'}")
        if result.sync_dir:
            console.print(f"  Sync directory: {result.sync_dir}")
        console.print()
        console.print("Questions by Category:")
        for entry in result.categories:
            console.print(f"  {entry.name}: {entry.question_count}", markup=False)
        return

    table = Table(title="Collection Status")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Data directory", result.data_dir)
    table.add_row("Questions", str(result.total_questions))
    table.add_row("Answered", str(result.answered))
    table.add_row("AI generated", str(result.ai_generated))
    table.add_row("LLM", result.llm_model or "(not set)")
    if result.sync_dir:
        table.add_row("Sync directory", result.sync_dir)
    console.print(table)

    console.print()
    detail_table = Table(title="Questions by Category")
    detail_table.add_column("Category", style="cyan")
    detail_table.add_column("Questions", justify="right", style="green")
    for entry in result.categories:
        detail_table.add_row(entry.name, str(entry.question_count))
    console.print(detail_table)


@app.command(name="config")
def config_cmd_handler(
    config_file: str = CONFIG_OPTION,
) -> None:
    """Show current configuration settings."""
    result = config_cmd.config(config_path=config_file)

    if not result.success:
        _fail(result)

    table = Table(title="prepdeck Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Source", style="dim")

    table.add_row("llm_model", result.llm_model or "(not set)", "")
    table.add_row("api_key", result.api_key, "")
    table.add_row("data_dir", result.data_dir, "")
    table.add_row("seed_path", result.seed_path, "")
    table.add_row("sync_dir", result.sync_dir or "(not set)", "")
    table.add_row("", "", "")
    for setting in result.settings:
        table.add_row(setting.name, setting.value, setting.source)

    console.print(table)

    for warning in result.warnings:
        console.print(f"[yellow]Warning: {warning}[/yellow]")
    if result.config_path:
        console.print(f"\n[dim]Config file: {result.config_path}[/dim]")
    else:
        console.print("\n[dim]No config file found. Using env vars / defaults.[/dim]")
    console.print("\n[dim]Precedence: env var > yaml settings > default[/dim]")


def _render_categories(result: CategoriesResult, plain: bool) -> None:
    if plain:
        for entry in result.categories:
            console.print(f"{entry.name} ({entry.question_count})", markup=False)
        return
    table = Table(title=f"Categories ({len(result.categories)})")
    table.add_column("Category", style="cyan")
    table.add_column("Questions", justify="right", style="green")
    for entry in result.categories:
        table.add_row(entry.name, str(entry.question_count))
    console.print(table)


@categories_app.command(name="list")
def categories_list_cmd(
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """List categories with question counts."""
    result = categories.list_categories(data_dir=data_dir, config_path=config_file)
    if not result.success:
        _fail(result, plain)
    _render_categories(result, plain)


@categories_app.command(name="add")
def categories_add_cmd(
    name: str = typer.Argument(..., help="New category label"),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Add a category."""
    result = categories.add_category(name, data_dir=data_dir, config_path=config_file)
    if not result.success:
        _fail(result, plain)
    message = f"Added category {name.strip()}"
    console.print(message if plain else f"[green]{message}[/green]")


@categories_app.command(name="rename")
def categories_rename_cmd(
    old: str = typer.Argument(..., help="Current label"),
    new: str = typer.Argument(..., help="New label"),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Rename a category and move its questions with it."""
    result = categories.rename_category(old, new, data_dir=data_dir, config_path=config_file)
    if not result.success:
        _fail(result, plain)
    message = f"Renamed {old} to {new.strip()} ({result.moved} questions updated)"
    console.print(message if plain else f"[green]{message}[/green]")


@categories_app.command(name="remove")
def categories_remove_cmd(
    name: str = typer.Argument(..., help="Label to remove"),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Remove a category. Its questions move to Other."""
    result = categories.remove_category(name, data_dir=data_dir, config_path=config_file)
    if not result.success:
        _fail(result, plain)
    message = f"Removed {name} ({result.moved} questions moved to {OTHER_CATEGORY})"
    console.print(message if plain else f"[green]{message}[/green]")


if __name__ == "__main__":
    app()
