"""
Access Guide: Terminal Reader for Audit Guidance.

A Rich terminal interface over the guidance engine.

Commands:
- accessguide show      - Show guidance for a question
- accessguide search    - Keyword search
- accessguide module    - List entries in a module
- accessguide category  - List entries in a category
- accessguide related   - Show related questions and whether they resolve
- accessguide stats     - Content statistics
- accessguide browse    - Open guidance and follow related links interactively
"""
from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from ..config import get_settings
from ..content.loader import ContentLoadError, load_entries
from ..content.models import GuidanceEntry
from ..content.related import ResolvedRelated
from ..content.relevance import ordered_tips, select_examples
from ..content.search import SearchIndex
from ..content.store import ContentStore, DuplicateEntryError
from .analytics import LoggingAnalyticsSink
from .session import SessionController
from .timers import ManualTimers

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="accessguide",
    help="Access Guide: accessibility self-assessment guidance",
    no_args_is_help=True,
)
console = Console()


def content_dir_option():
    return typer.Option(
        None,
        "--content-dir", "-c",
        help="Directory with guidance JSON files (default: bundled content)",
    )


def audience_option():
    return typer.Option(
        None,
        "--audience", "-a",
        help="Audience tag for examples (repeatable, e.g. -a retail -a accommodation)",
    )


# =============================================================================
# Styling
# =============================================================================

STYLES = {
    "title": "bold cyan",
    "heading": "bold",
    "dim": "dim",
    "warning": "bold yellow",
    "error": "bold red",
    "impact": {
        "quick-win": "green",
        "moderate": "yellow",
        "significant": "magenta",
    },
}


def style_impact(impact: str) -> str:
    """Get styled impact label."""
    color = STYLES["impact"].get(impact, "white")
    return f"[{color}]{impact}[/{color}]"


# =============================================================================
# Loading
# =============================================================================


def load_content(content_dir: Path | None) -> ContentStore:
    """Load and build the store, exiting with a message on failure."""
    settings = get_settings()
    try:
        entries = load_entries(content_dir or settings.content_dir, strict=settings.strict_content)
        return ContentStore.build(entries)
    except (ContentLoadError, DuplicateEntryError) as e:
        console.print(f"[{STYLES['error']}]Could not load guidance content: {escape(str(e))}[/{STYLES['error']}]")
        raise typer.Exit(1) from e


def resolve_audience(audience: Optional[list[str]]) -> frozenset[str]:
    """CLI audience tags, falling back to the configured default."""
    if audience:
        return frozenset(tag.strip().lower() for tag in audience if tag.strip())
    return get_settings().get_audience_tags()


# =============================================================================
# Display Helpers
# =============================================================================


def render_entry(
    entry: GuidanceEntry,
    audience: Iterable[str],
    related: list[ResolvedRelated],
) -> Panel:
    """Build the panel for one guidance entry."""
    parts: list = [Text(entry.summary), Text("")]

    why = entry.why_it_matters
    parts.append(Text("Why it matters", style=STYLES["heading"]))
    parts.append(Text(why.text))
    if why.statistic:
        parts.append(Text(f"  {why.statistic.value} {why.statistic.context}", style="cyan"))
    if why.quote:
        parts.append(Text(f'  "{why.quote.text}" ({why.quote.attribution})', style="italic"))

    tips = ordered_tips(entry)
    if tips:
        parts.append(Text(""))
        parts.append(Text("Quick tips", style=STYLES["heading"]))
        for tip in tips:
            parts.append(Text(f"  - {tip.text}"))
            if tip.detail:
                parts.append(Text(f"    {tip.detail}", style=STYLES["dim"]))

    if entry.how_to_check:
        check = entry.how_to_check
        parts.append(Text(""))
        parts.append(Text(check.title, style=STYLES["heading"]))
        for number, step in enumerate(check.steps, start=1):
            parts.append(Text(f"  {number}. {step.text}"))
            if step.measurement:
                m = step.measurement
                parts.append(Text(f"     {m.target}: {m.acceptable} ({m.unit})", style=STYLES["dim"]))
        if check.tools:
            parts.append(Text(f"  Tools: {', '.join(check.tools)}", style=STYLES["dim"]))
        if check.estimated_time:
            parts.append(Text(f"  Time: {check.estimated_time}", style=STYLES["dim"]))

    if entry.standards_reference:
        ref = entry.standards_reference
        section = f" {ref.primary.section}" if ref.primary.section else ""
        parts.append(Text(""))
        parts.append(Text(f"Standards: {ref.primary.code}{section}", style=STYLES["heading"]))
        parts.append(Text(ref.plain_english))
        for other in ref.related:
            parts.append(Text(f"  Also: {other.code} - {other.relevance}", style=STYLES["dim"]))
        if ref.compliance_note:
            parts.append(Text(f"  Note: {ref.compliance_note}", style=STYLES["warning"]))

    examples = select_examples(entry, audience)
    if examples:
        parts.append(Text(""))
        parts.append(Text("Examples", style=STYLES["heading"]))
        for example in examples:
            label = example.audience_label or example.audience
            parts.append(Text(f"  [{label}] {example.scenario}"))
            parts.append(Text(f"    {example.solution}"))
            if example.outcome:
                parts.append(Text(f"    Outcome: {example.outcome}", style=STYLES["dim"]))

    if entry.solutions:
        parts.append(Text(""))
        parts.append(Text("Solutions", style=STYLES["heading"]))
        for solution in entry.solutions:
            parts.append(
                Text.from_markup(
                    f"  {escape(solution.title)} ({solution.resource_level}, {escape(solution.cost_range)}, "
                    f"{style_impact(solution.impact)})"
                )
            )

    if related:
        parts.append(Text(""))
        parts.append(Text("Related questions", style=STYLES["heading"]))
        for number, item in enumerate(related, start=1):
            if item.available:
                parts.append(Text(f"  {number}. {item.ref.display_text} [{item.ref.question_id}]"))
            else:
                parts.append(
                    Text(f"  {number}. {item.ref.display_text} (unavailable)", style=STYLES["dim"])
                )

    return Panel(
        Group(*parts),
        title=f"[{STYLES['title']}]{escape(entry.title)}[/{STYLES['title']}]",
        subtitle=escape(f"{entry.question_id}  |  Module {entry.module_code}"),
        title_align="left",
        border_style="cyan",
        padding=(1, 2),
    )


def entry_table(entries: Iterable[GuidanceEntry], title: str) -> Table:
    """Summarise entries as a table."""
    table = Table(title=escape(title))
    table.add_column("Question")
    table.add_column("Module")
    table.add_column("Title")
    for entry in entries:
        table.add_row(escape(entry.question_id), escape(entry.module_code), escape(entry.title))
    return table


# =============================================================================
# Commands
# =============================================================================


@app.command()
def show(
    question_id: str = typer.Argument(..., help="Question id, e.g. 2.1-F-1"),
    audience: Optional[list[str]] = audience_option(),
    content_dir: Optional[Path] = content_dir_option(),
) -> None:
    """Show guidance for one question."""
    store = load_content(content_dir)
    controller = SessionController(store, timers=ManualTimers())
    if not controller.open_entry(question_id):
        console.print(f"[{STYLES['warning']}]No guidance found for {escape(question_id)}[/{STYLES['warning']}]")
        raise typer.Exit(1)

    console.print(
        render_entry(controller.active_entry, resolve_audience(audience), controller.related_entries())
    )


@app.command()
def search(
    query: str = typer.Argument(..., help="Text to find in titles, summaries, and keywords"),
    limit: int = typer.Option(20, "--limit", "-l", help="Maximum results"),
    content_dir: Optional[Path] = content_dir_option(),
) -> None:
    """Search guidance by keyword."""
    store = load_content(content_dir)
    results = SearchIndex(store).search(query, max_results=limit)
    if not results:
        console.print(f"[{STYLES['dim']}]No guidance matches '{escape(query)}'[/{STYLES['dim']}]")
        return
    console.print(entry_table(results, f"Results for '{query}'"))


@app.command()
def module(
    module_code: str = typer.Argument(..., help="Module code, e.g. 3.2"),
    content_dir: Optional[Path] = content_dir_option(),
) -> None:
    """List guidance entries in a module."""
    store = load_content(content_dir)
    entries = store.get_by_module(module_code)
    if not entries:
        console.print(f"[{STYLES['dim']}]No guidance in module {escape(module_code)}[/{STYLES['dim']}]")
        return
    console.print(entry_table(entries, f"Module {module_code}"))


@app.command()
def category(
    name: str = typer.Argument(..., help="Category, e.g. physical-access"),
    content_dir: Optional[Path] = content_dir_option(),
) -> None:
    """List guidance entries in a category."""
    store = load_content(content_dir)
    entries = store.get_by_category(name)
    if not entries:
        console.print(f"[{STYLES['dim']}]No guidance in category {escape(name)}[/{STYLES['dim']}]")
        return
    console.print(entry_table(entries, name))


@app.command()
def related(
    question_id: str = typer.Argument(..., help="Question id"),
    content_dir: Optional[Path] = content_dir_option(),
) -> None:
    """Show related questions and whether each one resolves."""
    store = load_content(content_dir)
    controller = SessionController(store, timers=ManualTimers())
    if not controller.open_entry(question_id):
        console.print(f"[{STYLES['warning']}]No guidance found for {escape(question_id)}[/{STYLES['warning']}]")
        raise typer.Exit(1)

    table = Table(title=escape(f"Related to {question_id}"))
    table.add_column("Question")
    table.add_column("Relationship")
    table.add_column("Status")
    for item in controller.related_entries():
        status = "[green]available[/green]" if item.available else "[yellow]unavailable[/yellow]"
        table.add_row(escape(item.ref.question_id), escape(item.ref.relationship), status)
    console.print(table)


@app.command()
def stats(
    content_dir: Optional[Path] = content_dir_option(),
) -> None:
    """Show content statistics."""
    store = load_content(content_dir)
    summary = store.stats()

    console.print(f"\n[bold]Entries:[/bold] {summary['total_entries']}")
    console.print(f"[bold]Resolvable ids:[/bold] {summary['resolvable_ids']}\n")

    table = Table(title="By module")
    table.add_column("Module")
    table.add_column("Entries", justify="right")
    for code, count in summary["by_module"].items():
        table.add_row(escape(code), str(count))
    console.print(table)

    table = Table(title="By category")
    table.add_column("Category")
    table.add_column("Entries", justify="right")
    for name, count in summary["by_category"].items():
        table.add_row(escape(name), str(count))
    console.print(table)


@app.command()
def browse(
    question_id: str = typer.Argument(..., help="Question id to start from"),
    audience: Optional[list[str]] = audience_option(),
    content_dir: Optional[Path] = content_dir_option(),
) -> None:
    """Open guidance and follow related questions interactively."""
    store = load_content(content_dir)
    tags = resolve_audience(audience)
    timers = ManualTimers()
    controller = SessionController.from_settings(
        store, timers=timers, analytics=LoggingAnalyticsSink()
    )

    if not controller.open_entry(question_id):
        console.print(f"[{STYLES['warning']}]No guidance found for {escape(question_id)}[/{STYLES['warning']}]")
        raise typer.Exit(1)

    while controller.is_open:
        links = controller.related_entries()
        console.print(render_entry(controller.active_entry, tags, links))

        choice = Prompt.ask("Related question number to follow, or q to close", default="q").strip()
        if choice.lower() in {"q", "quit", "exit"}:
            controller.dismiss()
            break
        if not choice.isdigit() or not 1 <= int(choice) <= len(links):
            console.print(f"[{STYLES['warning']}]Pick a number from the list[/{STYLES['warning']}]")
            continue

        target = links[int(choice) - 1]
        if not target.available:
            console.print(f"[{STYLES['warning']}]That question has no guidance yet[/{STYLES['warning']}]")
            continue

        controller.navigate_to_related(target.ref.question_id)
        timers.run_all()

    timers.run_all()
    console.print(f"[{STYLES['dim']}]Guidance closed[/{STYLES['dim']}]")


# =============================================================================
# Entry Point
# =============================================================================


def main() -> None:
    """CLI entry point."""
    # Configure logging
    logger.remove()
    logger.add(
        sys.stderr,
        level=get_settings().log_level.upper(),
        format="<level>{message}</level>",
    )

    app()


if __name__ == "__main__":
    main()
