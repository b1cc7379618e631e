"""Rich terminal output formatters."""

from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from conference.state.inbox import InboxEntry

RULE = "=" * 58


def format_success(console: Console, message: str) -> None:
    """Display success message in green."""
    console.print(f"[green]{escape(message)}[/green]")


def format_error(console: Console, message: str, hint: str | None = None) -> None:
    """Display error message in red with optional hint."""
    console.print(f"[red]Error:[/red] {escape(message)}")
    if hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(hint)}")


def format_warning(console: Console, message: str) -> None:
    """Display warning message in yellow."""
    console.print(f"[yellow]Warning:[/yellow] {escape(message)}")


def format_table(
    console: Console,
    title: str,
    columns: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> None:
    """Display data as a formatted table."""
    table = Table(title=title)
    for col in columns:
        table.add_column(col)
    for row in rows:
        table.add_row(*row)
    console.print(table)


def format_key_value(console: Console, data: dict[str, Any]) -> None:
    """Display key-value pairs."""
    max_key_len = max(len(k) for k in data.keys()) if data else 0
    for key, value in data.items():
        console.print(f"[cyan]{key.ljust(max_key_len)}[/cyan]: {escape(str(value))}")


def indent_block(text: str, level: int) -> str:
    """Prefix every line of ``text`` with ``level`` tabs."""
    if level <= 0:
        return text
    prefix = "\t" * level
    return "".join(prefix + line for line in text.splitlines(keepends=True))


def format_entries(
    console: Console, title: str, footer: str, entries: Sequence[InboxEntry],
) -> None:
    """Display a numbered message listing, indenting replies by nesting."""
    console.print(title, markup=False, highlight=False)
    console.print(RULE, markup=False, highlight=False)
    for entry in entries:
        body = indent_block(entry.text, entry.nesting)
        console.print(f"{entry.position}: {body}", end="", markup=False, highlight=False)
    console.print(RULE, markup=False, highlight=False)
    console.print(footer, markup=False, highlight=False)
