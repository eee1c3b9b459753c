"""Collection Quiz CLI - Main entry point.

This module provides the command-line interface for the Collection Quiz project.
"""

import json
from pathlib import Path
from typing import NoReturn

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from collection_quiz.errors import QuizError
from collection_quiz.logging_setup import configure_logging
from collection_quiz.quiz import (
    get_even_numbers,
    get_family_statistic,
    get_letter_statistic,
    get_squares,
)
from collection_quiz.schemas import FamilyRecord

app = typer.Typer(
    name="quizstat",
    help="Collection Quiz - Number sequences, family and letter statistics",
    add_completion=False,
)
console = Console()

families_adapter = TypeAdapter(list[FamilyRecord])


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None, "--log-level", help="Log level (default: QUIZ_LOG_LEVEL or WARNING)"
    ),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(log_level.upper() if log_level else None)


def _fail(error: Exception) -> NoReturn:
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    raise typer.Exit(1)


def _print_numbers(title: str, numbers: list[int]) -> None:
    if not numbers:
        console.print(f"[yellow]{title}: no numbers.[/yellow]")
        return

    console.print(f"[bold cyan]{title}:[/bold cyan] " + ", ".join(str(n) for n in numbers))


@app.command()
def evens(
    limit: int = typer.Argument(..., help="Upper limit (exclusive)"),
) -> None:
    """Print all even numbers between 1 and LIMIT."""
    try:
        numbers = get_even_numbers(limit)
    except QuizError as e:
        _fail(e)

    _print_numbers("Even numbers", numbers)


@app.command()
def squares(
    limit: int = typer.Argument(..., help="Upper limit (exclusive)"),
    bits: int | None = typer.Option(
        None, "--bits", "-b", help="Width of the signed integer type (default: QUIZ_INTEGER_BITS)"
    ),
) -> None:
    """Print the squares of the multiples of 7 below LIMIT, descending."""
    try:
        numbers = get_squares(limit, integer_bits=bits)
    except QuizError as e:
        _fail(e)

    _print_numbers("Squares", numbers)


@app.command()
def families(
    path: Path = typer.Argument(
        ..., help="JSON file containing a list of families", exists=True, dir_okay=False
    ),
) -> None:
    """Print member count and average age for each family in a JSON file.

    Expected format: [{"id": 1, "persons": [{"age": 10}, {"age": 20}]}]
    """
    try:
        records = families_adapter.validate_python(json.loads(path.read_text(encoding="utf-8")))
    except (json.JSONDecodeError, ValidationError) as e:
        console.print(f"[red]Invalid family file {path}:[/red]\n{escape(str(e))}")
        raise typer.Exit(1) from e

    summaries = get_family_statistic(records)

    if not summaries:
        console.print("[yellow]No families found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold cyan", title="Family Statistic")
    table.add_column("Family", style="dim")
    table.add_column("Members", justify="right")
    table.add_column("Average Age", justify="right")

    for summary in summaries:
        table.add_row(
            str(summary.family_id),
            str(summary.number_of_family_members),
            str(summary.average_age),
        )

    console.print(table)


@app.command()
def letters(
    text: str = typer.Argument(..., help="Text to analyze"),
) -> None:
    """Print how often each letter A-Z occurs in TEXT (case-insensitive)."""
    statistic = get_letter_statistic(text)

    if not statistic:
        console.print("[yellow]No letters found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold cyan", title="Letter Statistic")
    table.add_column("Letter", style="dim")
    table.add_column("Occurrences", justify="right")

    for entry in statistic:
        table.add_row(entry.letter, str(entry.occurrences))

    console.print(table)


@app.command()
def version() -> None:
    """Display version information."""
    from collection_quiz import __version__

    console.print(f"[bold cyan]Collection Quiz[/bold cyan] version {__version__}")


if __name__ == "__main__":
    app()
