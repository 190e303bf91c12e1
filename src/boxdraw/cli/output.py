"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from collections.abc import Iterable

from rich.console import Console
from rich.table import Table
from rich.text import Text

from boxdraw.core import Recipe
from boxdraw.domain import Command, Metrics, Point
from boxdraw.io import PathCall, format_number
from boxdraw.utils import DrawingStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]boxdraw[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_metrics(metrics: Metrics) -> None:
    """Print the metrics in use on one line."""
    console.print(
        f"  width {format_number(metrics.width)} {SYM_DOT} "
        f"stroke {format_number(metrics.stroke)} {SYM_DOT} "
        f"fat {format_number(metrics.fat)} {SYM_DOT} "
        f"median {format_number(metrics.median)}"
    )


def print_recipe_table(recipes: Iterable[Recipe]) -> None:
    """Print a table of recipes.

    Args:
        recipes: Recipes in display order
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Code")
    table.add_column("Char", justify="center")
    table.add_column("Name")
    table.add_column("Commands", justify="right")

    count = 0
    for recipe in recipes:
        table.add_row(recipe.label, recipe.char, recipe.name, str(len(recipe.commands)))
        count += 1

    console.print(table)
    console.print(f"\n  {count} recipes")


def _format_point(point: Point) -> str:
    return f"{format_number(point.x)} {format_number(point.y)}"


def print_recipe(recipe: Recipe, commands: list[Command]) -> None:
    """Print a recipe's templates next to the commands they resolve to."""
    line = Text(f"  {recipe.label} ")
    line.append(recipe.char, style="bold")
    line.append(f" {recipe.name}")
    console.print(line)

    for index, (template, command) in enumerate(zip(recipe.commands, commands), start=1):
        console.print(Text(f"  {index}. {template}"))
        console.print(Text(f"     {SYM_STEP} {command!r}"), style="dim")


def print_path_calls(calls: Iterable[PathCall]) -> None:
    """Print recorded canvas calls, one per line."""
    for name, points in calls:
        args = ", ".join(_format_point(point) for point in points)
        console.print(f"  {name} {args}".rstrip())


def print_summary(stats: DrawingStats) -> None:
    """Print drawing statistics."""
    console.print(f"\n[bold green]{SYM_OK} Drawn[/bold green]")
    console.print(
        f"  {stats.glyphs_drawn} glyphs {SYM_DOT} {stats.commands_executed} commands "
        f"{SYM_DOT} {stats.contours} contours"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    # Text keeps brackets in messages from being read as markup
    console.print(Text.assemble((f"\n{SYM_ERR} Error: ", "bold red"), message))
    if details:
        console.print(Text(f"  {details}"))
