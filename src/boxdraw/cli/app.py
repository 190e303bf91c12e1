"""CLI application entry point for boxdraw.

Metric options on the top-level callback shape the Font used by every
command; commands print with rich via boxdraw.cli.output.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from boxdraw import __version__
from boxdraw.cli.output import (
    console,
    print_error,
    print_header,
    print_metrics,
    print_path_calls,
    print_recipe,
    print_recipe_table,
    print_step,
    print_summary,
)
from boxdraw.config import BoxDrawSettings, LoggingConfig, MetricsConfig
from boxdraw.core import Font, parse_code_point
from boxdraw.exceptions import BoxDrawError, CodePointError
from boxdraw.io import RecordingCanvas, recording_to_svg_path
from boxdraw.utils import DrawingStats, configure_logging

CODE_PREFIXES = ("u+", "0x")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

app = typer.Typer(
    name="boxdraw",
    help="Draw Unicode box-drawing and block-element glyphs from parametric recipes.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]boxdraw[/bold blue] v{__version__}")
        raise typer.Exit()


def parse_code_argument(text: str) -> int:
    """Parse a code point given as 2500, 0x2500, U+2500 or the glyph itself.

    Raises:
        CodePointError: If the text is none of these
    """
    value = text.strip()
    if len(value) == 1 and not value.isascii():
        return ord(value)
    lowered = value.lower()
    for prefix in CODE_PREFIXES:
        if lowered.startswith(prefix):
            value = value[len(prefix):]
            break
    if not value:
        raise CodePointError(text, "empty literal")
    return parse_code_point(value)


def _font(ctx: typer.Context) -> Font:
    settings: BoxDrawSettings = ctx.obj
    return Font(settings.metrics.to_metrics())


@app.callback()
def main_callback(
    ctx: typer.Context,
    stroke: Annotated[
        float | None,
        typer.Option(
            "--stroke",
            "-s",
            help="Stroke weight in font units",
        ),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option(
            "--width",
            "-w",
            help="Glyph width in font units",
        ),
    ] = None,
    fat: Annotated[
        float | None,
        typer.Option(
            "--fat",
            help="Multiplication factor for heavy strokes",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Draw Unicode box-drawing and block-element glyphs from parametric recipes.

    Metric options apply to every command, e.g.:

        boxdraw --stroke 120 draw U+256C
    """
    if log_level.upper() not in LOG_LEVELS:
        print_error(
            f"Invalid log level: {log_level}",
            details=f"Valid values: {', '.join(LOG_LEVELS)}",
        )
        raise typer.Exit(code=1)

    try:
        settings = BoxDrawSettings(
            metrics=MetricsConfig(stroke=stroke, width=width, fat=fat),
            logging=LoggingConfig(log_file=log_file, log_level=log_level.upper()),
        )
    except ValidationError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1) from None

    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    ctx.obj = settings


@app.command("list")
def list_recipes(ctx: typer.Context) -> None:
    """List every code point with a recipe."""
    try:
        font = _font(ctx)
        print_recipe_table(font.recipe(cp) for cp in font.code_points())
    except BoxDrawError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


@app.command()
def show(
    ctx: typer.Context,
    code: Annotated[
        str,
        typer.Argument(
            help="Code point: 2500, 0x2500, U+2500 or the glyph itself",
            show_default=False,
        ),
    ],
) -> None:
    """Show a recipe and the commands it resolves to."""
    try:
        font = _font(ctx)
        code_point = parse_code_argument(code)
        print_header(__version__)
        print_metrics(font.metrics)
        print_step("Recipe")
        print_recipe(font.recipe(code_point), font.commands(code_point))
    except BoxDrawError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


@app.command()
def draw(
    ctx: typer.Context,
    codes: Annotated[
        list[str],
        typer.Argument(
            help="One or more code points: 2500, 0x2500, U+2500 or the glyph itself",
            show_default=False,
        ),
    ],
    svg: Annotated[
        bool,
        typer.Option(
            "--svg",
            help="Print SVG path data instead of canvas calls",
        ),
    ] = False,
) -> None:
    """Draw glyphs and print the resulting outline."""
    try:
        font = _font(ctx)
        code_points = [parse_code_argument(code) for code in codes]
        stats = DrawingStats()

        for code_point in code_points:
            recording = RecordingCanvas()
            font.draw_to(code_point, recording)
            stats.record(recording, len(font.recipe(code_point).commands))

            if svg:
                # plain echo keeps long path data on one line
                typer.echo(recording_to_svg_path(recording))
            else:
                print_step(f"U+{code_point:04X} {font.recipe(code_point).name}")
                print_path_calls(recording.value)

        if not svg:
            print_summary(stats)
    except BoxDrawError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
