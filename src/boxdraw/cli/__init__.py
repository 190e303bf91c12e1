"""Command-line interface for boxdraw.

This module provides the CLI using Typer with rich output.

Commands:
- list: Table of every code point with a recipe
- show: A recipe and its resolved commands
- draw: Canvas calls or SVG path data for one or more glyphs
"""

from boxdraw.cli.app import cli, main

__all__ = ["cli", "main"]
