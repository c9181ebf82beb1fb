#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/cli/output.py
"""Utility functions for cli output."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.markup import escape

from md2nexus.api import ConversionResult


def should_use_rich_output(stream: TextIO | None = None) -> bool:
    """Determine if styled output should be used for a stream.

    Styling is used only when the stream is a terminal.

    """
    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    if callable(isatty):
        try:
            return bool(isatty())
        except ValueError:
            # Closed stream
            return False
    return False


def create_console(stream: TextIO | None = None) -> Console:
    """Create the console used for batch progress.

    Colour is disabled when the target stream is not a terminal, so
    captured output stays free of escape codes.

    """
    target = stream or sys.stdout
    return Console(file=target, no_color=not should_use_rich_output(target), highlight=False)


def print_directory_header(console: Console, directory: Path) -> None:
    """Print the input directory name before its files."""
    console.print(f"[bold blue]{escape(str(directory))}[/bold blue]")


def print_conversion_result(console: Console, result: ConversionResult) -> None:
    """Print one ``source => destination`` line for a converted file."""
    line = (
        f"    [yellow]{escape(str(result.source))}[/yellow] => "
        f"[bright_magenta]{escape(str(result.destination))}[/bright_magenta]"
    )
    if not result.success:
        line += f" [red]failed: {escape(str(result.error))}[/red]"
    console.print(line)
