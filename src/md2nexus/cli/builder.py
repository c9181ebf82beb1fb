#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/cli/builder.py
"""Argument parser construction and exit code mapping for the md2nexus CLI."""

from __future__ import annotations

import argparse
import platform
import sys

from md2nexus.constants import (
    DEFAULT_HEADING_SIZE,
    DEFAULT_MONOSPACE_FONT,
    MAX_HEADING_SIZE,
    MIN_HEADING_SIZE,
    SUPPORTED_INPUT_FORMATS,
)
from md2nexus.exceptions import (
    FileError,
    FormatError,
    ParsingError,
    RenderingError,
    ValidationError,
)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_FORMAT_ERROR = 5
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


def get_version() -> str:
    """Get the version of the installed md2nexus package."""
    try:
        from importlib.metadata import version

        return version("md2nexus")
    except Exception:
        return "unknown"


RUNTIME_DEPENDENCIES = ["mistune", "rich", "PyYAML"]


def _package_version(package_name: str) -> str | None:
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version(package_name)
    except PackageNotFoundError:
        return None


def get_about_info() -> str:
    """Get detailed information about md2nexus including system info and dependencies."""
    dep_lines = []
    for package_name in RUNTIME_DEPENDENCIES:
        installed = _package_version(package_name)
        check = "✓" if installed else "✗"
        dep_lines.append(f"  {check} {package_name:20} {installed or 'not installed'}")
    dependencies_report = "\n".join(dep_lines)

    return f"""md2nexus {get_version()}

Convert GitHub Flavored Markdown into the BBCode dialect used by
NexusMods mod description pages.

System Information:
  Python:        {platform.python_version()} ({sys.executable})
  Platform:      {platform.platform()}
  Architecture:  {platform.machine()}

Dependencies:
{dependencies_report}

Features:
  • Markdown and mdast JSON input
  • Tables rendered as ASCII grids inside [code] blocks
  • Footnotes and link definitions collected at the end of the document
  • Single file, stdin, and whole-directory conversion

License: MIT License"""


def positive_int(value: str) -> int:
    """Parse a strictly positive integer argument.

    Raises
    ------
    argparse.ArgumentTypeError
        If the value is not an integer or is below one

    """
    try:
        parsed = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {value!r}") from e
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {parsed}")
    return parsed


def heading_size(value: str) -> int:
    """Parse a BBCode heading size argument."""
    parsed = positive_int(value)
    if parsed > MAX_HEADING_SIZE:
        raise argparse.ArgumentTypeError(
            f"Heading size must be between {MIN_HEADING_SIZE} and {MAX_HEADING_SIZE}, got {parsed}"
        )
    return parsed


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="md2nexus",
        description="Convert GitHub Flavored Markdown to NexusMods BBCode.",
        epilog="With no --input, Markdown is read from standard input.",
    )

    parser.add_argument(
        "--input",
        "-i",
        metavar="PATH",
        help="Markdown file, mdast JSON file, or directory of Markdown files to convert",
    )
    parser.add_argument(
        "--output",
        "-o",
        metavar="PATH",
        help="Output file (single input) or output directory (directory input). "
        "Defaults to stdout for a single input and '.' for a directory.",
    )
    parser.add_argument(
        "--input-format",
        choices=list(SUPPORTED_INPUT_FORMATS),
        default="auto",
        help="How to read the input (default: auto, which treats .json files as mdast JSON)",
    )

    # Rendering options. Defaults are None so config file values are not clobbered.
    render_group = parser.add_argument_group("BBCode rendering options")
    render_group.add_argument(
        "--heading-size",
        type=heading_size,
        metavar="N",
        default=None,
        help=f"BBCode [size=N] used for every heading, {MIN_HEADING_SIZE}-{MAX_HEADING_SIZE} "
        f"(default: {DEFAULT_HEADING_SIZE})",
    )
    render_group.add_argument(
        "--monospace-font",
        metavar="NAME",
        default=None,
        help=f"Font used for inline code outside tables (default: {DEFAULT_MONOSPACE_FONT})",
    )

    parse_group = parser.add_argument_group("Markdown parsing options")
    parse_group.add_argument(
        "--frontmatter",
        action="store_true",
        help="Read a leading --- or +++ block as YAML or TOML front matter",
    )

    # Configuration file
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to configuration file (TOML, YAML, or JSON). "
        "If not specified, uses MD2NEXUS_CONFIG, then searches for .md2nexus.toml, .md2nexus.yaml, "
        ".md2nexus.json or pyproject.toml [tool.md2nexus] from the current directory upward, "
        "then in the home directory.",
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        dest="no_config",
        help="Disable loading of configuration files, including MD2NEXUS_CONFIG and --config",
    )

    # Multi-file processing options
    parser.add_argument(
        "--parallel",
        "-p",
        type=positive_int,
        default=1,
        metavar="N",
        help="Number of worker threads for directory input (default: 1)",
    )
    parser.add_argument(
        "--skip-errors", action="store_true", help="Continue converting remaining files if one fails"
    )

    parser.add_argument(
        "--dump-ast",
        action="store_true",
        help="Print the parsed document as mdast JSON instead of converting it",
    )

    # Logging and verbosity options
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level (default: WARNING). Overrides --verbose if both are specified.",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with very verbose, timestamped logging",
    )

    parser.add_argument("--version", "-V", action="version", version=f"md2nexus {get_version()}")
    parser.add_argument("--about", "-A", action="store_true", help="Show information about md2nexus and exit")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    # Check for validation errors
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    # Check for file I/O errors
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    # Check for format errors
    if isinstance(exception, FormatError):
        return EXIT_FORMAT_ERROR

    # Check for parsing errors
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    # Check for rendering errors
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    # All other errors (unexpected errors)
    return EXIT_ERROR
