"""Command-line interface for md2nexus.

This module provides the ``md2nexus`` command, which converts GitHub
Flavored Markdown into NexusMods BBCode. It reads standard input, a single
file, or a whole directory of Markdown files.

Configuration File Support
--------------------------
Renderer and parser defaults can be kept in a TOML, YAML, or JSON config
file (see :mod:`md2nexus.cli.config`). The file named by ``--config`` wins,
then the one named by the MD2NEXUS_CONFIG environment variable, then the
first one discovered from the current directory upward or in the home
directory. Command-line flags always override config values.

Examples
--------
Convert standard input to standard output::

    $ md2nexus < README.md

Convert a file::

    $ md2nexus -i README.md -o README.bbcode

Convert every Markdown file in a directory::

    $ md2nexus -i docs/ -o bbcode/ --parallel 4

Inspect the parsed tree::

    $ md2nexus -i README.md --dump-ast

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import sys
from pathlib import Path

from md2nexus.cli.builder import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_about_info,
    get_exit_code_for_exception,
)
from md2nexus.exceptions import Md2NexusError
from md2nexus.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = [
    "main",
    "create_parser",
]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def main(args: list[str] | None = None) -> int:
    """Execute main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.about:
        print(get_about_info())
        return EXIT_SUCCESS

    _setup_logging_level(parsed_args)

    # Lazy import so --help and --version stay fast
    from md2nexus.cli.processors import process_directory, process_file, process_stdin, setup_options

    try:
        options = setup_options(parsed_args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except Md2NexusError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    try:
        if parsed_args.input is None:
            return process_stdin(parsed_args, options)

        input_path = Path(parsed_args.input)
        if input_path.is_dir():
            return process_directory(input_path, parsed_args, options)
        return process_file(input_path, parsed_args, options)
    except Md2NexusError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Error: Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
