#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/cli/processors.py
"""Processing functions for the three md2nexus CLI input modes.

Standard input, a single file, and a directory of Markdown files each get a
``process_*`` function here. All of them return a CLI exit code.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO, Union

from md2nexus.api import ConversionResult, convert_directory, detect_input_format, to_ast
from md2nexus.ast import Root, ast_to_json
from md2nexus.cli.builder import EXIT_SUCCESS, EXIT_VALIDATION_ERROR, get_exit_code_for_exception
from md2nexus.cli.config import CONFIG_ENV_VAR, load_config_with_priority, options_from_config
from md2nexus.cli.output import create_console, print_conversion_result, print_directory_header
from md2nexus.options import MarkdownParserOptions, MdastJsonParserOptions, NexusRendererOptions
from md2nexus.options.base import BaseParserOptions
from md2nexus.renderers import NexusRenderer
from md2nexus.utils.io_utils import write_content

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CliOptions:
    """Options resolved from the config file and command-line flags."""

    markdown: MarkdownParserOptions
    mdast: MdastJsonParserOptions
    nexus: NexusRendererOptions

    def parser_options_for(self, input_format: str) -> BaseParserOptions:
        """Return the parser options matching a concrete input format."""
        return self.mdast if input_format == "mdast" else self.markdown


def setup_options(parsed_args: argparse.Namespace) -> CliOptions:
    """Load the configuration and apply command-line overrides.

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file cannot be loaded
    ValidationError
        If a resulting option value is out of range

    """
    if parsed_args.no_config:
        config = {}
    else:
        config = load_config_with_priority(
            explicit_path=parsed_args.config, env_var_path=os.environ.get(CONFIG_ENV_VAR)
        )

    nexus_overrides = {}
    if parsed_args.heading_size is not None:
        nexus_overrides["heading_size"] = parsed_args.heading_size
    if parsed_args.monospace_font is not None:
        nexus_overrides["monospace_font"] = parsed_args.monospace_font

    markdown_overrides = {}
    if parsed_args.frontmatter:
        markdown_overrides["parse_frontmatter"] = True

    markdown, mdast, nexus = options_from_config(config, markdown=markdown_overrides, nexus=nexus_overrides)
    return CliOptions(markdown=markdown, mdast=mdast, nexus=nexus)


def _emit(root: Root, parsed_args: argparse.Namespace, options: CliOptions, stdout: TextIO) -> None:
    """Render (or dump) a parsed document to ``-o`` or stdout.

    Output written to stdout gets a trailing newline; output files do not.

    """
    if parsed_args.dump_ast:
        content = ast_to_json(root, indent=2)
    else:
        content = NexusRenderer(options.nexus).render_to_string(root)

    if parsed_args.output:
        write_content(content, Path(parsed_args.output))
        logger.info("Wrote %s", parsed_args.output)
    else:
        stdout.write(content + "\n")


def _parse(source: Union[str, Path], parsed_args: argparse.Namespace, options: CliOptions) -> Root:
    input_format = parsed_args.input_format
    if input_format == "auto":
        input_format = detect_input_format(source)
    logger.debug("Input format resolved to %s", input_format)
    return to_ast(source, input_format=input_format, parser_options=options.parser_options_for(input_format))


def process_stdin(
    parsed_args: argparse.Namespace,
    options: CliOptions,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Convert a document read from standard input."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    root = _parse(stdin.read(), parsed_args, options)
    _emit(root, parsed_args, options, stdout)
    return EXIT_SUCCESS


def process_file(
    input_path: Path,
    parsed_args: argparse.Namespace,
    options: CliOptions,
    stdout: Optional[TextIO] = None,
) -> int:
    """Convert a single file to ``-o`` or stdout."""
    root = _parse(input_path, parsed_args, options)
    _emit(root, parsed_args, options, stdout or sys.stdout)
    return EXIT_SUCCESS


def process_directory(
    input_dir: Path,
    parsed_args: argparse.Namespace,
    options: CliOptions,
    stdout: Optional[TextIO] = None,
) -> int:
    """Convert every Markdown file in a directory into ``.bbcode`` files.

    Returns
    -------
    int
        EXIT_SUCCESS, or the highest exit code among failed files when
        ``--skip-errors`` is set

    """
    if parsed_args.dump_ast:
        print("Error: --dump-ast cannot be used with a directory input", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    if parsed_args.input_format == "mdast":
        print("Error: directory input only converts Markdown files", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    output_dir = Path(parsed_args.output) if parsed_args.output else Path(".")
    console = create_console(stdout)
    print_directory_header(console, input_dir)

    def _on_result(result: ConversionResult) -> None:
        print_conversion_result(console, result)

    results = convert_directory(
        input_dir,
        output_dir,
        max_workers=parsed_args.parallel,
        skip_errors=parsed_args.skip_errors,
        parser_options=options.markdown,
        renderer_options=options.nexus,
        on_result=_on_result,
    )

    max_exit_code = EXIT_SUCCESS
    for result in results:
        if result.error is not None:
            max_exit_code = max(max_exit_code, get_exit_code_for_exception(result.error))

    failed = sum(1 for result in results if not result.success)
    if failed:
        logger.warning("%d of %d file(s) failed to convert", failed, len(results))
    return max_exit_code
