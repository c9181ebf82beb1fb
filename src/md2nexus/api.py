#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/api.py
"""High-level conversion API.

This module ties the parsers and the BBCode renderer together for the three
ways the tool is used: converting an in-memory buffer, a single file, or
every Markdown file in a directory.

"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Callable, Optional, Union

from md2nexus.ast import Root
from md2nexus.constants import (
    MARKDOWN_EXTENSIONS,
    MDAST_EXTENSIONS,
    OUTPUT_EXTENSION,
    SUPPORTED_INPUT_FORMATS,
    InputFormat,
)
from md2nexus.exceptions import FileNotFoundError, FormatError, Md2NexusError, ValidationError
from md2nexus.options.base import BaseParserOptions
from md2nexus.options.nexus import NexusRendererOptions
from md2nexus.parsers.base import BaseParser, ParserInput
from md2nexus.parsers.markdown import MarkdownParser
from md2nexus.parsers.mdast_json import MdastJsonParser
from md2nexus.renderers.nexus import NexusRenderer
from md2nexus.utils.io_utils import ensure_directory, write_content

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of converting one file in a batch.

    Parameters
    ----------
    source : Path
        Input file
    destination : Path
        Output file that was (or would have been) written
    error : Md2NexusError or None, default = None
        The failure, when the conversion did not succeed

    """

    source: Path
    destination: Path
    error: Optional[Md2NexusError] = None

    @property
    def success(self) -> bool:
        """Whether the file was converted and written."""
        return self.error is None


def detect_input_format(source: ParserInput) -> str:
    """Pick ``markdown`` or ``mdast`` for an ``auto`` input format.

    Paths are judged by extension. In-memory text is treated as mdast JSON
    only when it looks like a JSON object with a ``type`` key.

    """
    if isinstance(source, Path):
        return "mdast" if source.suffix.lower() in MDAST_EXTENSIONS else "markdown"
    if isinstance(source, str):
        head = source.lstrip()[:256]
        if head.startswith("{") and '"type"' in head:
            return "mdast"
    return "markdown"


def get_parser(input_format: str, parser_options: Optional[BaseParserOptions] = None) -> BaseParser:
    """Create the parser for a concrete input format.

    Parameters
    ----------
    input_format : {"markdown", "mdast"}
        Input format name
    parser_options : BaseParserOptions, optional
        Options matching the chosen parser

    Returns
    -------
    BaseParser
        Configured parser

    Raises
    ------
    FormatError
        If the format name is unknown
    InvalidOptionsError
        If the options do not belong to the chosen parser

    """
    if input_format == "markdown":
        return MarkdownParser(parser_options)  # type: ignore[arg-type]
    if input_format == "mdast":
        return MdastJsonParser(parser_options)  # type: ignore[arg-type]
    raise FormatError(format_type=input_format, supported_formats=list(SUPPORTED_INPUT_FORMATS))


def to_ast(
    source: Union[str, Path, IO[bytes], IO[str], bytes],
    input_format: InputFormat = "auto",
    parser_options: Optional[BaseParserOptions] = None,
) -> Root:
    """Build the node tree for a document.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        Document text (``str``), a file to read (``Path``), an open stream,
        or raw UTF-8 bytes
    input_format : {"auto", "markdown", "mdast"}, default "auto"
        Input format. ``auto`` picks mdast for ``.json`` paths and for text
        that looks like an mdast JSON object, and Markdown otherwise.
    parser_options : BaseParserOptions, optional
        Options for the chosen parser

    Returns
    -------
    Root
        Parsed document tree

    Raises
    ------
    FormatError
        If the format name is unknown
    ParsingError
        If the input cannot be parsed
    FileError
        If a file input cannot be read

    Examples
    --------
    >>> root = to_ast("# Title")
    >>> type(root.children[0]).__name__
    'Heading'

    """
    if input_format not in SUPPORTED_INPUT_FORMATS:
        raise FormatError(format_type=input_format, supported_formats=list(SUPPORTED_INPUT_FORMATS))

    actual_format = detect_input_format(source) if input_format == "auto" else input_format
    logger.debug("Parsing input as %s", actual_format)
    return get_parser(actual_format, parser_options).parse(source)


def convert_buffer(
    text: str,
    *,
    input_format: InputFormat = "markdown",
    parser_options: Optional[BaseParserOptions] = None,
    renderer_options: Optional[NexusRendererOptions] = None,
) -> str:
    """Convert Markdown (or mdast JSON) text to NexusMods BBCode.

    Parameters
    ----------
    text : str
        Input document text
    input_format : {"auto", "markdown", "mdast"}, default "markdown"
        How to read ``text``
    parser_options : BaseParserOptions, optional
        Options for the chosen parser
    renderer_options : NexusRendererOptions, optional
        BBCode rendering options

    Returns
    -------
    str
        BBCode text

    Examples
    --------
    >>> convert_buffer("Some *emphasis* here.")
    'Some [i]emphasis[/i] here.'

    """
    root = to_ast(text, input_format=input_format, parser_options=parser_options)
    return NexusRenderer(renderer_options).render_to_string(root)


def convert_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path, IO[str], None] = None,
    *,
    input_format: InputFormat = "auto",
    parser_options: Optional[BaseParserOptions] = None,
    renderer_options: Optional[NexusRendererOptions] = None,
) -> str:
    """Convert one file and optionally write the result.

    Parameters
    ----------
    input_path : str or Path
        UTF-8 input file
    output_path : str, Path, IO[str], or None, default = None
        Where to write the BBCode. Nothing is written when None.
    input_format : {"auto", "markdown", "mdast"}, default "auto"
        Input format; ``auto`` decides by file extension
    parser_options : BaseParserOptions, optional
        Options for the chosen parser
    renderer_options : NexusRendererOptions, optional
        BBCode rendering options

    Returns
    -------
    str
        BBCode text

    Raises
    ------
    FileNotFoundError
        If the input file does not exist
    FileAccessError
        If the input file cannot be read or is not UTF-8
    OutputWriteError
        If the output file cannot be written

    """
    root = to_ast(Path(input_path), input_format=input_format, parser_options=parser_options)
    bbcode = NexusRenderer(renderer_options).render_to_string(root)
    if output_path is not None:
        write_content(bbcode, output_path)
    return bbcode


def output_path_for(source: Path, output_dir: Path) -> Path:
    """Return the ``.bbcode`` path a source file converts to."""
    return output_dir / (source.stem + OUTPUT_EXTENSION)


def find_markdown_files(input_dir: Union[str, Path]) -> list[Path]:
    """List the Markdown files directly inside ``input_dir``, sorted by name.

    Subdirectories are not searched.

    Raises
    ------
    FileNotFoundError
        If the directory does not exist
    ValidationError
        If the path is not a directory

    """
    directory = Path(input_dir)
    if not directory.exists():
        raise FileNotFoundError(str(directory))
    if not directory.is_dir():
        raise ValidationError(f"Not a directory: {directory}", parameter_name="input_dir", parameter_value=directory)

    files = []
    for entry in sorted(directory.iterdir()):
        if entry.is_file() and entry.suffix.lower() in MARKDOWN_EXTENSIONS:
            files.append(entry)
        else:
            logger.debug("Skipping %s", entry)
    return files


def convert_directory(
    input_dir: Union[str, Path],
    output_dir: Union[str, Path, None] = None,
    *,
    max_workers: int = 1,
    skip_errors: bool = False,
    parser_options: Optional[BaseParserOptions] = None,
    renderer_options: Optional[NexusRendererOptions] = None,
    on_result: Optional[Callable[[ConversionResult], None]] = None,
) -> list[ConversionResult]:
    """Convert every Markdown file in a directory to a ``.bbcode`` file.

    Each file is parsed and rendered independently. With ``max_workers``
    above one the files are converted on a thread pool; results are still
    reported in sorted input order.

    Parameters
    ----------
    input_dir : str or Path
        Directory holding the Markdown files (not searched recursively)
    output_dir : str, Path, or None, default = None
        Destination directory, created when missing. Defaults to the
        current directory.
    max_workers : int, default 1
        Number of worker threads
    skip_errors : bool, default False
        Record failures in the results and keep going instead of raising
    parser_options : BaseParserOptions, optional
        Options for the Markdown parser
    renderer_options : NexusRendererOptions, optional
        BBCode rendering options
    on_result : callable, optional
        Called with each ConversionResult as it is reported

    Returns
    -------
    list of ConversionResult
        One result per Markdown file, in sorted input order

    Raises
    ------
    Md2NexusError
        The first per-file failure, when ``skip_errors`` is False. Files
        converted before it keep their output.

    """
    if max_workers < 1:
        raise ValidationError(
            f"max_workers must be at least 1, got {max_workers}",
            parameter_name="max_workers",
            parameter_value=max_workers,
        )

    sources = find_markdown_files(input_dir)
    destination_dir = ensure_directory(output_dir if output_dir is not None else Path("."))
    logger.info("Converting %d file(s) from %s into %s", len(sources), input_dir, destination_dir)

    def _convert(source: Path) -> ConversionResult:
        destination = output_path_for(source, destination_dir)
        try:
            convert_file(
                source,
                destination,
                input_format="markdown",
                parser_options=parser_options,
                renderer_options=renderer_options,
            )
        except Md2NexusError as e:
            if not skip_errors:
                raise
            logger.error("Failed to convert %s: %s", source, e.message)
            return ConversionResult(source, destination, error=e)
        return ConversionResult(source, destination)

    results: list[ConversionResult] = []

    def _report(result: ConversionResult) -> None:
        results.append(result)
        if on_result is not None:
            on_result(result)

    if max_workers == 1:
        for source in sources:
            _report(_convert(source))
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(_convert, source) for source in sources]
            for future in futures:
                _report(future.result())

    return results
