#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/parsers/base.py
"""Abstract base class for document parsers.

A parser turns some input (Markdown text, mdast JSON) into a :class:`Root`
tree that the renderers consume.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2nexus.ast import Root
from md2nexus.exceptions import InvalidOptionsError, ValidationError
from md2nexus.options.base import BaseParserOptions
from md2nexus.utils.io_utils import decode_text, read_stream, read_text_file

logger = logging.getLogger(__name__)

ParserInput = Union[str, Path, IO[bytes], IO[str], bytes]


class BaseParser(ABC):
    """Abstract base class for all parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    ``parse`` accepts:
    - str: the document text itself
    - Path: a file to read as UTF-8
    - IO[bytes] or IO[str]: an open stream
    - bytes: raw UTF-8 document bytes

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Root:
        """Parse the input into an AST.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            The input document

        Returns
        -------
        Root
            Root node of the parsed tree

        Raises
        ------
        ParsingError
            If the input cannot be turned into a tree
        FileError
            If a file input cannot be read

        """
        raise NotImplementedError

    @staticmethod
    def _load_text_content(input_data: ParserInput) -> str:
        """Load document text from any supported input type.

        A ``str`` is always treated as document text, never as a path.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            Input data to load

        Returns
        -------
        str
            Document text

        """
        if isinstance(input_data, str):
            return input_data
        elif isinstance(input_data, bytes):
            return decode_text(input_data)
        elif isinstance(input_data, Path):
            return read_text_file(input_data)
        elif hasattr(input_data, "read"):
            return read_stream(input_data)
        raise ValidationError(
            f"Unsupported input type: {type(input_data).__name__}",
            parameter_name="input_data",
            parameter_value=input_data,
        )
