#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/renderers/base.py
"""Base classes for AST renderers.

A renderer turns a :class:`Root` tree into output text. Renderers are
stateless between calls: everything one render pass needs lives in objects
created by that pass.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2nexus.ast import Root
from md2nexus.exceptions import InvalidOptionsError
from md2nexus.options.base import BaseRendererOptions
from md2nexus.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class UpperRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return "rendered output".upper()

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Root) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Root
            AST root node to render

        Returns
        -------
        str
            Rendered document

        """
        pass

    def render(self, doc: Root, output: Union[str, Path, IO[str]]) -> None:
        """Render the AST and write the result to ``output``.

        Parameters
        ----------
        doc : Root
            AST root node to render
        output : str, Path, or IO[str]
            Output file path or writable text stream

        Raises
        ------
        OutputWriteError
            If the output file cannot be written

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[str]]) -> None:
        """Write rendered text to a file path or text stream.

        Examples
        --------
        Write to StringIO:
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("[b]Hello[/b]", buffer)
            >>> buffer.getvalue()
            '[b]Hello[/b]'

        """
        write_content(text, output)
