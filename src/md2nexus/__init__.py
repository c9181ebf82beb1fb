"""md2nexus - Render GitHub Flavored Markdown as NexusMods BBCode.

md2nexus reads Markdown (or an mdast JSON tree produced by another Markdown
tool chain) and writes the restricted BBCode dialect accepted by NexusMods
mod description pages. Tables become boxed ASCII grids inside ``[code]``
blocks, and footnotes and link definitions are collected and emitted at the
end of the document.

Requirements
------------
- Python 3.10+
- mistune 3 for Markdown parsing

Examples
--------
Convert a Markdown string:

    >>> from md2nexus import convert_buffer
    >>> convert_buffer("# Title")
    '[size=5]Title[/size]'

Convert a file, writing ``README.bbcode``:

    >>> from md2nexus import convert_file
    >>> bbcode = convert_file("README.md", "README.bbcode")

Work with the node tree directly:

    >>> from md2nexus import to_ast, NexusRenderer
    >>> doc = to_ast("Some **bold** text")
    >>> NexusRenderer().render_to_string(doc)
    'Some \\n[b]bold[/b]\\n text'

See Also
--------
md2nexus.ast : Node definitions and mdast JSON serialization
md2nexus.renderers : The BBCode renderer

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2nexus requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from md2nexus.api import (
    ConversionResult,
    convert_buffer,
    convert_directory,
    convert_file,
    to_ast,
)
from md2nexus.exceptions import (
    FileError,
    FormatError,
    Md2NexusError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2nexus.options import MarkdownParserOptions, MdastJsonParserOptions, NexusRendererOptions
from md2nexus.renderers import NexusRenderer

__all__ = [
    "__version__",
    "convert_buffer",
    "convert_file",
    "convert_directory",
    "to_ast",
    "ConversionResult",
    "NexusRenderer",
    "NexusRendererOptions",
    "MarkdownParserOptions",
    "MdastJsonParserOptions",
    "Md2NexusError",
    "ValidationError",
    "FileError",
    "FormatError",
    "ParsingError",
    "RenderingError",
]
