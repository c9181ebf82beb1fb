#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/options/nexus.py
"""Configuration options for NexusMods BBCode rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2nexus.constants import (
    DEFAULT_HEADING_SIZE,
    DEFAULT_MONOSPACE_FONT,
    MAX_HEADING_SIZE,
    MIN_HEADING_SIZE,
)
from md2nexus.options.base import BaseRendererOptions


@dataclass(frozen=True)
class NexusRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-NexusMods-BBCode rendering.

    Parameters
    ----------
    monospace_font : str, default "Courier"
        Font name used in the ``[font="..."]`` wrapper for inline code and
        inline math. Table cells never receive the wrapper.
    heading_size : int, default 5
        Value of the ``[size=N]`` tag used for every heading. NexusMods
        has no heading levels, so all levels share this size.

    Examples
    --------
    Larger headings and a different code font:
        >>> from md2nexus.renderers.nexus import NexusRenderer
        >>> options = NexusRendererOptions(heading_size=6, monospace_font="Consolas")
        >>> renderer = NexusRenderer(options)

    """

    monospace_font: str = field(
        default=DEFAULT_MONOSPACE_FONT,
        metadata={"help": "Font used for inline code and inline math", "importance": "core"},
    )
    heading_size: int = field(
        default=DEFAULT_HEADING_SIZE,
        metadata={
            "help": f"BBCode [size] value for headings ({MIN_HEADING_SIZE}-{MAX_HEADING_SIZE})",
            "type": int,
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If heading_size is out of range or monospace_font is empty
            or contains a double quote.

        """
        if not MIN_HEADING_SIZE <= self.heading_size <= MAX_HEADING_SIZE:
            raise ValueError(
                f"heading_size must be between {MIN_HEADING_SIZE} and {MAX_HEADING_SIZE}, got {self.heading_size}"
            )
        if not self.monospace_font or '"' in self.monospace_font:
            raise ValueError(f"monospace_font must be a non-empty name without quotes, got {self.monospace_font!r}")
