#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/renderers/_grid.py
"""Plain-text grid drawing for table output.

BBCode on NexusMods has no usable table tag, so tables are drawn as an
ASCII grid and placed inside a ``[code]`` block::

    +-----+-----+
    | a   | b   |
    +-----+-----+
    | c   | d   |
    +-----+-----+

Widths are measured in terminal cells so wide characters line up in a
monospace font.
"""

from __future__ import annotations

from typing import Sequence

from rich.cells import cell_len

PADDING = 1


def _normalize(rows: Sequence[Sequence[str]]) -> list[list[list[str]]]:
    """Split every cell into lines and pad ragged rows with empty cells."""
    num_cols = max((len(row) for row in rows), default=0)
    normalized = []
    for row in rows:
        cells = [cell.splitlines() or [""] for cell in row]
        cells.extend([[""]] * (num_cols - len(cells)))
        normalized.append(cells)
    return normalized


def render_grid(rows: Sequence[Sequence[str]]) -> str:
    """Draw rows of cell strings as a boxed ASCII grid.

    Parameters
    ----------
    rows : sequence of sequence of str
        Cell text, row by row. Rows may have different lengths and cells
        may span several lines.

    Returns
    -------
    str
        The grid with a trailing newline, or ``""`` when there are no
        rows or no columns

    Examples
    --------
    >>> print(render_grid([["a", "bb"]]), end="")
    +---+----+
    | a | bb |
    +---+----+

    """
    table = _normalize(rows)
    if not table or not table[0]:
        return ""

    num_cols = len(table[0])
    col_widths = [0] * num_cols
    for cells in table:
        for i, lines in enumerate(cells):
            col_widths[i] = max(col_widths[i], max(cell_len(line) for line in lines))

    separator = "+" + "+".join("-" * (width + 2 * PADDING) for width in col_widths) + "+"
    pad = " " * PADDING

    output = [separator]
    for cells in table:
        height = max(len(lines) for lines in cells)
        for line_no in range(height):
            parts = []
            for i, lines in enumerate(cells):
                text = lines[line_no] if line_no < len(lines) else ""
                parts.append(pad + text + " " * (col_widths[i] - cell_len(text)) + pad)
            output.append("|" + "|".join(parts) + "|")
        output.append(separator)

    return "\n".join(output) + "\n"
