"""Demonstration frame used by the preview command."""

from __future__ import annotations

import os

from termgrid.core.attr import Attr
from termgrid.core.buffer import CellBuffer
from termgrid.core.cell import Cell
from termgrid.core.color import Color
from termgrid.core.constants import DEFAULT_COLS, DEFAULT_ROWS
from termgrid.core.style import Style

LABEL = "termgrid preview"

BOX_CHARS = {
    "horizontal": "─",
    "vertical": "│",
    "top_left": "┌",
    "top_right": "┐",
    "bottom_left": "└",
    "bottom_right": "┘",
}


def terminal_size() -> tuple[int, int]:
    """Get current terminal dimensions as (cols, rows)."""
    try:
        size = os.get_terminal_size()
        return size.columns, size.lines
    except OSError:
        return DEFAULT_COLS, DEFAULT_ROWS


def parse_size(text: str) -> tuple[int, int]:
    """Parse a ``COLSxROWS`` string such as ``40x12``."""
    cols_text, sep, rows_text = text.lower().partition("x")
    if not sep:
        raise ValueError(f"Expected COLSxROWS, got {text!r}")
    cols, rows = int(cols_text), int(rows_text)
    if cols < 0 or rows < 0:
        raise ValueError(f"Size must be non-negative, got {text!r}")
    return cols, rows


def draw_demo(buffer: CellBuffer) -> None:
    """Draw a border, a centered label and color swatches into buffer."""
    cols, rows = buffer.size
    if cols < 2 or rows < 2:
        buffer.put_text(0, 0, LABEL)
        return

    edge = Style.from_color(Color.CYAN)
    for x in range(cols):
        buffer.put_char(x, 0, BOX_CHARS["horizontal"], fg=edge)
        buffer.put_char(x, rows - 1, BOX_CHARS["horizontal"], fg=edge)
    for y in range(rows):
        buffer.put_char(0, y, BOX_CHARS["vertical"], fg=edge)
        buffer.put_char(cols - 1, y, BOX_CHARS["vertical"], fg=edge)
    buffer.put_char(0, 0, BOX_CHARS["top_left"], fg=edge)
    buffer.put_char(cols - 1, 0, BOX_CHARS["top_right"], fg=edge)
    buffer.put_char(0, rows - 1, BOX_CHARS["bottom_left"], fg=edge)
    buffer.put_char(cols - 1, rows - 1, BOX_CHARS["bottom_right"], fg=edge)

    x_start = max((cols - len(LABEL)) // 2, 1)
    buffer.put_text(x_start, rows // 2, LABEL[:cols - 2], fg=Style(Color.YELLOW, Attr.BOLD))

    # One row of basic colors, one of the 8-bit palette
    inner = cols - 2
    if rows >= 5:
        for i in range(min(8, inner)):
            buffer.fill_rect(1 + i, 1, 1, 1, Cell.from_styles(Style(), Style.from_color(Color.named(i))))
        for i in range(inner):
            buffer.fill_rect(1 + i, 2, 1, 1, Cell.from_styles(Style(), Style.from_color(Color.byte((16 + i) % 256))))
