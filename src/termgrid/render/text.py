"""Render a CellBuffer to plain text (strip styling)."""

from termgrid.core.buffer import CellBuffer
from termgrid.core.constants import BLANK_CHAR


class TextRenderer:
    """
    Render a CellBuffer to plain text, one line per row.

    By default blank cells at the end of each row and rows that hold
    nothing but blanks at the bottom of the grid are left out.
    """

    def __init__(self, preserve_whitespace: bool = False):
        self.preserve_whitespace = preserve_whitespace

    def render(self, buffer: CellBuffer) -> str:
        """Render buffer to plain text."""
        view = buffer.as_slice()
        cols = buffer.cols
        rows = buffer.rows if self.preserve_whitespace else self._content_rows(buffer)

        lines: list[str] = []
        for y in range(rows):
            line = ''.join(cell.ch for cell in view[cols * y:cols * (y + 1)])
            if not self.preserve_whitespace:
                line = line.rstrip(BLANK_CHAR)
            lines.append(line)
        return '\n'.join(lines)

    @staticmethod
    def _content_rows(buffer: CellBuffer) -> int:
        """Number of rows up to and including the last one with a non-blank cell."""
        last = -1
        for offset, cell in enumerate(buffer.as_slice()):
            if cell.ch != BLANK_CHAR:
                last = offset // buffer.cols
        return last + 1
