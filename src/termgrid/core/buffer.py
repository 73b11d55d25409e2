"""CellBuffer - 2D grid of cells representing one frame of terminal content."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Iterator, overload

from termgrid.core.cell import Cell
from termgrid.core.style import Style

logger = logging.getLogger(__name__)


class CellView(Sequence[Cell]):
    """
    Flat, row-major view over a CellBuffer's cells.

    Supports reading and replacing cells by offset, but not inserting or
    deleting them, so the backing length always stays ``cols * rows``.
    The view reads through to whatever sequence the buffer currently
    holds, including after a resize.
    """

    __slots__ = ("_owner",)

    def __init__(self, owner: CellBuffer) -> None:
        self._owner = owner

    def __len__(self) -> int:
        return len(self._owner._buf)

    @overload
    def __getitem__(self, index: int) -> Cell: ...

    @overload
    def __getitem__(self, index: slice) -> list[Cell]: ...

    def __getitem__(self, index: int | slice) -> Cell | list[Cell]:
        return self._owner._buf[index]

    def __setitem__(self, index: int, cell: Cell) -> None:
        if isinstance(index, slice):
            raise TypeError("CellView does not support slice assignment")
        self._owner._buf[index] = cell.copy()

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._owner._buf)


class CellBuffer:
    """
    A two-dimensional grid of Cells backing a terminal display.

    Cells are stored in a single row-major list of length ``cols * rows``;
    the cell at column ``x`` of row ``y`` lives at offset ``cols * y + x``.

    Two access styles are offered:

    - ``get(x, y)`` / ``get_mut(x, y)`` return ``None`` when the coordinate
      is outside the grid, for callers that want to skip such writes.
    - ``buffer[x, y]`` assumes the caller has already checked the
      coordinate and raises ``IndexError`` otherwise.

    The buffer owns its cells. Every cell placed into it is copied, so
    two positions never share one Cell object.
    """

    __slots__ = ("_cols", "_rows", "_buf")

    def __init__(self, cols: int = 0, rows: int = 0, blank: Cell | None = None) -> None:
        """Create a buffer of ``cols`` x ``rows`` copies of ``blank``."""
        _check_dimensions(cols, rows)
        if blank is None:
            blank = Cell()
        self._cols = cols
        self._rows = rows
        self._buf: list[Cell] = [blank.copy() for _ in range(cols * rows)]
        logger.debug("Created %dx%d cell buffer", cols, rows)

    @classmethod
    def default(cls) -> CellBuffer:
        """Create an empty (0 x 0) buffer."""
        return cls(0, 0, Cell())

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def size(self) -> tuple[int, int]:
        """Dimensions as ``(cols, rows)``."""
        return self._cols, self._rows

    def _offset(self, x: int, y: int) -> int | None:
        if 0 <= x < self._cols and 0 <= y < self._rows:
            return self._cols * y + x
        return None

    def get(self, x: int, y: int) -> Cell | None:
        """Return the cell at (x, y), or None if it is outside the grid."""
        offset = self._offset(x, y)
        if offset is None:
            return None
        return self._buf[offset]

    def get_mut(self, x: int, y: int) -> Cell | None:
        """
        Return the cell at (x, y) for in-place mutation, or None.

        Python has no read-only references, so this returns the same
        object as :meth:`get`; it exists to make writes explicit at the
        call site.
        """
        return self.get(x, y)

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: buffer[x, y]."""
        return self._buf[self._checked_offset(pos)]

    def __setitem__(self, pos: tuple[int, int], cell: Cell) -> None:
        """Set cell using indexing: buffer[x, y] = cell."""
        self._buf[self._checked_offset(pos)] = cell.copy()

    def _checked_offset(self, pos: tuple[int, int]) -> int:
        if not isinstance(pos, tuple) or len(pos) != 2:
            raise TypeError(f"CellBuffer indices must be (x, y) tuples, not {pos!r}")
        offset = self._offset(*pos)
        if offset is None:
            raise IndexError("index out of bounds")
        return offset

    def clear(self, blank: Cell | None = None) -> None:
        """Overwrite every cell with ``blank``, keeping the dimensions."""
        if blank is None:
            blank = Cell()
        for i in range(len(self._buf)):
            self._buf[i] = blank.copy()

    def resize(self, cols: int, rows: int, blank: Cell | None = None) -> None:
        """
        Change the buffer's dimensions, keeping overlapping content.

        Content is anchored at the top-left corner: the cell at (x, y)
        survives if both the old and new grids contain (x, y). Everything
        newly exposed is filled with copies of ``blank``, and anything
        past the new extent is discarded.
        """
        _check_dimensions(cols, rows)
        if blank is None:
            blank = Cell()

        keep_cols = min(cols, self._cols)
        keep_rows = min(rows, self._rows)
        buf: list[Cell] = []
        for y in range(rows):
            if y < keep_rows:
                start = self._cols * y
                buf.extend(self._buf[start:start + keep_cols])
                buf.extend(blank.copy() for _ in range(cols - keep_cols))
            else:
                buf.extend(blank.copy() for _ in range(cols))

        logger.debug(
            "Resized cell buffer from %dx%d to %dx%d",
            self._cols, self._rows, cols, rows,
        )
        # Install contents and dimensions together
        self._buf, self._cols, self._rows = buf, cols, rows

    def as_slice(self) -> CellView:
        """Return the cells as one flat, row-major sequence."""
        return CellView(self)

    def __len__(self) -> int:
        return len(self._buf)

    def __iter__(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        return iter(self._buf)

    def rows_iter(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        for y in range(self._rows):
            start = self._cols * y
            yield self._buf[start:start + self._cols]

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (x, y, cell) tuples."""
        for offset, cell in enumerate(self._buf):
            y, x = divmod(offset, self._cols)
            yield x, y, cell

    def put_char(
        self,
        x: int,
        y: int,
        ch: str,
        fg: Style | None = None,
        bg: Style | None = None,
    ) -> bool:
        """Put a character at (x, y) with optional styling.

        Returns False (and writes nothing) if the position is off-grid.
        """
        cell = self.get_mut(x, y)
        if cell is None:
            return False
        cell.ch = ch
        if fg is not None:
            cell.fg = fg
        if bg is not None:
            cell.bg = bg
        return True

    def put_text(
        self,
        x: int,
        y: int,
        text: str,
        fg: Style | None = None,
        bg: Style | None = None,
    ) -> int:
        """Put a string of text starting at (x, y); returns characters written."""
        written = 0
        for i, ch in enumerate(text):
            if x + i >= self._cols:
                break
            if self.put_char(x + i, y, ch, fg, bg):
                written += 1
        return written

    def fill_rect(self, x: int, y: int, w: int, h: int, cell: Cell) -> None:
        """Fill the part of a rectangle inside the grid with copies of a cell."""
        for row in range(max(y, 0), min(y + h, self._rows)):
            start = self._cols * row
            for col in range(max(x, 0), min(x + w, self._cols)):
                self._buf[start + col] = cell.copy()

    def copy(self) -> CellBuffer:
        """Return an independent copy of this buffer."""
        other = CellBuffer.__new__(CellBuffer)
        other._cols = self._cols
        other._rows = self._rows
        other._buf = [cell.copy() for cell in self._buf]
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellBuffer):
            return NotImplemented
        return self.size == other.size and self._buf == other._buf

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CellBuffer(cols={self._cols}, rows={self._rows})"


def _check_dimensions(cols: int, rows: int) -> None:
    if cols < 0 or rows < 0:
        raise ValueError(f"Buffer dimensions must be non-negative, got {cols}x{rows}")
