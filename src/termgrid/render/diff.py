"""Cell-level diff between two frames."""

from termgrid.core.buffer import CellBuffer
from termgrid.core.cell import Cell


def changed_cells(previous: CellBuffer, current: CellBuffer) -> list[tuple[int, int, Cell]]:
    """
    Return (x, y, cell) for every cell of ``current`` that differs from ``previous``.

    If the dimensions differ, the old frame says nothing useful about
    the new one and every cell of ``current`` is reported.
    """
    if previous.size != current.size:
        return list(current.cells())

    diffs: list[tuple[int, int, Cell]] = []
    for (x, y, cell), old in zip(current.cells(), previous.as_slice()):
        if cell != old:
            diffs.append((x, y, cell))
    return diffs
