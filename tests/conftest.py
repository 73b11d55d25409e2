"""Shared fixtures for termgrid tests."""

import pytest

from termgrid.core.buffer import CellBuffer
from termgrid.core.cell import Cell
from termgrid.core.color import Color
from termgrid.core.style import Style


@pytest.fixture
def blank() -> Cell:
    """A recognizable blank fill cell."""
    return Cell('X', Style.from_color(Color.RED), Style.from_color(Color.BLUE))


@pytest.fixture
def abcd() -> CellBuffer:
    """
    A 2x2 buffer laid out as:

        A B
        C D
    """
    buffer = CellBuffer(2, 2, Cell())
    buffer[0, 0] = Cell.from_char('A')
    buffer[1, 0] = Cell.from_char('B')
    buffer[0, 1] = Cell.from_char('C')
    buffer[1, 1] = Cell.from_char('D')
    return buffer
