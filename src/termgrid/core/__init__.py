"""Core data structures for the terminal display model."""

from termgrid.core.attr import Attr
from termgrid.core.buffer import CellBuffer, CellView
from termgrid.core.cell import Cell
from termgrid.core.color import Color, ColorKind
from termgrid.core.style import Style

__all__ = ["Attr", "Cell", "CellBuffer", "CellView", "Color", "ColorKind", "Style"]
