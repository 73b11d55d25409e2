"""Renderers that read a CellBuffer and produce terminal output."""

from termgrid.render.diff import changed_cells
from termgrid.render.terminal import ColorMode, TerminalRenderer
from termgrid.render.text import TextRenderer

__all__ = ["ColorMode", "TerminalRenderer", "TextRenderer", "changed_cells"]
