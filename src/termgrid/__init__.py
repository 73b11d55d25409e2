"""
termgrid: in-memory display model for terminal user interfaces

A CellBuffer is a grid of Cells that application code draws into and
a renderer reads from to update the real terminal.

Quick Start:
    >>> import termgrid as tg
    >>> buf = tg.CellBuffer(80, 24, tg.Cell())
    >>> buf.put_text(0, 0, "Hello", fg=tg.Style.from_color(tg.Color.GREEN))
    5
    >>> buf.resize(100, 30)
    >>> print(tg.TerminalRenderer().render(buf))

Features:
    - Row-major cell grid with checked (get) and unchecked (buf[x, y]) access
    - Content-preserving, top-left anchored resize
    - 8 basic colors, 8-bit palette colors and the terminal default
    - Bold / underline / reverse attributes
    - Plain-text and SGR renderers, and a cell diff for incremental updates
"""

__version__ = "0.1.0"

# Core types
from termgrid.core.attr import Attr
from termgrid.core.buffer import CellBuffer
from termgrid.core.cell import Cell
from termgrid.core.color import Color
from termgrid.core.style import Style

# Rendering
from termgrid.render.diff import changed_cells
from termgrid.render.terminal import ColorMode, TerminalRenderer
from termgrid.render.text import TextRenderer

__all__ = [
    # Version
    "__version__",
    # Core types
    "Attr",
    "Cell",
    "CellBuffer",
    "Color",
    "Style",
    # Rendering
    "ColorMode",
    "TerminalRenderer",
    "TextRenderer",
    "changed_cells",
]
