"""Render a CellBuffer to terminal-compatible escape sequences."""

from enum import Enum

from termgrid.core.buffer import CellBuffer
from termgrid.core.cell import Cell
from termgrid.core.color import Color, ColorKind
from termgrid.core.constants import CSI, RESET
from termgrid.core.style import Style


class ColorMode(Enum):
    """How many colors the target terminal can show."""
    NONE = "none"          # Monochrome: attributes only
    COLORS_8 = "8"         # Basic colors (SGR 30-37, 40-47)
    COLORS_256 = "256"     # 8-bit palette (SGR 38;5;n, 48;5;n)


class TerminalRenderer:
    """
    Render a CellBuffer to ANSI escape sequences for terminal display.

    Walks the buffer's flat view row by row and only emits an SGR
    sequence when a cell's styling differs from the previous cell's.
    The terminal default color is always left to the terminal and is
    never converted to a palette index.
    """

    def __init__(self, mode: ColorMode = ColorMode.COLORS_256, reset_at_end: bool = True):
        self.mode = mode
        self.reset_at_end = reset_at_end

    def render(self, buffer: CellBuffer) -> str:
        """Render buffer to ANSI string."""
        lines: list[str] = []
        view = buffer.as_slice()
        default_cell = Cell()
        last: tuple[Style, Style] = (default_cell.fg, default_cell.bg)

        for y in range(buffer.rows):
            line_parts: list[str] = []
            for cell in view[buffer.cols * y:buffer.cols * (y + 1)]:
                current = (cell.fg, cell.bg)
                if current != last:
                    line_parts.append(self.sgr(cell.fg, cell.bg))
                    last = current
                line_parts.append(cell.ch)

            # Reset at end of each line to prevent color bleeding into the next
            if last != (default_cell.fg, default_cell.bg):
                line_parts.append(RESET)
                last = (default_cell.fg, default_cell.bg)

            lines.append(''.join(line_parts))

        result = '\n'.join(lines)

        if self.reset_at_end:
            result += RESET

        return result

    def sgr(self, fg: Style, bg: Style) -> str:
        """Build the SGR sequence selecting the given foreground and background."""
        params = ['0']
        params.extend((fg.attr | bg.attr).sgr_codes())
        fg_code = self._color_code(fg.color, foreground=True)
        if fg_code:
            params.append(fg_code)
        bg_code = self._color_code(bg.color, foreground=False)
        if bg_code:
            params.append(bg_code)
        return f"{CSI}{';'.join(params)}m"

    def _color_code(self, color: Color, foreground: bool) -> str | None:
        if self.mode is ColorMode.NONE:
            return None
        if not color.is_default:
            color = self._fit_to_mode(color)
        return color.to_sgr_fg() if foreground else color.to_sgr_bg()

    def _fit_to_mode(self, color: Color) -> Color:
        index = color.as_numeric()
        if self.mode is ColorMode.COLORS_256:
            return Color.byte(index)
        if color.kind is ColorKind.NAMED:
            return color
        # Fold the bright half of the 16-color range onto the basic 8
        if index >= 16:
            return Color.DEFAULT
        return Color.named(index % 8)
