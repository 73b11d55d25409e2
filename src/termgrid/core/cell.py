"""Cell - atomic unit of the display grid."""

from dataclasses import dataclass, field

from termgrid.core.constants import BLANK_CHAR
from termgrid.core.style import Style


@dataclass(slots=True)
class Cell:
    """
    A single point on a terminal display.

    Holds a character plus a foreground and a background Style. The
    character is stored as given: no width calculation, normalization
    or validity check is done here, control characters included.
    """
    ch: str = BLANK_CHAR
    fg: Style = field(default_factory=Style)
    bg: Style = field(default_factory=Style)

    @classmethod
    def from_char(cls, ch: str) -> "Cell":
        """Create a Cell with the given character and default Styles."""
        return cls(ch, Style(), Style())

    @classmethod
    def from_styles(cls, fg: Style, bg: Style) -> "Cell":
        """Create a blank Cell with the given Styles."""
        return cls(BLANK_CHAR, fg, bg)

    def set_ch(self, ch: str) -> "Cell":
        self.ch = ch
        return self

    def set_fg(self, fg: Style) -> "Cell":
        self.fg = fg
        return self

    def set_bg(self, bg: Style) -> "Cell":
        self.bg = bg
        return self

    def copy(self) -> "Cell":
        """Create a copy of this cell."""
        # Styles are frozen, so sharing them is safe
        return Cell(self.ch, self.fg, self.bg)

    def is_default(self) -> bool:
        """Check if this cell is a space with default styles."""
        return self.ch == BLANK_CHAR and self.fg == Style() and self.bg == Style()
