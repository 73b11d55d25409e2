"""Style - one side (foreground or background) of a cell's appearance."""

import dataclasses
from dataclasses import dataclass

from termgrid.core.attr import Attr
from termgrid.core.color import Color


@dataclass(frozen=True, slots=True)
class Style:
    """
    A (Color, Attr) pair.

    Styles are immutable; changing a field produces a new Style via
    :meth:`replace`, so one instance can be shared between any number
    of cells.
    """
    color: Color = Color.DEFAULT
    attr: Attr = Attr.DEFAULT

    @classmethod
    def from_color(cls, color: Color) -> "Style":
        """Create a Style with the given color and no attributes."""
        return cls(color, Attr.DEFAULT)

    @classmethod
    def from_attr(cls, attr: Attr) -> "Style":
        """Create a Style with the given attributes and the default color."""
        return cls(Color.DEFAULT, attr)

    def replace(self, color: Color | None = None, attr: Attr | None = None) -> "Style":
        """Return a copy with the given fields replaced."""
        changes: dict[str, object] = {}
        if color is not None:
            changes["color"] = color
        if attr is not None:
            changes["attr"] = attr
        return dataclasses.replace(self, **changes)
