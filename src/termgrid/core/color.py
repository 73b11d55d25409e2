"""Color representation for terminal cells."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from termgrid.core.constants import SGR_DEFAULT_BG, SGR_DEFAULT_FG


class ColorKind(Enum):
    """Which variant a Color holds."""
    NAMED = "named"      # One of the 8 basic colors (0-7)
    BYTE = "byte"        # Arbitrary 8-bit palette index (0-255)
    DEFAULT = "default"  # Whatever the terminal's native color is


@dataclass(frozen=True)
class Color:
    """
    An abstract terminal color.

    Either one of the eight basic colors, an index into the 8-bit (256)
    palette, or the terminal's own default color. The basic colors
    correspond to 0x00..0x07 in the 8-bit range, so ``Color.RED`` and
    ``Color.byte(1)`` name the same palette entry without being equal.
    """
    kind: ColorKind
    value: int | None = None

    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    DEFAULT: ClassVar["Color"]

    def __post_init__(self) -> None:
        if self.kind is ColorKind.DEFAULT:
            if self.value is not None:
                raise ValueError(f"Default color carries no value, got {self.value}")
            return
        limit = 7 if self.kind is ColorKind.NAMED else 255
        if self.value is None or not 0 <= self.value <= limit:
            raise ValueError(
                f"{self.kind.value} color value must be 0-{limit}, got {self.value}"
            )

    @classmethod
    def byte(cls, index: int) -> "Color":
        """Create a Color from an 8-bit palette index."""
        return cls(ColorKind.BYTE, index)

    @classmethod
    def named(cls, index: int) -> "Color":
        """Return the basic color with the given number (0-7)."""
        if not 0 <= index <= 7:
            raise ValueError(f"Basic color index must be 0-7, got {index}")
        return _NAMED[index]

    @property
    def is_default(self) -> bool:
        return self.kind is ColorKind.DEFAULT

    def as_numeric(self) -> int:
        """
        Return the 8-bit palette index of this color.

        Raises:
            ValueError: for ``Color.DEFAULT``, which has no palette index.
        """
        if self.kind is ColorKind.DEFAULT:
            raise ValueError(
                "cannot represent terminal-default color as a numeric palette index"
            )
        return self.value  # type: ignore[return-value]

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for this color as a foreground."""
        if self.kind is ColorKind.DEFAULT:
            return SGR_DEFAULT_FG
        if self.kind is ColorKind.NAMED:
            return str(30 + self.as_numeric())
        return f"38;5;{self.as_numeric()}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for this color as a background."""
        if self.kind is ColorKind.DEFAULT:
            return SGR_DEFAULT_BG
        if self.kind is ColorKind.NAMED:
            return str(40 + self.as_numeric())
        return f"48;5;{self.as_numeric()}"

    def __repr__(self) -> str:
        if self.kind is ColorKind.DEFAULT:
            return "Color.DEFAULT"
        if self.kind is ColorKind.NAMED:
            return f"Color.{_NAMES[self.value]}"
        return f"Color.byte({self.value})"


_NAMES = ("BLACK", "RED", "GREEN", "YELLOW", "BLUE", "MAGENTA", "CYAN", "WHITE")

# Initialize class-level color constants
Color.BLACK = Color(ColorKind.NAMED, 0)
Color.RED = Color(ColorKind.NAMED, 1)
Color.GREEN = Color(ColorKind.NAMED, 2)
Color.YELLOW = Color(ColorKind.NAMED, 3)
Color.BLUE = Color(ColorKind.NAMED, 4)
Color.MAGENTA = Color(ColorKind.NAMED, 5)
Color.CYAN = Color(ColorKind.NAMED, 6)
Color.WHITE = Color(ColorKind.NAMED, 7)
Color.DEFAULT = Color(ColorKind.DEFAULT)

_NAMED = tuple(getattr(Color, name) for name in _NAMES)
