"""Display attributes (bold, underline, reverse)."""

from enum import IntFlag

from termgrid.core.constants import SGR_BOLD, SGR_REVERSE, SGR_UNDERLINE


class Attr(IntFlag):
    """
    The attributes of a Style.

    Every combination of the three toggles is a valid value, so the
    eight members below cover the whole type. ``Attr.DEFAULT`` means
    no attribute and may be used to reset a Style's attributes.
    """
    DEFAULT = 0b000
    BOLD = 0b001
    UNDERLINE = 0b010
    BOLD_UNDERLINE = 0b011
    REVERSE = 0b100
    BOLD_REVERSE = 0b101
    UNDERLINE_REVERSE = 0b110
    BOLD_UNDERLINE_REVERSE = 0b111

    @classmethod
    def _missing_(cls, value: object) -> "Attr":
        raise ValueError(f"{value!r} is not a valid Attr (expected 0-7)")

    @property
    def bold(self) -> bool:
        return bool(self & Attr.BOLD)

    @property
    def underline(self) -> bool:
        return bool(self & Attr.UNDERLINE)

    @property
    def reverse(self) -> bool:
        return bool(self & Attr.REVERSE)

    def sgr_codes(self) -> list[str]:
        """Return the SGR parameters that switch these attributes on."""
        codes: list[str] = []
        if self.bold:
            codes.append(SGR_BOLD)
        if self.underline:
            codes.append(SGR_UNDERLINE)
        if self.reverse:
            codes.append(SGR_REVERSE)
        return codes
