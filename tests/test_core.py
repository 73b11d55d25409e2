"""Tests for the cell value types (Color, Attr, Style, Cell)."""

import pytest

from termgrid.core.attr import Attr
from termgrid.core.cell import Cell
from termgrid.core.color import Color, ColorKind
from termgrid.core.style import Style


class TestColor:
    """Tests for Color."""

    def test_named_colors_numeric(self) -> None:
        named = [
            Color.BLACK, Color.RED, Color.GREEN, Color.YELLOW,
            Color.BLUE, Color.MAGENTA, Color.CYAN, Color.WHITE,
        ]
        assert [c.as_numeric() for c in named] == list(range(8))

    def test_byte_numeric(self) -> None:
        for n in range(256):
            assert Color.byte(n).as_numeric() == n

    def test_byte_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Color.byte(256)
        with pytest.raises(ValueError):
            Color.byte(-1)

    def test_constructor_enforces_ranges(self) -> None:
        with pytest.raises(ValueError):
            Color(ColorKind.BYTE, 300)
        with pytest.raises(ValueError):
            Color(ColorKind.BYTE)
        with pytest.raises(ValueError):
            Color(ColorKind.NAMED, 8)
        with pytest.raises(ValueError):
            Color(ColorKind.DEFAULT, 5)
        assert Color(ColorKind.BYTE, 255).as_numeric() == 255

    def test_default_has_no_numeric_form(self) -> None:
        with pytest.raises(ValueError, match="terminal-default"):
            Color.DEFAULT.as_numeric()

    def test_named_lookup(self) -> None:
        assert Color.named(1) is Color.RED
        with pytest.raises(ValueError):
            Color.named(8)

    def test_structural_equality(self) -> None:
        assert Color.byte(42) == Color.byte(42)
        assert Color(ColorKind.NAMED, 2) == Color.GREEN
        assert Color(ColorKind.DEFAULT) == Color.DEFAULT
        # Same palette entry, different variant
        assert Color.RED != Color.byte(1)

    def test_to_sgr(self) -> None:
        assert Color.RED.to_sgr_fg() == "31"
        assert Color.BLUE.to_sgr_bg() == "44"
        assert Color.byte(196).to_sgr_fg() == "38;5;196"
        assert Color.byte(17).to_sgr_bg() == "48;5;17"
        assert Color.DEFAULT.to_sgr_fg() == "39"
        assert Color.DEFAULT.to_sgr_bg() == "49"

    def test_repr(self) -> None:
        assert repr(Color.CYAN) == "Color.CYAN"
        assert repr(Color.byte(7)) == "Color.byte(7)"
        assert repr(Color.DEFAULT) == "Color.DEFAULT"


class TestAttr:
    """Tests for Attr."""

    def test_combinations(self) -> None:
        assert Attr.BOLD | Attr.UNDERLINE == Attr.BOLD_UNDERLINE
        assert Attr.UNDERLINE | Attr.REVERSE == Attr.UNDERLINE_REVERSE
        assert Attr.BOLD | Attr.UNDERLINE | Attr.REVERSE == Attr.BOLD_UNDERLINE_REVERSE
        assert int(Attr.DEFAULT) == 0

    def test_extra_bits_rejected(self) -> None:
        with pytest.raises(ValueError):
            Attr(8)
        with pytest.raises(ValueError):
            Attr.BOLD | 8

    def test_toggles(self) -> None:
        attr = Attr.BOLD_REVERSE
        assert attr.bold is True
        assert attr.underline is False
        assert attr.reverse is True
        assert Attr.DEFAULT.bold is False

    def test_sgr_codes(self) -> None:
        assert Attr.DEFAULT.sgr_codes() == []
        assert Attr.BOLD_UNDERLINE_REVERSE.sgr_codes() == ["1", "4", "7"]
        assert Attr.UNDERLINE.sgr_codes() == ["4"]


class TestStyle:
    """Tests for Style."""

    def test_default_style(self) -> None:
        assert Style() == Style(Color.DEFAULT, Attr.DEFAULT)

    def test_from_color(self) -> None:
        assert Style.from_color(Color.GREEN) == Style(Color.GREEN, Attr.DEFAULT)

    def test_from_attr(self) -> None:
        assert Style.from_attr(Attr.BOLD) == Style(Color.DEFAULT, Attr.BOLD)

    def test_replace(self) -> None:
        style = Style(Color.RED, Attr.BOLD)
        assert style.replace(color=Color.BLUE) == Style(Color.BLUE, Attr.BOLD)
        assert style.replace(attr=Attr.UNDERLINE) == Style(Color.RED, Attr.UNDERLINE)
        # Original is untouched
        assert style == Style(Color.RED, Attr.BOLD)

    def test_frozen(self) -> None:
        style = Style()
        with pytest.raises(AttributeError):
            style.color = Color.RED  # type: ignore[misc]


class TestCell:
    """Tests for Cell."""

    def test_default_cell(self) -> None:
        cell = Cell()
        assert cell.ch == ' '
        assert cell.fg == Style()
        assert cell.bg == Style()
        assert cell.is_default() is True

    def test_from_char(self) -> None:
        assert Cell.from_char('x') == Cell('x', Style(), Style())

    def test_from_styles(self) -> None:
        cell = Cell.from_styles(Style(), Style.from_color(Color.RED))
        assert cell.ch == ' '
        assert cell.bg == Style.from_color(Color.RED)

    def test_setters_chain(self) -> None:
        cell = Cell().set_ch('y').set_fg(Style.from_attr(Attr.UNDERLINE)).set_bg(Style.from_color(Color.GREEN))
        assert cell == Cell('y', Style.from_attr(Attr.UNDERLINE), Style.from_color(Color.GREEN))

    def test_cell_copy(self) -> None:
        cell = Cell('X', Style.from_color(Color.RED), Style.from_color(Color.BLUE))
        copy = cell.copy()
        assert copy == cell
        assert copy is not cell
        copy.ch = 'Y'
        assert cell.ch == 'X'

    def test_opaque_character(self) -> None:
        # Control and non-ASCII characters are stored as given
        assert Cell.from_char('\x07').ch == '\x07'
        assert Cell.from_char('é').ch == 'é'

    def test_is_default(self) -> None:
        assert Cell.from_char('X').is_default() is False
        assert Cell.from_styles(Style.from_attr(Attr.BOLD), Style()).is_default() is False
