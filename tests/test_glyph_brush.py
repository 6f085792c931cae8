"""Tests for Brush, Attribute, parse_color and Glyph."""

import pytest
from rich.color import Color

from widgetpipe.exceptions import ColorError, GlyphError
from widgetpipe.widget import Attribute, Brush, Glyph, parse_color


class TestParseColor:
    def test_named_color(self):
        assert parse_color("red") == Color.parse("red")

    def test_hex_color(self):
        assert parse_color("#ff8800").triplet == (255, 136, 0)

    def test_color_passes_through(self):
        color = Color.parse("blue")
        assert parse_color(color) is color

    def test_unknown_name_raises(self):
        with pytest.raises(ColorError) as exc_info:
            parse_color("not-a-color")
        assert exc_info.value.context["value"] == "not-a-color"

    def test_non_string_raises(self):
        with pytest.raises(ColorError):
            parse_color(42)


class TestBrush:
    def test_defaults(self):
        brush = Brush()
        assert brush.foreground is None
        assert brush.background is None
        assert brush.attributes == Attribute(0)

    def test_add_and_remove_attributes(self):
        brush = Brush()
        brush.add_attributes(Attribute.BOLD, Attribute.UNDERLINE)
        assert brush.has_attribute(Attribute.BOLD)
        assert brush.has_attribute(Attribute.UNDERLINE)

        brush.remove_attributes(Attribute.BOLD)
        assert not brush.has_attribute(Attribute.BOLD)
        assert brush.has_attribute(Attribute.UNDERLINE)

    def test_add_is_idempotent(self):
        brush = Brush()
        brush.add_attributes(Attribute.BOLD)
        brush.add_attributes(Attribute.BOLD)
        assert brush.attributes == Attribute.BOLD

    def test_remove_absent_attribute_is_noop(self):
        brush = Brush()
        brush.remove_attributes(Attribute.ITALIC)
        assert brush.attributes == Attribute(0)

    def test_clear_attributes(self):
        brush = Brush(attributes=Attribute.BOLD | Attribute.DIM)
        brush.clear_attributes()
        assert brush.attributes == Attribute(0)

    def test_colors(self):
        brush = Brush()
        brush.set_foreground(parse_color("red"))
        brush.set_background(parse_color("blue"))
        assert brush.foreground == parse_color("red")

        brush.remove_foreground()
        brush.remove_background()
        assert brush.foreground is None
        assert brush.background is None

    def test_copy_is_independent(self):
        brush = Brush(attributes=Attribute.BOLD)
        copy = brush.copy()
        copy.add_attributes(Attribute.ITALIC)
        assert copy != brush
        assert not brush.has_attribute(Attribute.ITALIC)

    def test_merged_over_falls_back_to_base(self):
        base = Brush(foreground=parse_color("red"), background=parse_color("blue"))
        top = Brush(foreground=parse_color("green"), attributes=Attribute.BOLD)
        merged = top.merged_over(base)
        assert merged.foreground == parse_color("green")
        assert merged.background == parse_color("blue")
        assert merged.attributes == Attribute.BOLD

    def test_to_style(self):
        brush = Brush(
            foreground=parse_color("red"),
            attributes=Attribute.BOLD | Attribute.INVERSE | Attribute.INVISIBLE,
        )
        style = brush.to_style()
        assert style.color == parse_color("red")
        assert style.bold is True
        assert style.reverse is True
        assert style.conceal is True
        assert style.italic is None

    def test_standout_renders_as_reverse(self):
        assert Brush(attributes=Attribute.STANDOUT).to_style().reverse is True


class TestGlyph:
    def test_from_string(self):
        glyph = Glyph.from_value("*")
        assert glyph.symbol == "*"
        assert glyph.brush == Brush()

    def test_from_glyph_is_a_copy(self):
        original = Glyph("#", Attribute.BOLD)
        copy = Glyph.from_value(original)
        assert copy == original
        assert copy is not original
        copy.brush.add_attributes(Attribute.ITALIC)
        assert not original.brush.has_attribute(Attribute.ITALIC)

    def test_attributes_in_constructor(self):
        glyph = Glyph("▄", Attribute.INVERSE)
        assert glyph.brush.has_attribute(Attribute.INVERSE)

    def test_equals_plain_string(self):
        assert Glyph("x") == "x"
        assert Glyph("x", Attribute.BOLD) != "x"

    def test_wide_character_accepted(self):
        assert Glyph("█").symbol == "█"

    @pytest.mark.parametrize("bad", ["", "ab", "\n", "\x1b"])
    def test_bad_symbols_rejected(self, bad):
        with pytest.raises(GlyphError):
            Glyph(bad)

    @pytest.mark.parametrize("bad", [None, 7, ["x"], Attribute.BOLD])
    def test_unconvertible_values_rejected(self, bad):
        with pytest.raises(GlyphError):
            Glyph.from_value(bad)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Glyph("x"))
