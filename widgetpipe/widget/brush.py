"""
Brush: foreground/background colors plus a set of display attributes.

Colors are optional. An unset color is distinct from a color set to the
terminal default, and renders as "inherit from whatever is underneath".
"""

from __future__ import annotations

from enum import IntFlag
from typing import Optional

from rich.color import Color, ColorParseError
from rich.style import Style

from widgetpipe.exceptions import ColorError


class Attribute(IntFlag):
    """Text rendering attributes, combinable as a bit-set."""

    BOLD = 1 << 0
    ITALIC = 1 << 1
    UNDERLINE = 1 << 2
    STANDOUT = 1 << 3
    DIM = 1 << 4
    INVERSE = 1 << 5
    INVISIBLE = 1 << 6
    BLINK = 1 << 7


NO_ATTRIBUTES = Attribute(0)


class Brush:
    """Mutable paint state used for a widget or a single glyph."""

    __slots__ = ("foreground", "background", "attributes")

    def __init__(
        self,
        foreground: Optional[Color] = None,
        background: Optional[Color] = None,
        attributes: Attribute = NO_ATTRIBUTES,
    ) -> None:
        self.foreground = foreground
        self.background = background
        self.attributes = Attribute(attributes)

    def __repr__(self) -> str:
        return (
            f"Brush(foreground={self.foreground!r}, "
            f"background={self.background!r}, attributes={self.attributes!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Brush):
            return NotImplemented
        return (
            self.foreground == other.foreground
            and self.background == other.background
            and self.attributes == other.attributes
        )

    def set_foreground(self, color: Color) -> None:
        self.foreground = color

    def set_background(self, color: Color) -> None:
        self.background = color

    def remove_foreground(self) -> None:
        self.foreground = None

    def remove_background(self) -> None:
        self.background = None

    def add_attributes(self, *attributes: Attribute) -> None:
        for attribute in attributes:
            self.attributes |= attribute

    def remove_attributes(self, *attributes: Attribute) -> None:
        for attribute in attributes:
            self.attributes &= ~attribute

    def clear_attributes(self) -> None:
        self.attributes = NO_ATTRIBUTES

    def has_attribute(self, attribute: Attribute) -> bool:
        return bool(self.attributes & attribute)

    def copy(self) -> "Brush":
        return Brush(self.foreground, self.background, self.attributes)

    def merged_over(self, base: "Brush") -> "Brush":
        """Return a new brush using this brush's values, falling back to base.

        Colors that are unset here are taken from base; attributes are the
        union of both.
        """
        return Brush(
            foreground=self.foreground if self.foreground is not None else base.foreground,
            background=self.background if self.background is not None else base.background,
            attributes=self.attributes | base.attributes,
        )

    def to_style(self) -> Style:
        """Convert to a Rich Style for rendering."""
        attrs = self.attributes
        return Style(
            color=self.foreground,
            bgcolor=self.background,
            bold=bool(attrs & Attribute.BOLD) or None,
            italic=bool(attrs & Attribute.ITALIC) or None,
            underline=bool(attrs & Attribute.UNDERLINE) or None,
            dim=bool(attrs & Attribute.DIM) or None,
            # Terminals render standout as reverse video.
            reverse=bool(attrs & (Attribute.INVERSE | Attribute.STANDOUT)) or None,
            conceal=bool(attrs & Attribute.INVISIBLE) or None,
            blink=bool(attrs & Attribute.BLINK) or None,
        )


def parse_color(value: "Color | str") -> Color:
    """Convert a color name, hex string or Rich Color to a Color.

    Raises:
        ColorError: If the value cannot be parsed.
    """
    if isinstance(value, Color):
        return value
    if not isinstance(value, str):
        raise ColorError(value=value)
    try:
        return Color.parse(value)
    except ColorParseError as e:
        raise ColorError(str(e), value=value) from e
