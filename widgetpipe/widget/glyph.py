"""
Glyph: a single terminal character paired with its own Brush.

Glyphs are stored by value. Every place that keeps a glyph (a border
segment, a widget wallpaper) stores a copy, so adding attributes to one
stored glyph never leaks into another.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from rich.cells import cell_len
from rich.style import Style

from widgetpipe.exceptions import GlyphError
from .brush import NO_ATTRIBUTES, Attribute, Brush

GlyphLike = Union["Glyph", str]


class Glyph:
    """One printable character and the brush it is painted with."""

    __slots__ = ("symbol", "brush")

    def __init__(self, symbol: str, *attributes: Attribute, brush: Optional[Brush] = None) -> None:
        _check_symbol(symbol)
        self.symbol = symbol
        self.brush = brush.copy() if brush is not None else Brush()
        self.brush.add_attributes(*attributes)

    def __repr__(self) -> str:
        if self.brush.attributes == NO_ATTRIBUTES and self.brush == Brush():
            return f"Glyph({self.symbol!r})"
        return f"Glyph({self.symbol!r}, brush={self.brush!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.symbol == other and self.brush == Brush()
        if not isinstance(other, Glyph):
            return NotImplemented
        return self.symbol == other.symbol and self.brush == other.brush

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> "Glyph":
        return Glyph(self.symbol, brush=self.brush)

    @property
    def style(self) -> Style:
        return self.brush.to_style()

    @classmethod
    def from_value(cls, value: Any) -> "Glyph":
        """Convert a Glyph or a one-character string to a new Glyph.

        Args:
            value: A Glyph (copied) or a single printable character

        Returns:
            A Glyph owned by the caller

        Raises:
            GlyphError: If value is neither, or is not a printable character
        """
        if isinstance(value, Glyph):
            return value.copy()
        if isinstance(value, str):
            return cls(value)
        raise GlyphError(f"Cannot make a glyph from {type(value).__name__}", value=value)


def _check_symbol(symbol: Any) -> None:
    if not isinstance(symbol, str):
        raise GlyphError("Glyph symbol must be a string", value=symbol)
    if len(symbol) != 1:
        raise GlyphError("Glyph symbol must be exactly one character", value=symbol)
    if cell_len(symbol) == 0:
        raise GlyphError("Glyph symbol is not printable", value=symbol)
