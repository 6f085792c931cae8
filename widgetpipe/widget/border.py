"""
Border: an on/off switch plus eight independently configurable segments.

Each segment carries its own glyph and its own enabled flag. Changing a
segment's glyph never changes whether it is enabled, and disabling the
border as a whole leaves every segment untouched.
"""

from __future__ import annotations

from typing import Iterator, Tuple

from .brush import Brush
from .glyph import Glyph, GlyphLike

SEGMENT_NAMES: Tuple[str, ...] = (
    "north",
    "south",
    "east",
    "west",
    "north_east",
    "north_west",
    "south_east",
    "south_west",
)

WALL_NAMES: Tuple[str, ...] = SEGMENT_NAMES[:4]
CORNER_NAMES: Tuple[str, ...] = SEGMENT_NAMES[4:]

DEFAULT_GLYPHS = {
    "north": "─",
    "south": "─",
    "east": "│",
    "west": "│",
    "north_east": "┐",
    "north_west": "┌",
    "south_east": "┘",
    "south_west": "└",
}


class Segment:
    """One border position: a glyph and whether it is drawn."""

    __slots__ = ("glyph", "enabled")

    def __init__(self, glyph: GlyphLike, enabled: bool = True) -> None:
        self.glyph = Glyph.from_value(glyph)
        self.enabled = enabled

    def __repr__(self) -> str:
        state = "on" if self.enabled else "off"
        return f"Segment({self.glyph!r}, {state})"

    @property
    def brush(self) -> Brush:
        return self.glyph.brush

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def set_glyph(self, glyph: GlyphLike) -> None:
        """Replace the glyph (symbol and brush), keeping the enabled flag."""
        self.glyph = Glyph.from_value(glyph)


class Segments:
    """Fixed record of the eight border segments."""

    __slots__ = SEGMENT_NAMES

    def __init__(self) -> None:
        for name in SEGMENT_NAMES:
            setattr(self, name, Segment(DEFAULT_GLYPHS[name]))

    def __iter__(self) -> Iterator[Segment]:
        for name in SEGMENT_NAMES:
            yield getattr(self, name)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in SEGMENT_NAMES)
        return f"Segments({fields})"

    def get(self, name: str) -> Segment:
        if name not in SEGMENT_NAMES:
            raise KeyError(f"Unknown border segment: {name!r}")
        return getattr(self, name)

    def items(self) -> Iterator[Tuple[str, Segment]]:
        for name in SEGMENT_NAMES:
            yield name, getattr(self, name)

    def enabled_names(self) -> Tuple[str, ...]:
        return tuple(name for name, segment in self.items() if segment.enabled)


class Border:
    """A widget's border; disabled by default with all segments enabled."""

    __slots__ = ("enabled", "segments")

    def __init__(self) -> None:
        self.enabled = False
        self.segments = Segments()

    def __repr__(self) -> str:
        return f"Border(enabled={self.enabled}, segments={self.segments!r})"

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def is_visible(self) -> bool:
        return self.enabled and any(segment.enabled for segment in self.segments)

    # Space the border takes on each side of the content area.

    def north_enabled(self) -> bool:
        s = self.segments
        return self.enabled and (s.north.enabled or s.north_east.enabled or s.north_west.enabled)

    def south_enabled(self) -> bool:
        s = self.segments
        return self.enabled and (s.south.enabled or s.south_east.enabled or s.south_west.enabled)

    def east_enabled(self) -> bool:
        s = self.segments
        return self.enabled and (s.east.enabled or s.north_east.enabled or s.south_east.enabled)

    def west_enabled(self) -> bool:
        s = self.segments
        return self.enabled and (s.west.enabled or s.north_west.enabled or s.south_west.enabled)
