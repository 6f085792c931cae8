"""
Border modifiers.

Shape operations enable the border and set all eight segments on or off
in one step; the result never depends on the segments' previous state.
Wall and corner operations change glyphs only and never touch whether a
segment is enabled.

Wall and corner factories take either a single glyph-convertible value,
which replaces the segment glyph, or any number of Attribute flags, which
are added to the glyph already there:

    widget | north_wall("━") | north_wall(Attribute.BOLD)
"""

from __future__ import annotations

from typing import Any, FrozenSet, Iterable, Tuple

from widgetpipe.exceptions import GlyphError
from widgetpipe.widget import SEGMENT_NAMES, Attribute, Glyph, Widget

from .core import Operation


# Pre-Fab Border Shapes - most common of 256 total combinations ----------------

SHAPES = {
    "bordered": frozenset(SEGMENT_NAMES),
    "north_border": frozenset({"north"}),
    "south_border": frozenset({"south"}),
    "east_border": frozenset({"east"}),
    "west_border": frozenset({"west"}),
    "north_east_border": frozenset({"north", "east", "north_east"}),
    "north_west_border": frozenset({"north", "west", "north_west"}),
    "south_east_border": frozenset({"south", "east", "south_east"}),
    "south_west_border": frozenset({"south", "west", "south_west"}),
    "north_south_border": frozenset({"north", "south"}),
    "east_west_border": frozenset({"east", "west"}),
    "corners_border": frozenset({"north_east", "north_west", "south_east", "south_west"}),
    "no_corners_border": frozenset({"north", "south", "east", "west"}),
    "no_walls_border": frozenset({"north_east", "north_west", "south_east", "south_west"}),
}


def _shape(shape_name: str) -> Operation:
    enabled = SHAPES[shape_name]

    def _apply_shape(w: Widget) -> Widget:
        w.border.enable()
        for segment_name, segment in w.border.segments.items():
            if segment_name in enabled:
                segment.enable()
            else:
                segment.disable()
        w.update()
        return w

    return Operation(_apply_shape, shape_name)


def bordered() -> Operation:
    """Enable the border with all eight segments."""
    return _shape("bordered")


def not_bordered() -> Operation:
    """Disable the border; segment glyphs and flags are kept for later."""

    def _not_bordered(w: Widget) -> Widget:
        w.border.disable()
        w.update()
        return w

    return Operation(_not_bordered, "not_bordered")


def north_border() -> Operation:
    return _shape("north_border")


def south_border() -> Operation:
    return _shape("south_border")


def east_border() -> Operation:
    return _shape("east_border")


def west_border() -> Operation:
    return _shape("west_border")


def north_east_border() -> Operation:
    return _shape("north_east_border")


def north_west_border() -> Operation:
    return _shape("north_west_border")


def south_east_border() -> Operation:
    return _shape("south_east_border")


def south_west_border() -> Operation:
    return _shape("south_west_border")


def north_south_border() -> Operation:
    return _shape("north_south_border")


def east_west_border() -> Operation:
    return _shape("east_west_border")


def corners_border() -> Operation:
    return _shape("corners_border")


def no_corners_border() -> Operation:
    return _shape("no_corners_border")


def no_walls_border() -> Operation:
    return _shape("no_walls_border")


# Wall/Corner Glyphs - Does not change border's enabled state -----------------


def _segment_glyphs(op_name: str, segment_names: Iterable[str], args: Tuple[Any, ...]) -> Operation:
    names: FrozenSet[str] = frozenset(segment_names)
    ordered = tuple(name for name in SEGMENT_NAMES if name in names)

    if all(isinstance(arg, Attribute) for arg in args):
        attributes = args

        def _add_attributes(w: Widget) -> Widget:
            for segment_name in ordered:
                w.border.segments.get(segment_name).brush.add_attributes(*attributes)
            w.update()
            return w

        return Operation(_add_attributes, op_name)

    if len(args) != 1:
        raise GlyphError(f"{op_name}() takes one glyph or Attribute flags", value=args)
    glyph = Glyph.from_value(args[0])

    def _set_glyph(w: Widget) -> Widget:
        for segment_name in ordered:
            w.border.segments.get(segment_name).set_glyph(glyph)
        w.update()
        return w

    return Operation(_set_glyph, op_name)


def north_wall(*args: Any) -> Operation:
    return _segment_glyphs("north_wall", ("north",), args)


def south_wall(*args: Any) -> Operation:
    return _segment_glyphs("south_wall", ("south",), args)


def east_wall(*args: Any) -> Operation:
    return _segment_glyphs("east_wall", ("east",), args)


def west_wall(*args: Any) -> Operation:
    return _segment_glyphs("west_wall", ("west",), args)


def north_south_walls(*args: Any) -> Operation:
    return _segment_glyphs("north_south_walls", ("north", "south"), args)


def east_west_walls(*args: Any) -> Operation:
    return _segment_glyphs("east_west_walls", ("east", "west"), args)


def north_east_corner(*args: Any) -> Operation:
    return _segment_glyphs("north_east_corner", ("north_east",), args)


def north_east_walls(*args: Any) -> Operation:
    return _segment_glyphs("north_east_walls", ("north", "north_east", "east"), args)


def north_west_corner(*args: Any) -> Operation:
    return _segment_glyphs("north_west_corner", ("north_west",), args)


def north_west_walls(*args: Any) -> Operation:
    return _segment_glyphs("north_west_walls", ("north", "north_west", "west"), args)


def south_east_corner(*args: Any) -> Operation:
    return _segment_glyphs("south_east_corner", ("south_east",), args)


def south_east_walls(*args: Any) -> Operation:
    return _segment_glyphs("south_east_walls", ("south", "south_east", "east"), args)


def south_west_corner(*args: Any) -> Operation:
    return _segment_glyphs("south_west_corner", ("south_west",), args)


def south_west_walls(*args: Any) -> Operation:
    return _segment_glyphs("south_west_walls", ("south", "south_west", "west"), args)
