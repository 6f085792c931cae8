"""
Pre-fab border glyph sets.

Each set is a fixed table of segment -> glyph applied wholesale. A set
only replaces glyphs for the segments it names and never changes which
segments are enabled, so combine a set with a shape:

    widget | bordered() | doubled_walls()
    widget | corners_border() | rounded_corners()
"""

from typing import Dict, Tuple

from widgetpipe.widget import Attribute, Glyph, Widget

from .core import Operation

GlyphTable = Dict[str, Glyph]


def _table(*entries: Tuple[str, str], inverse: Tuple[str, ...] = ()) -> GlyphTable:
    """Build a table; segments listed in inverse get Attribute.INVERSE."""
    table = {}
    for segment_name, symbol in entries:
        if segment_name in inverse:
            table[segment_name] = Glyph(symbol, Attribute.INVERSE)
        else:
            table[segment_name] = Glyph(symbol)
    return table


def _walls(north_south: str, east_west: str) -> GlyphTable:
    return _table(
        ("north", north_south),
        ("south", north_south),
        ("east", east_west),
        ("west", east_west),
    )


def _corners(north_east: str, north_west: str, south_east: str, south_west: str) -> GlyphTable:
    return _table(
        ("north_east", north_east),
        ("north_west", north_west),
        ("south_east", south_east),
        ("south_west", south_west),
    )


def _uniform(symbol: str) -> GlyphTable:
    return {**_walls(symbol, symbol), **_corners(symbol, symbol, symbol, symbol)}


GLYPH_SETS: Dict[str, GlyphTable] = {
    "squared_corners": _corners("┐", "┌", "┘", "└"),
    "rounded_corners": _corners("╮", "╭", "╯", "╰"),
    "plus_corners": _corners("+", "+", "+", "+"),
    "asterisk_walls": _uniform("*"),
    "doubled_walls": {**_walls("═", "║"), **_corners("╗", "╔", "╝", "╚")},
    "bold_walls": {**_walls("━", "┃"), **_corners("┓", "┏", "┛", "┗")},
    "dashed_walls_1": _walls("╶", "╷"),
    "bold_dashed_walls_1": _walls("╺", "╻"),
    "dashed_walls_2": _walls("╌", "╎"),
    "bold_dashed_walls_2": _walls("╍", "╏"),
    "dashed_walls_3": _walls("┄", "┆"),
    "bold_dashed_walls_3": _walls("┅", "┇"),
    "dashed_walls_4": _walls("┈", "┊"),
    "bold_dashed_walls_4": _walls("┉", "┋"),
    "block_walls_1": _uniform("█"),
    "block_walls_2": _uniform("▓"),
    "block_walls_3": _uniform("▒"),
    "block_walls_4": _uniform("░"),
    "half_block_walls": _table(
        ("north", "▄"),
        ("south", "▄"),
        ("east", "▌"),
        ("west", "▌"),
        ("north_east", "▜"),
        ("north_west", "▛"),
        ("south_east", "▟"),
        ("south_west", "▙"),
        inverse=("north", "east"),
    ),
    "half_block_inner_walls_1": _table(
        ("north", "▄"),
        ("south", "▄"),
        ("east", "▌"),
        ("west", "▌"),
        ("north_east", "▖"),
        ("north_west", "▗"),
        ("south_east", "▘"),
        ("south_west", "▝"),
        inverse=("south", "west"),
    ),
    "half_block_inner_walls_2": _table(
        ("north", "▄"),
        ("south", "▄"),
        ("east", "▌"),
        ("west", "▌"),
        ("north_east", "▞"),
        ("north_west", "▚"),
        ("south_east", "▚"),
        ("south_west", "▞"),
        inverse=("south", "west"),
    ),
    "block_corners": _corners("▝", "▘", "▗", "▖"),
    "floating_block_corners": _corners("▖", "▗", "▘", "▝"),
}


def _glyph_set(set_name: str) -> Operation:
    table = GLYPH_SETS[set_name]

    def _apply_glyph_set(w: Widget) -> Widget:
        segments = w.border.segments
        for segment_name, glyph in table.items():
            segments.get(segment_name).set_glyph(glyph)
        w.update()
        return w

    return Operation(_apply_glyph_set, set_name)


def squared_corners() -> Operation:
    return _glyph_set("squared_corners")


def rounded_corners() -> Operation:
    return _glyph_set("rounded_corners")


def plus_corners() -> Operation:
    return _glyph_set("plus_corners")


def asterisk_walls() -> Operation:
    return _glyph_set("asterisk_walls")


def doubled_walls() -> Operation:
    return _glyph_set("doubled_walls")


def bold_walls() -> Operation:
    return _glyph_set("bold_walls")


def dashed_walls_1() -> Operation:
    return _glyph_set("dashed_walls_1")


def bold_dashed_walls_1() -> Operation:
    return _glyph_set("bold_dashed_walls_1")


def dashed_walls_2() -> Operation:
    return _glyph_set("dashed_walls_2")


def bold_dashed_walls_2() -> Operation:
    return _glyph_set("bold_dashed_walls_2")


def dashed_walls_3() -> Operation:
    return _glyph_set("dashed_walls_3")


def bold_dashed_walls_3() -> Operation:
    return _glyph_set("bold_dashed_walls_3")


def dashed_walls_4() -> Operation:
    return _glyph_set("dashed_walls_4")


def bold_dashed_walls_4() -> Operation:
    return _glyph_set("bold_dashed_walls_4")


def block_walls_1() -> Operation:
    return _glyph_set("block_walls_1")


def block_walls_2() -> Operation:
    return _glyph_set("block_walls_2")


def block_walls_3() -> Operation:
    return _glyph_set("block_walls_3")


def block_walls_4() -> Operation:
    return _glyph_set("block_walls_4")


def half_block_walls() -> Operation:
    return _glyph_set("half_block_walls")


def half_block_inner_walls_1() -> Operation:
    return _glyph_set("half_block_inner_walls_1")


def half_block_inner_walls_2() -> Operation:
    return _glyph_set("half_block_inner_walls_2")


def block_corners() -> Operation:
    return _glyph_set("block_corners")


def floating_block_corners() -> Operation:
    return _glyph_set("floating_block_corners")
