"""
Pipe operations for configuring widgets.

An operation is built by a factory and applied with ``|`` to a widget, to
the view returned by ``get_children()``, or to the list returned by
``get_descendants()``:

    from widgetpipe import pipe as op

    panel | op.bordered() | op.rounded_corners() | op.fg("cyan")
    panel | op.children() | op.add(Attribute.BOLD)
    panel | op.descendants() | op.strong_focus()

Operations compose into reusable values:

    card = op.bordered() | op.bold_walls() | op.bg("grey15")
    sidebar | card
    content | card
"""

from .core import Operation, apply, chain, children, descendants
from .widget_ops import (
    name,
    install_filter,
    remove_filter,
    animate,
    disanimate,
    wallpaper,
    wallpaper_with_brush,
    wallpaper_without_brush,
    bg,
    fg,
    remove_background,
    remove_foreground,
    add,
    remove,
    clear_attributes,
    show_cursor,
    hide_cursor,
    put_cursor,
    focus,
    no_focus,
    tab_focus,
    click_focus,
    strong_focus,
    direct_focus,
)
from .layout_ops import (
    fixed_width,
    minimum_width,
    maximum_width,
    preferred_width,
    expanding_width,
    minimum_expanding_width,
    ignored_width,
    width_hint,
    width_min,
    width_max,
    width_stretch,
    can_ignore_width_min,
    cannot_ignore_width_min,
    fixed_height,
    minimum_height,
    maximum_height,
    preferred_height,
    expanding_height,
    minimum_expanding_height,
    ignored_height,
    height_hint,
    height_min,
    height_max,
    height_stretch,
    can_ignore_height_min,
    cannot_ignore_height_min,
)
from .border_ops import (
    bordered,
    not_bordered,
    north_border,
    south_border,
    east_border,
    west_border,
    north_east_border,
    north_west_border,
    south_east_border,
    south_west_border,
    north_south_border,
    east_west_border,
    corners_border,
    no_corners_border,
    no_walls_border,
    north_wall,
    south_wall,
    east_wall,
    west_wall,
    north_south_walls,
    east_west_walls,
    north_east_corner,
    north_east_walls,
    north_west_corner,
    north_west_walls,
    south_east_corner,
    south_east_walls,
    south_west_corner,
    south_west_walls,
)
from .glyph_sets import (
    squared_corners,
    rounded_corners,
    plus_corners,
    asterisk_walls,
    doubled_walls,
    bold_walls,
    dashed_walls_1,
    bold_dashed_walls_1,
    dashed_walls_2,
    bold_dashed_walls_2,
    dashed_walls_3,
    bold_dashed_walls_3,
    dashed_walls_4,
    bold_dashed_walls_4,
    block_walls_1,
    block_walls_2,
    block_walls_3,
    block_walls_4,
    half_block_walls,
    half_block_inner_walls_1,
    half_block_inner_walls_2,
    block_corners,
    floating_block_corners,
)
from .signal_ops import (
    on_enable,
    on_disable,
    on_child_added,
    on_child_removed,
    on_child_polished,
    on_move,
    on_resize,
    on_mouse_press,
    on_mouse_release,
    on_mouse_double_click,
    on_mouse_move,
    on_key_press,
    on_key_release,
    on_focus_in,
    on_focus_out,
    on_delete,
    on_paint,
    on_timer,
    on_destroy,
)

__all__ = [
    # Core
    "Operation",
    "chain",
    "apply",
    "children",
    "descendants",
    # Widget modifiers
    "name",
    "install_filter",
    "remove_filter",
    "animate",
    "disanimate",
    "wallpaper",
    "wallpaper_with_brush",
    "wallpaper_without_brush",
    "bg",
    "fg",
    "remove_background",
    "remove_foreground",
    "add",
    "remove",
    "clear_attributes",
    "show_cursor",
    "hide_cursor",
    "put_cursor",
    "focus",
    "no_focus",
    "tab_focus",
    "click_focus",
    "strong_focus",
    "direct_focus",
    # Size policies
    "fixed_width",
    "minimum_width",
    "maximum_width",
    "preferred_width",
    "expanding_width",
    "minimum_expanding_width",
    "ignored_width",
    "width_hint",
    "width_min",
    "width_max",
    "width_stretch",
    "can_ignore_width_min",
    "cannot_ignore_width_min",
    "fixed_height",
    "minimum_height",
    "maximum_height",
    "preferred_height",
    "expanding_height",
    "minimum_expanding_height",
    "ignored_height",
    "height_hint",
    "height_min",
    "height_max",
    "height_stretch",
    "can_ignore_height_min",
    "cannot_ignore_height_min",
    # Border shapes and glyphs
    "bordered",
    "not_bordered",
    "north_border",
    "south_border",
    "east_border",
    "west_border",
    "north_east_border",
    "north_west_border",
    "south_east_border",
    "south_west_border",
    "north_south_border",
    "east_west_border",
    "corners_border",
    "no_corners_border",
    "no_walls_border",
    "north_wall",
    "south_wall",
    "east_wall",
    "west_wall",
    "north_south_walls",
    "east_west_walls",
    "north_east_corner",
    "north_east_walls",
    "north_west_corner",
    "north_west_walls",
    "south_east_corner",
    "south_east_walls",
    "south_west_corner",
    "south_west_walls",
    # Pre-fab glyph sets
    "squared_corners",
    "rounded_corners",
    "plus_corners",
    "asterisk_walls",
    "doubled_walls",
    "bold_walls",
    "dashed_walls_1",
    "bold_dashed_walls_1",
    "dashed_walls_2",
    "bold_dashed_walls_2",
    "dashed_walls_3",
    "bold_dashed_walls_3",
    "dashed_walls_4",
    "bold_dashed_walls_4",
    "block_walls_1",
    "block_walls_2",
    "block_walls_3",
    "block_walls_4",
    "half_block_walls",
    "half_block_inner_walls_1",
    "half_block_inner_walls_2",
    "block_corners",
    "floating_block_corners",
    # Signals
    "on_enable",
    "on_disable",
    "on_child_added",
    "on_child_removed",
    "on_child_polished",
    "on_move",
    "on_resize",
    "on_mouse_press",
    "on_mouse_release",
    "on_mouse_double_click",
    "on_mouse_move",
    "on_key_press",
    "on_key_release",
    "on_focus_in",
    "on_focus_out",
    "on_delete",
    "on_paint",
    "on_timer",
    "on_destroy",
]
