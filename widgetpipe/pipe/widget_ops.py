"""
Widget modifiers: identity, event filters, animation, wallpaper, brush,
cursor and focus policy.

Each factory converts and captures its arguments immediately and returns
an Operation that performs the mutation when applied. Operations whose
effect is visible call ``update()`` on the widget.
"""

from __future__ import annotations

from typing import Optional, Union

from rich.color import Color

from widgetpipe.widget import Attribute, FocusPolicy, Glyph, Widget, parse_color
from widgetpipe.widget.animation import PeriodSource
from widgetpipe.widget.cursor import PointLike
from widgetpipe.widget.glyph import GlyphLike

from .core import Operation

ColorLike = Union[Color, str]


# Identity --------------------------------------------------------------------


def name(name: str) -> Operation:
    def _name(w: Widget) -> Widget:
        w.set_name(name)
        return w

    return Operation(_name, "name")


# Event Filters ---------------------------------------------------------------


def install_filter(event_filter: Widget) -> Operation:
    """Install event_filter on the target.

    The operation keeps a live reference to event_filter, not a copy.
    """

    def _install_filter(w: Widget) -> Widget:
        w.install_event_filter(event_filter)
        return w

    return Operation(_install_filter, "install_filter")


def remove_filter(event_filter: Widget) -> Operation:
    def _remove_filter(w: Widget) -> Widget:
        w.remove_event_filter(event_filter)
        return w

    return Operation(_remove_filter, "remove_filter")


# Animation -------------------------------------------------------------------


def animate(period: PeriodSource) -> Operation:
    """Animate with a fixed period in seconds, or a callable returning one.

    A callable is asked for the next period on every tick, which allows
    variable-rate animation. Animating again replaces the previous period.
    """

    def _animate(w: Widget) -> Widget:
        w.enable_animation(period)
        return w

    return Operation(_animate, "animate")


def disanimate() -> Operation:
    def _disanimate(w: Widget) -> Widget:
        w.disable_animation()
        return w

    return Operation(_disanimate, "disanimate")


# Wallpaper -------------------------------------------------------------------


def wallpaper(glyph: Optional[GlyphLike]) -> Operation:
    """Set the background fill glyph; None clears it (no fill at all)."""
    fill = Glyph.from_value(glyph) if glyph is not None else None

    def _wallpaper(w: Widget) -> Widget:
        w.set_wallpaper(fill)
        return w

    return Operation(_wallpaper, "wallpaper")


def wallpaper_with_brush() -> Operation:
    def _wallpaper_with_brush(w: Widget) -> Widget:
        w.paint_wallpaper_with_brush(True)
        return w

    return Operation(_wallpaper_with_brush, "wallpaper_with_brush")


def wallpaper_without_brush() -> Operation:
    def _wallpaper_without_brush(w: Widget) -> Widget:
        w.paint_wallpaper_with_brush(False)
        return w

    return Operation(_wallpaper_without_brush, "wallpaper_without_brush")


# Brush -----------------------------------------------------------------------


def bg(color: ColorLike) -> Operation:
    color = parse_color(color)

    def _bg(w: Widget) -> Widget:
        w.brush.set_background(color)
        w.update()
        return w

    return Operation(_bg, "bg")


def fg(color: ColorLike) -> Operation:
    color = parse_color(color)

    def _fg(w: Widget) -> Widget:
        w.brush.set_foreground(color)
        w.update()
        return w

    return Operation(_fg, "fg")


def remove_background() -> Operation:
    def _remove_background(w: Widget) -> Widget:
        w.brush.remove_background()
        w.update()
        return w

    return Operation(_remove_background, "remove_background")


def remove_foreground() -> Operation:
    def _remove_foreground(w: Widget) -> Widget:
        w.brush.remove_foreground()
        w.update()
        return w

    return Operation(_remove_foreground, "remove_foreground")


def add(*attributes: Attribute) -> Operation:
    attributes = _check_attributes(attributes)

    def _add(w: Widget) -> Widget:
        w.brush.add_attributes(*attributes)
        w.update()
        return w

    return Operation(_add, "add")


def remove(*attributes: Attribute) -> Operation:
    attributes = _check_attributes(attributes)

    def _remove(w: Widget) -> Widget:
        w.brush.remove_attributes(*attributes)
        w.update()
        return w

    return Operation(_remove, "remove")


def clear_attributes() -> Operation:
    def _clear_attributes(w: Widget) -> Widget:
        w.brush.clear_attributes()
        w.update()
        return w

    return Operation(_clear_attributes, "clear_attributes")


# Cursor ----------------------------------------------------------------------


def show_cursor() -> Operation:
    def _show_cursor(w: Widget) -> Widget:
        w.cursor.enable()
        return w

    return Operation(_show_cursor, "show_cursor")


def hide_cursor() -> Operation:
    def _hide_cursor(w: Widget) -> Widget:
        w.cursor.disable()
        return w

    return Operation(_hide_cursor, "hide_cursor")


def put_cursor(point: PointLike) -> Operation:
    """Move the cursor to a zero-based (column, row) in the content area."""
    x, y = point

    def _put_cursor(w: Widget) -> Widget:
        w.cursor.set_position((x, y))
        return w

    return Operation(_put_cursor, "put_cursor")


# Focus Policy ----------------------------------------------------------------


def focus(policy: FocusPolicy) -> Operation:
    policy = FocusPolicy(policy)

    def _focus(w: Widget) -> Widget:
        w.focus_policy = policy
        return w

    return Operation(_focus, "focus")


def no_focus() -> Operation:
    return focus(FocusPolicy.NONE)


def tab_focus() -> Operation:
    return focus(FocusPolicy.TAB)


def click_focus() -> Operation:
    return focus(FocusPolicy.CLICK)


def strong_focus() -> Operation:
    return focus(FocusPolicy.STRONG)


def direct_focus() -> Operation:
    return focus(FocusPolicy.DIRECT)


def _check_attributes(attributes: tuple) -> tuple:
    for attribute in attributes:
        if not isinstance(attribute, Attribute):
            raise TypeError(f"Expected an Attribute, got {attribute!r}")
    return attributes
