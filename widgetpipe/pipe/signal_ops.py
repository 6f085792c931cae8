"""
Widget signal hookups.

Each factory connects a handler to one of the widget's signals. Handlers
accumulate: connecting twice means two calls per emit, in connection
order, and there is no operation to disconnect them.
"""

from widgetpipe.widget import Widget
from widgetpipe.widget.signals import Handler

from .core import Operation


def _connect(op_name: str, signal_name: str, handler: Handler) -> Operation:
    if not callable(handler):
        raise TypeError(f"{op_name}() needs a callable handler, got {handler!r}")

    def _connect_handler(w: Widget) -> Widget:
        getattr(w, signal_name).connect(handler)
        return w

    return Operation(_connect_handler, op_name)


def on_enable(handler: Handler) -> Operation:
    return _connect("on_enable", "enabled", handler)


def on_disable(handler: Handler) -> Operation:
    return _connect("on_disable", "disabled", handler)


def on_child_added(handler: Handler) -> Operation:
    return _connect("on_child_added", "child_added", handler)


def on_child_removed(handler: Handler) -> Operation:
    return _connect("on_child_removed", "child_removed", handler)


def on_child_polished(handler: Handler) -> Operation:
    return _connect("on_child_polished", "child_polished", handler)


def on_move(handler: Handler) -> Operation:
    return _connect("on_move", "moved", handler)


def on_resize(handler: Handler) -> Operation:
    return _connect("on_resize", "resized", handler)


def on_mouse_press(handler: Handler) -> Operation:
    return _connect("on_mouse_press", "mouse_pressed", handler)


def on_mouse_release(handler: Handler) -> Operation:
    return _connect("on_mouse_release", "mouse_released", handler)


def on_mouse_double_click(handler: Handler) -> Operation:
    return _connect("on_mouse_double_click", "mouse_double_clicked", handler)


def on_mouse_move(handler: Handler) -> Operation:
    return _connect("on_mouse_move", "mouse_moved", handler)


def on_key_press(handler: Handler) -> Operation:
    return _connect("on_key_press", "key_pressed", handler)


def on_key_release(handler: Handler) -> Operation:
    return _connect("on_key_release", "key_released", handler)


def on_focus_in(handler: Handler) -> Operation:
    return _connect("on_focus_in", "focused_in", handler)


def on_focus_out(handler: Handler) -> Operation:
    return _connect("on_focus_out", "focused_out", handler)


def on_delete(handler: Handler) -> Operation:
    return _connect("on_delete", "deleted", handler)


def on_paint(handler: Handler) -> Operation:
    return _connect("on_paint", "painted", handler)


def on_timer(handler: Handler) -> Operation:
    return _connect("on_timer", "timer", handler)


def on_destroy(handler: Handler) -> Operation:
    return _connect("on_destroy", "destroyed", handler)
