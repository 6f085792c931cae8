"""
Widget events.

Every EventKind corresponds to one signal on Widget; the enum value is
the signal's attribute name. Widget.send_event shows the event to the
installed filters first and then emits that signal with Event.args.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple

from textual.geometry import Offset, Size


class EventKind(Enum):
    """Event kinds and the Widget signal each one emits."""

    ENABLE = "enabled"
    DISABLE = "disabled"
    CHILD_ADDED = "child_added"
    CHILD_REMOVED = "child_removed"
    CHILD_POLISHED = "child_polished"
    MOVE = "moved"
    RESIZE = "resized"
    MOUSE_PRESS = "mouse_pressed"
    MOUSE_RELEASE = "mouse_released"
    MOUSE_DOUBLE_CLICK = "mouse_double_clicked"
    MOUSE_MOVE = "mouse_moved"
    KEY_PRESS = "key_pressed"
    KEY_RELEASE = "key_released"
    FOCUS_IN = "focused_in"
    FOCUS_OUT = "focused_out"
    DELETE = "deleted"
    PAINT = "painted"
    TIMER = "timer"
    DESTROY = "destroyed"

    @property
    def signal_name(self) -> str:
        return self.value


@dataclass(frozen=True)
class Mouse:
    """Mouse state carried by mouse events."""

    position: Offset
    button: int = 1


@dataclass(frozen=True)
class Event:
    """A single event addressed to one widget."""

    kind: EventKind
    args: Tuple[Any, ...] = ()

    @classmethod
    def move(cls, position: Offset) -> "Event":
        return cls(EventKind.MOVE, (position,))

    @classmethod
    def resize(cls, size: Size) -> "Event":
        return cls(EventKind.RESIZE, (size,))

    @classmethod
    def key_press(cls, key: str) -> "Event":
        return cls(EventKind.KEY_PRESS, (key,))

    @classmethod
    def key_release(cls, key: str) -> "Event":
        return cls(EventKind.KEY_RELEASE, (key,))

    @classmethod
    def mouse(cls, kind: EventKind, position: Offset, button: int = 1) -> "Event":
        return cls(kind, (Mouse(position, button),))

    @classmethod
    def simple(cls, kind: EventKind) -> "Event":
        return cls(kind)
