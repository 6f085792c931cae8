"""
Widget: a node in the UI tree and the surface every pipe operation mutates.

A Widget owns its paint state (brush, wallpaper, border, cursor), its
layout hints (focus policy, width/height size policies), its event filters
and one Signal per EventKind. update() is the only way a widget asks to be
redrawn; a host installs a repaint handler to hear about it.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Optional, Tuple

from textual.geometry import Offset, Size

from .animation import AnimationEngine, PeriodSource, default_engine
from .border import Border
from .brush import Brush
from .cursor import Cursor
from .events import Event, EventKind
from .focus_policy import FocusPolicy
from .glyph import Glyph
from .signals import Signal
from .size_policy import SizePolicy

logger = logging.getLogger(__name__)


class Children:
    """Ordered, live view over a widget's direct children.

    The view is not a snapshot: iterating it twice after the tree changed
    yields the new children. One pass of iteration is stable even if the
    tree is modified while iterating.
    """

    __slots__ = ("_owner",)

    def __init__(self, owner: "Widget") -> None:
        self._owner = owner

    def __repr__(self) -> str:
        return f"Children({self._owner!r}, {list(self)!r})"

    def __iter__(self) -> Iterator["Widget"]:
        return iter(tuple(self._owner._children))

    def __len__(self) -> int:
        return len(self._owner._children)

    def __getitem__(self, index: int) -> "Widget":
        return self._owner._children[index]

    def __contains__(self, widget: object) -> bool:
        return any(child is widget for child in self._owner._children)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Children):
            return list(self) == list(other)
        if isinstance(other, (list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    @property
    def owner(self) -> "Widget":
        return self._owner


class Widget:
    """Base widget with every configurable surface the pipe operations use.

    Example:
        root = Widget("root")
        panel = root.add_child(Widget("panel"))
        panel.brush.add_attributes(Attribute.BOLD)
        panel.update()
    """

    def __init__(self, name: str = "", *, animation_engine: Optional[AnimationEngine] = None) -> None:
        self.name = name
        self.parent: Optional[Widget] = None
        self._children: List[Widget] = []
        self._event_filters: List[Widget] = []
        self._filtered_widgets: List[Widget] = []
        self._animation_engine = animation_engine if animation_engine is not None else default_engine
        self._repaint_handler: Optional[Callable[[Widget], None]] = None

        # Paint state
        self.brush = Brush()
        self.wallpaper: Optional[Glyph] = None
        self.wallpaper_with_brush = False
        self.border = Border()
        self.cursor = Cursor()
        self.needs_repaint = False
        self.update_requests = 0

        # Layout
        self.focus_policy = FocusPolicy.NONE
        self.width_policy = SizePolicy()
        self.height_policy = SizePolicy()
        self.position = Offset(0, 0)
        self.size = Size(0, 0)
        self.is_enabled = True

        # Signals, one per EventKind
        self.enabled = Signal("enabled")
        self.disabled = Signal("disabled")
        self.child_added = Signal("child_added")
        self.child_removed = Signal("child_removed")
        self.child_polished = Signal("child_polished")
        self.moved = Signal("moved")
        self.resized = Signal("resized")
        self.mouse_pressed = Signal("mouse_pressed")
        self.mouse_released = Signal("mouse_released")
        self.mouse_double_clicked = Signal("mouse_double_clicked")
        self.mouse_moved = Signal("mouse_moved")
        self.key_pressed = Signal("key_pressed")
        self.key_released = Signal("key_released")
        self.focused_in = Signal("focused_in")
        self.focused_out = Signal("focused_out")
        self.deleted = Signal("deleted")
        self.painted = Signal("painted")
        self.timer = Signal("timer")
        self.destroyed = Signal("destroyed")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"

    def signal(self, kind: EventKind) -> Signal:
        """Return the signal emitted for events of the given kind."""
        return getattr(self, kind.signal_name)

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    def set_name(self, name: str) -> None:
        self.name = name

    # -------------------------------------------------------------------------
    # Tree
    # -------------------------------------------------------------------------

    def add_child(self, child: "Widget") -> "Widget":
        """Append child and return it."""
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self._children.append(child)
        self.send_event(Event(EventKind.CHILD_ADDED, (child,)))
        return child

    def remove_child(self, child: "Widget") -> "Widget":
        """Detach child and return it.

        Raises:
            ValueError: If child is not a direct child of this widget
        """
        for index, existing in enumerate(self._children):
            if existing is child:
                del self._children[index]
                child.parent = None
                self.send_event(Event(EventKind.CHILD_REMOVED, (child,)))
                return child
        raise ValueError(f"{child!r} is not a child of {self!r}")

    def get_children(self) -> Children:
        return Children(self)

    def get_descendants(self) -> List["Widget"]:
        """Every widget below this one in pre-order, excluding this one."""
        descendants: List[Widget] = []
        for child in self._children:
            descendants.append(child)
            descendants.extend(child.get_descendants())
        return descendants

    def polish(self) -> None:
        """Tell the parent this widget's layout hints changed."""
        if self.parent is not None:
            self.parent.send_event(Event(EventKind.CHILD_POLISHED, (self,)))

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    @property
    def event_filters(self) -> Tuple["Widget", ...]:
        return tuple(self._event_filters)

    def install_event_filter(self, event_filter: "Widget") -> None:
        """Show this widget's events to event_filter before handling them.

        Filters see events in installation order. Installing the same
        filter twice makes it see each event twice. Destroying the filter
        removes it from every widget it was installed on.
        """
        self._event_filters.append(event_filter)
        if not any(w is self for w in event_filter._filtered_widgets):
            event_filter._filtered_widgets.append(self)

    def remove_event_filter(self, event_filter: "Widget") -> None:
        """Remove every installation of event_filter; unknown filters are ignored."""
        self._event_filters = [f for f in self._event_filters if f is not event_filter]
        event_filter._filtered_widgets = [w for w in event_filter._filtered_widgets if w is not self]

    def filter_event(self, receiver: "Widget", event: Event) -> bool:
        """Called when installed as a filter on receiver.

        Return True to consume the event so the receiver never sees it.
        """
        return False

    def send_event(self, event: Event) -> bool:
        """Deliver event: filters first, then this widget's signal.

        Returns:
            False if a filter consumed the event, otherwise True
        """
        for event_filter in list(self._event_filters):
            if event_filter.filter_event(self, event):
                logger.debug("%r consumed %s for %r", event_filter, event.kind.name, self)
                return False
        self.signal(event.kind).emit(*event.args)
        return True

    # -------------------------------------------------------------------------
    # State changes that raise events
    # -------------------------------------------------------------------------

    def enable(self) -> None:
        self.is_enabled = True
        self.send_event(Event.simple(EventKind.ENABLE))
        self.update()

    def disable(self) -> None:
        self.is_enabled = False
        self.send_event(Event.simple(EventKind.DISABLE))
        self.update()

    def move_to(self, position: Offset) -> None:
        self.position = Offset(*position)
        self.send_event(Event.move(self.position))

    def resize(self, size: Size) -> None:
        self.size = Size(*size)
        self.send_event(Event.resize(self.size))
        self.update()

    def delete(self) -> None:
        """Detach from the parent, then destroy this subtree."""
        self.send_event(Event(EventKind.DELETE, (self,)))
        if self.parent is not None:
            self.parent.remove_child(self)
        self.destroy()

    def destroy(self) -> None:
        for child in list(self._children):
            child.destroy()
        self.disable_animation()
        for receiver in list(self._filtered_widgets):
            receiver.remove_event_filter(self)
        self.send_event(Event(EventKind.DESTROY, (self,)))

    # -------------------------------------------------------------------------
    # Animation
    # -------------------------------------------------------------------------

    @property
    def animation_engine(self) -> AnimationEngine:
        return self._animation_engine

    @property
    def is_animated(self) -> bool:
        return self._animation_engine.is_registered(self)

    def enable_animation(self, period: PeriodSource) -> None:
        """Redraw periodically; replaces any previous period source."""
        self._animation_engine.register(self, period)

    def disable_animation(self) -> None:
        self._animation_engine.unregister(self)

    # -------------------------------------------------------------------------
    # Wallpaper and repaint
    # -------------------------------------------------------------------------

    def set_wallpaper(self, glyph: Optional[Glyph]) -> None:
        """Set the background fill glyph, or None for no fill."""
        self.wallpaper = glyph.copy() if glyph is not None else None
        self.update()

    def paint_wallpaper_with_brush(self, enabled: bool) -> None:
        self.wallpaper_with_brush = enabled
        self.update()

    def set_repaint_handler(self, handler: Optional[Callable[["Widget"], None]]) -> None:
        self._repaint_handler = handler

    def update(self) -> None:
        """Request a redraw of this widget."""
        self.needs_repaint = True
        self.update_requests += 1
        if self._repaint_handler is not None:
            self._repaint_handler(self)

    def paint(self) -> None:
        """Mark the widget as drawn and announce it on the painted signal."""
        self.needs_repaint = False
        self.send_event(Event.simple(EventKind.PAINT))
