"""
Widget model for widgetpipe.

These are the objects pipe operations mutate: the Widget tree node and the
value types it is built from (brushes, glyphs, borders, size policies).

Example usage:
    from widgetpipe.widget import Attribute, Widget

    root = Widget("root")
    root.add_child(Widget("status"))
    for child in root.get_children():
        child.brush.add_attributes(Attribute.BOLD)
"""

from .animation import AnimationEngine, default_engine
from .border import CORNER_NAMES, SEGMENT_NAMES, WALL_NAMES, Border, Segment, Segments
from .brush import Attribute, Brush, parse_color
from .cursor import Cursor
from .events import Event, EventKind, Mouse
from .focus_policy import FocusPolicy
from .glyph import Glyph
from .signals import Signal
from .size_policy import SizePolicy, SizePolicyType
from .widget import Children, Widget

__all__ = [
    # Tree
    "Widget",
    "Children",
    # Paint state
    "Attribute",
    "Brush",
    "Glyph",
    "parse_color",
    "Border",
    "Segment",
    "Segments",
    "SEGMENT_NAMES",
    "WALL_NAMES",
    "CORNER_NAMES",
    "Cursor",
    # Layout
    "FocusPolicy",
    "SizePolicy",
    "SizePolicyType",
    # Events
    "Event",
    "EventKind",
    "Mouse",
    "Signal",
    "AnimationEngine",
    "default_engine",
]
