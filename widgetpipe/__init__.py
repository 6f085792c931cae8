"""
widgetpipe - configure terminal widget trees with pipe operations.

    from widgetpipe import Widget, pipe as op

    panel = Widget("panel")
    panel | op.bordered() | op.rounded_corners() | op.fg("cyan")
"""

__version__ = "0.1.0"

from . import pipe
from .exceptions import (
    AnimationError,
    ColorError,
    GlyphError,
    SizePolicyError,
    StyleConfigError,
    WidgetPipeError,
)
from .widget import Attribute, Brush, FocusPolicy, Glyph, Widget

__all__ = [
    "__version__",
    "pipe",
    "Widget",
    "Attribute",
    "Brush",
    "FocusPolicy",
    "Glyph",
    "WidgetPipeError",
    "GlyphError",
    "ColorError",
    "SizePolicyError",
    "AnimationError",
    "StyleConfigError",
]
