"""
Size policy modifiers for the width and height axes.

Each operation sets only the knobs its name implies on the target's
width_policy or height_policy; everything else on the policy is left as
it was. Invalid values are rejected by the policy when applied.
"""

from widgetpipe.widget import Widget

from .core import Operation


# Width Policy Modifiers ---------------------------------------------------


def fixed_width(hint: int) -> Operation:
    def _fixed_width(w: Widget) -> Widget:
        w.width_policy.fixed(hint)
        return w

    return Operation(_fixed_width, "fixed_width")


def minimum_width(hint: int) -> Operation:
    def _minimum_width(w: Widget) -> Widget:
        w.width_policy.minimum(hint)
        return w

    return Operation(_minimum_width, "minimum_width")


def maximum_width(hint: int) -> Operation:
    def _maximum_width(w: Widget) -> Widget:
        w.width_policy.maximum(hint)
        return w

    return Operation(_maximum_width, "maximum_width")


def preferred_width(hint: int) -> Operation:
    def _preferred_width(w: Widget) -> Widget:
        w.width_policy.preferred(hint)
        return w

    return Operation(_preferred_width, "preferred_width")


def expanding_width(hint: int) -> Operation:
    def _expanding_width(w: Widget) -> Widget:
        w.width_policy.expanding(hint)
        return w

    return Operation(_expanding_width, "expanding_width")


def minimum_expanding_width(hint: int) -> Operation:
    def _minimum_expanding_width(w: Widget) -> Widget:
        w.width_policy.minimum_expanding(hint)
        return w

    return Operation(_minimum_expanding_width, "minimum_expanding_width")


def ignored_width() -> Operation:
    def _ignored_width(w: Widget) -> Widget:
        w.width_policy.ignored()
        return w

    return Operation(_ignored_width, "ignored_width")


def width_hint(hint: int) -> Operation:
    def _width_hint(w: Widget) -> Widget:
        w.width_policy.hint(hint)
        return w

    return Operation(_width_hint, "width_hint")


def width_min(min: int) -> Operation:
    def _width_min(w: Widget) -> Widget:
        w.width_policy.min(min)
        return w

    return Operation(_width_min, "width_min")


def width_max(max: int) -> Operation:
    def _width_max(w: Widget) -> Widget:
        w.width_policy.max(max)
        return w

    return Operation(_width_max, "width_max")


def width_stretch(stretch: float) -> Operation:
    """Weight used when the layout hands out extra width."""

    def _width_stretch(w: Widget) -> Widget:
        w.width_policy.stretch(stretch)
        return w

    return Operation(_width_stretch, "width_stretch")


def can_ignore_width_min() -> Operation:
    def _can_ignore_width_min(w: Widget) -> Widget:
        w.width_policy.can_ignore_min(True)
        return w

    return Operation(_can_ignore_width_min, "can_ignore_width_min")


def cannot_ignore_width_min() -> Operation:
    def _cannot_ignore_width_min(w: Widget) -> Widget:
        w.width_policy.can_ignore_min(False)
        return w

    return Operation(_cannot_ignore_width_min, "cannot_ignore_width_min")


# Height Policy Modifiers --------------------------------------------------


def fixed_height(hint: int) -> Operation:
    def _fixed_height(w: Widget) -> Widget:
        w.height_policy.fixed(hint)
        return w

    return Operation(_fixed_height, "fixed_height")


def minimum_height(hint: int) -> Operation:
    def _minimum_height(w: Widget) -> Widget:
        w.height_policy.minimum(hint)
        return w

    return Operation(_minimum_height, "minimum_height")


def maximum_height(hint: int) -> Operation:
    def _maximum_height(w: Widget) -> Widget:
        w.height_policy.maximum(hint)
        return w

    return Operation(_maximum_height, "maximum_height")


def preferred_height(hint: int) -> Operation:
    def _preferred_height(w: Widget) -> Widget:
        w.height_policy.preferred(hint)
        return w

    return Operation(_preferred_height, "preferred_height")


def expanding_height(hint: int) -> Operation:
    def _expanding_height(w: Widget) -> Widget:
        w.height_policy.expanding(hint)
        return w

    return Operation(_expanding_height, "expanding_height")


def minimum_expanding_height(hint: int) -> Operation:
    def _minimum_expanding_height(w: Widget) -> Widget:
        w.height_policy.minimum_expanding(hint)
        return w

    return Operation(_minimum_expanding_height, "minimum_expanding_height")


def ignored_height() -> Operation:
    def _ignored_height(w: Widget) -> Widget:
        w.height_policy.ignored()
        return w

    return Operation(_ignored_height, "ignored_height")


def height_hint(hint: int) -> Operation:
    def _height_hint(w: Widget) -> Widget:
        w.height_policy.hint(hint)
        return w

    return Operation(_height_hint, "height_hint")


def height_min(min: int) -> Operation:
    def _height_min(w: Widget) -> Widget:
        w.height_policy.min(min)
        return w

    return Operation(_height_min, "height_min")


def height_max(max: int) -> Operation:
    def _height_max(w: Widget) -> Widget:
        w.height_policy.max(max)
        return w

    return Operation(_height_max, "height_max")


def height_stretch(stretch: float) -> Operation:
    """Weight used when the layout hands out extra height."""

    def _height_stretch(w: Widget) -> Widget:
        w.height_policy.stretch(stretch)
        return w

    return Operation(_height_stretch, "height_stretch")


def can_ignore_height_min() -> Operation:
    def _can_ignore_height_min(w: Widget) -> Widget:
        w.height_policy.can_ignore_min(True)
        return w

    return Operation(_can_ignore_height_min, "can_ignore_height_min")


def cannot_ignore_height_min() -> Operation:
    def _cannot_ignore_height_min(w: Widget) -> Widget:
        w.height_policy.can_ignore_min(False)
        return w

    return Operation(_cannot_ignore_height_min, "cannot_ignore_height_min")
