"""
Operation values and the pipe operator.

An Operation wraps a one-argument callable that mutates a widget and
returns a handle for further piping. Operations are applied with ``|``:

    widget | bordered() | rounded_corners() | fg("cyan")

The left operand decides how an operation is applied:

    Widget        applied once; the operation's return value is the result
    Children      applied to each direct child in order; the view is returned
    list / tuple  applied to each element in order (the result of
                  Widget.get_descendants()); the same collection is returned

Two Operations piped together make a new, reusable Operation that applies
both in written order. Nothing here catches exceptions: if an operation
raises, the expression stops there and earlier mutations stay applied.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Sequence, Union

from widgetpipe.widget import Children, Widget

Target = Union[Widget, Children, Sequence[Widget]]


class Operation:
    """A deferred, reusable mutation of one widget."""

    __slots__ = ("_func", "_name")

    def __init__(self, func: Callable[[Any], Any], name: Optional[str] = None) -> None:
        object.__setattr__(self, "_func", func)
        object.__setattr__(self, "_name", name or getattr(func, "__name__", "operation"))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"Operation({self._name})"

    @property
    def name(self) -> str:
        return self._name

    def __call__(self, widget: Any) -> Any:
        return self._func(widget)

    def __ror__(self, target: Any) -> Any:
        if isinstance(target, Widget):
            return self._func(target)
        if isinstance(target, Children):
            for child in target:
                self._func(child)
            return target
        if isinstance(target, (list, tuple)):
            for widget in target:
                self._func(widget)
            return target
        return NotImplemented

    def __or__(self, other: Any) -> "Operation":
        if not isinstance(other, Operation):
            return NotImplemented
        first = self

        def _chain(target: Any) -> Any:
            return first._apply_to(target) | other

        return Operation(_chain, f"{self._name} | {other._name}")

    def _apply_to(self, target: Any) -> Any:
        result = self.__ror__(target)
        if result is NotImplemented:
            raise TypeError(f"Cannot pipe {type(target).__name__} into {self!r}")
        return result


def apply(target: Target, *operations: Operation) -> Any:
    """Apply operations to target left to right, like ``target | op1 | op2``.

    Example:
        apply(panel, bordered(), doubled_walls(), bg("blue"))
    """
    result: Any = target
    for operation in operations:
        result = result | operation
    return result


def chain(*operations: Operation) -> Operation:
    """Compose operations into one reusable Operation."""
    if not operations:
        raise ValueError("chain() needs at least one operation")
    composed = operations[0]
    for operation in operations[1:]:
        composed = composed | operation
    return composed


# Widget Accessors ------------------------------------------------------------


def children() -> Operation:
    """Widget -> view over its direct children."""

    def _children(w: Widget) -> Children:
        return w.get_children()

    return Operation(_children, "children")


def descendants() -> Operation:
    """Widget -> list of every descendant, pre-order."""

    def _descendants(w: Widget) -> List[Widget]:
        return w.get_descendants()

    return Operation(_descendants, "descendants")
