"""Text-entry cursor state for a widget."""

from __future__ import annotations

from typing import Tuple, Union

from textual.geometry import Offset

PointLike = Union[Offset, Tuple[int, int]]


class Cursor:
    """Whether the cursor is shown and where, relative to the content area.

    Positions are zero-based (column, row) pairs. They are stored as given;
    clipping an out-of-range cursor is left to the renderer.
    """

    __slots__ = ("enabled", "position")

    def __init__(self) -> None:
        self.enabled = False
        self.position = Offset(0, 0)

    def __repr__(self) -> str:
        return f"Cursor(enabled={self.enabled}, position={tuple(self.position)})"

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def set_position(self, point: PointLike) -> None:
        x, y = point
        self.position = Offset(x, y)
