"""
Per-axis sizing policy consumed by a layout algorithm.

A SizePolicy is a small record of independent knobs. The named policies
(fixed, minimum, expanding, ...) set the policy type and the hint/bound
fields they imply; the single-field setters touch exactly one field. No
cross-field checking is done: the last write wins.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from widgetpipe.exceptions import SizePolicyError

UNBOUNDED = math.inf


class SizePolicyType(Enum):
    """How a layout should treat the size hint on one axis."""

    FIXED = "fixed"  # Exactly the hint
    MINIMUM = "minimum"  # Hint is the smallest acceptable size
    MAXIMUM = "maximum"  # Hint is the largest acceptable size
    PREFERRED = "preferred"  # Hint preferred, may grow or shrink
    EXPANDING = "expanding"  # Hint preferred, wants as much space as possible
    MINIMUM_EXPANDING = "minimum_expanding"  # Hint is a floor, wants more
    IGNORED = "ignored"  # Hint ignored, takes whatever is given


@dataclass
class SizePolicy:
    """Layout hints for one axis of a widget.

    Attributes:
        policy_type: Which named policy is in effect
        size_hint: Preferred size in cells
        min_size: Smallest size in cells
        max_size: Largest size in cells (math.inf when unbounded)
        stretch_factor: Weight used when distributing extra space
        ignore_min: Whether the layout may shrink below min_size
    """

    policy_type: SizePolicyType = SizePolicyType.PREFERRED
    size_hint: int = 0
    min_size: int = 0
    max_size: float = UNBOUNDED
    stretch_factor: float = 1.0
    ignore_min: bool = True

    def fixed(self, hint: int) -> None:
        hint = _check_size("hint", hint)
        self.policy_type = SizePolicyType.FIXED
        self.size_hint = self.min_size = self.max_size = hint

    def minimum(self, hint: int) -> None:
        hint = _check_size("hint", hint)
        self.policy_type = SizePolicyType.MINIMUM
        self.size_hint = self.min_size = hint
        self.max_size = UNBOUNDED

    def maximum(self, hint: int) -> None:
        hint = _check_size("hint", hint)
        self.policy_type = SizePolicyType.MAXIMUM
        self.size_hint = self.max_size = hint
        self.min_size = 0

    def preferred(self, hint: int) -> None:
        hint = _check_size("hint", hint)
        self.policy_type = SizePolicyType.PREFERRED
        self.size_hint = hint
        self.min_size = 0
        self.max_size = UNBOUNDED

    def expanding(self, hint: int) -> None:
        hint = _check_size("hint", hint)
        self.policy_type = SizePolicyType.EXPANDING
        self.size_hint = hint
        self.min_size = 0
        self.max_size = UNBOUNDED

    def minimum_expanding(self, hint: int) -> None:
        hint = _check_size("hint", hint)
        self.policy_type = SizePolicyType.MINIMUM_EXPANDING
        self.size_hint = self.min_size = hint
        self.max_size = UNBOUNDED

    def ignored(self) -> None:
        self.policy_type = SizePolicyType.IGNORED
        self.min_size = 0
        self.max_size = UNBOUNDED

    def hint(self, value: int) -> None:
        self.size_hint = _check_size("hint", value)

    def min(self, value: int) -> None:
        self.min_size = _check_size("min", value)

    def max(self, value: int) -> None:
        self.max_size = _check_size("max", value)

    def stretch(self, value: float) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
            raise SizePolicyError("Stretch must be a number", field="stretch", value=value)
        if value < 0:
            raise SizePolicyError("Stretch must be non-negative", field="stretch", value=value)
        self.stretch_factor = float(value)

    def can_ignore_min(self, value: bool) -> None:
        self.ignore_min = bool(value)


def _check_size(field: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SizePolicyError("Size must be an integer cell count", field=field, value=value)
    if value < 0:
        raise SizePolicyError("Size must be non-negative", field=field, value=value)
    return value
