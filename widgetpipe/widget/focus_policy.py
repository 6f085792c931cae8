"""Focus policy: how a widget takes part in focus traversal."""

from enum import Enum


class FocusPolicy(Enum):
    """Closed set of focus behaviours."""

    NONE = "none"  # Never receives focus
    TAB = "tab"  # Focus by tab traversal only
    CLICK = "click"  # Focus by mouse click only
    STRONG = "strong"  # Focus by tab or click
    DIRECT = "direct"  # Focus only when set programmatically

    @property
    def accepts_tab(self) -> bool:
        return self in (FocusPolicy.TAB, FocusPolicy.STRONG)

    @property
    def accepts_click(self) -> bool:
        return self in (FocusPolicy.CLICK, FocusPolicy.STRONG)

    @property
    def can_focus(self) -> bool:
        return self is not FocusPolicy.NONE
