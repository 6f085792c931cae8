"""
Animation engine: the timing source behind periodic widget redraws.

Each registered widget has exactly one period source, either a fixed
number of seconds or a zero-argument callable that is asked for the next
period every time the widget fires. A host calls tick() regularly and the
engine fires whatever has come due by its clock (time.monotonic unless
another clock is supplied).
"""

from __future__ import annotations

import logging
import math
import time
import weakref
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Union

from widgetpipe.exceptions import AnimationError

from .events import Event, EventKind

if TYPE_CHECKING:
    from .widget import Widget

logger = logging.getLogger(__name__)

Period = float
PeriodSource = Union[Period, Callable[[], Period]]


@dataclass
class _Schedule:
    key: int
    widget_ref: "weakref.ReferenceType[Widget]"
    source: PeriodSource
    due: float


class AnimationEngine:
    """Fires timer events on registered widgets at their own rates.

    Widgets are held weakly; a widget dropped while animated is forgotten.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._schedules: Dict[int, _Schedule] = {}
        self._clock = clock

    def __len__(self) -> int:
        return len(self._schedules)

    def register(self, widget: "Widget", source: PeriodSource) -> None:
        """Start animating widget, replacing any period source it had.

        Args:
            widget: Widget to send timer events to
            source: Period in seconds, or a callable returning one

        Raises:
            AnimationError: If a fixed period is not a positive number,
                or source is neither a number nor callable
        """
        if not callable(source):
            _check_period(source)
        due = self._clock() + self._next_period(source)
        key = id(widget)
        self._schedules[key] = _Schedule(key, weakref.ref(widget, self._forget), source, due)
        logger.debug("Animating %r", widget)

    def unregister(self, widget: "Widget") -> None:
        if self._schedules.pop(id(widget), None) is not None:
            logger.debug("Stopped animating %r", widget)

    def is_registered(self, widget: "Widget") -> bool:
        return id(widget) in self._schedules

    def source_for(self, widget: "Widget") -> Optional[PeriodSource]:
        schedule = self._schedules.get(id(widget))
        return schedule.source if schedule else None

    def tick(self, now: Optional[float] = None) -> List["Widget"]:
        """Fire every widget whose period has elapsed by now (default: the clock).

        Widgets are fired in registration order. A fired widget gets a timer
        event and, unless an event filter consumed it, an update() request.
        A period callable is asked for a new period after each firing.

        Returns:
            The widgets that received a timer event
        """
        if now is None:
            now = self._clock()
        fired = []
        for schedule in list(self._schedules.values()):
            # Skip widgets stopped or re-registered by an earlier handler.
            if self._schedules.get(schedule.key) is not schedule:
                continue
            widget = schedule.widget_ref()
            if widget is None or schedule.due > now:
                continue
            schedule.due = now + self._next_period(schedule.source)
            fired.append(widget)
            if widget.send_event(Event.simple(EventKind.TIMER)):
                widget.update()
        return fired

    def _forget(self, widget_ref: "weakref.ReferenceType[Widget]") -> None:
        for key, schedule in list(self._schedules.items()):
            if schedule.widget_ref is widget_ref:
                del self._schedules[key]

    def _next_period(self, source: PeriodSource) -> Period:
        if callable(source):
            return _check_period(source())
        return source


def _check_period(period: object) -> Period:
    if isinstance(period, bool) or not isinstance(period, (int, float)):
        raise AnimationError("Animation period must be a number of seconds", period=period)
    if not math.isfinite(period) or period <= 0:
        raise AnimationError("Animation period must be positive", period=period)
    return float(period)


default_engine = AnimationEngine()
