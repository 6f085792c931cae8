"""
Hosting widgetpipe widgets inside a Textual application.

PipeView is a Textual widget that displays one widgetpipe Widget. It
turns the model's update() requests into refreshes, forwards Textual input
and focus events through the model's send_event (so event filters and
signal handlers run), and ticks the model's animation engine.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import RenderableType
from textual import events
from textual.app import App, ComposeResult
from textual.widget import Widget as TextualWidget

from widgetpipe.config.settings import get_tick_interval
from widgetpipe.render import WidgetRenderable
from widgetpipe.utils.logging import get_logger
from widgetpipe.widget import Event, EventKind, Widget

logger = logging.getLogger(__name__)


class PipeView(TextualWidget):
    """Textual widget displaying a widgetpipe model widget."""

    DEFAULT_CSS = """
    PipeView {
        width: 1fr;
        height: 1fr;
    }
    """

    def __init__(
        self,
        model: Widget,
        *,
        tick_interval: Optional[float] = None,
        name: Optional[str] = None,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ):
        super().__init__(name=name, id=id, classes=classes)
        self.model = model
        self.tick_interval = tick_interval or get_tick_interval()
        self.can_focus = model.focus_policy.can_focus

    def on_mount(self) -> None:
        self.model.set_repaint_handler(self._on_model_update)
        self.set_interval(self.tick_interval, self._tick)
        logger.debug("Mounted view for %r", self.model)

    def on_unmount(self) -> None:
        self.model.set_repaint_handler(None)

    def render(self) -> RenderableType:
        renderable = WidgetRenderable(self.model, self.size.width, self.size.height)
        self.model.paint()
        return renderable

    def _on_model_update(self, model: Widget) -> None:
        self.can_focus = model.focus_policy.can_focus
        self.refresh()

    def _tick(self) -> None:
        self.model.animation_engine.tick()

    # -------------------------------------------------------------------------
    # Forwarded events
    # -------------------------------------------------------------------------

    def on_resize(self, event: events.Resize) -> None:
        self.model.resize(event.size)

    def on_key(self, event: events.Key) -> None:
        if not self.model.send_event(Event.key_press(event.key)):
            event.stop()

    def on_mouse_down(self, event: events.MouseDown) -> None:
        self.model.send_event(Event.mouse(EventKind.MOUSE_PRESS, event.offset, event.button))

    def on_mouse_up(self, event: events.MouseUp) -> None:
        self.model.send_event(Event.mouse(EventKind.MOUSE_RELEASE, event.offset, event.button))

    def on_mouse_move(self, event: events.MouseMove) -> None:
        self.model.send_event(Event.mouse(EventKind.MOUSE_MOVE, event.offset, event.button))

    def on_click(self, event: events.Click) -> None:
        if getattr(event, "chain", 1) == 2:
            self.model.send_event(Event.mouse(EventKind.MOUSE_DOUBLE_CLICK, event.offset, event.button))

    def on_focus(self, event: events.Focus) -> None:
        self.model.send_event(Event.simple(EventKind.FOCUS_IN))

    def on_blur(self, event: events.Blur) -> None:
        self.model.send_event(Event.simple(EventKind.FOCUS_OUT))


class PreviewApp(App[None]):
    """Minimal app showing one model widget full-screen.

    Usage:
        panel = Widget("panel") | bordered() | rounded_corners()
        PreviewApp(panel).run()
    """

    def __init__(self, model: Widget, *, tick_interval: Optional[float] = None) -> None:
        super().__init__()
        get_logger()
        self.model = model
        self.tick_interval = tick_interval

    def compose(self) -> ComposeResult:
        yield PipeView(self.model, tick_interval=self.tick_interval, id="pipe-view")
