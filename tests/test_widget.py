"""Tests for Widget: tree, events, filters, signals and repaint."""

import pytest
from textual.geometry import Offset, Size

from widgetpipe.widget import Children, Event, EventKind, Glyph, Mouse, Signal, Widget


class RecordingFilter(Widget):
    """Event filter that records what it sees and optionally consumes."""

    def __init__(self, name="filter", consume=(), **kwargs):
        super().__init__(name, **kwargs)
        self.seen = []
        self.consume = set(consume)

    def filter_event(self, receiver, event):
        self.seen.append((receiver.name, event.kind))
        return event.kind in self.consume


class TestSignal:
    def test_emit_calls_handlers_in_order(self):
        calls = []
        signal = Signal("test")
        signal.connect(lambda x: calls.append(("first", x)))
        signal.connect(lambda x: calls.append(("second", x)))
        signal.emit(1)
        assert calls == [("first", 1), ("second", 1)]

    def test_handlers_accumulate(self):
        calls = []
        handler = lambda: calls.append(1)  # noqa: E731
        signal = Signal("test")
        signal.connect(handler)
        signal.connect(handler)
        signal()
        assert calls == [1, 1]
        assert len(signal) == 2

    def test_handler_connected_during_emit_runs_next_time(self):
        calls = []
        signal = Signal("test")

        def first():
            calls.append("first")
            signal.connect(lambda: calls.append("late"))

        signal.connect(first)
        signal.emit()
        assert calls == ["first"]

    def test_non_callable_rejected(self):
        with pytest.raises(TypeError):
            Signal("test").connect("nope")


class TestTree:
    def test_add_child_sets_parent(self, tree):
        assert tree["a"].parent is tree["root"]
        assert list(tree["root"].get_children()) == [tree["a"], tree["b"]]

    def test_add_child_emits_child_added(self):
        added = []
        root = Widget("root")
        root.child_added.connect(added.append)
        child = root.add_child(Widget("child"))
        assert added == [child]

    def test_reparenting_removes_from_old_parent(self, tree):
        tree["b"].add_child(tree["a1"])
        assert tree["a1"] not in tree["a"].get_children()
        assert tree["a1"].parent is tree["b"]

    def test_remove_child(self, tree):
        removed = []
        tree["root"].child_removed.connect(removed.append)
        tree["root"].remove_child(tree["b"])
        assert removed == [tree["b"]]
        assert tree["b"].parent is None
        assert len(tree["root"].get_children()) == 1

    def test_remove_unknown_child_raises(self, tree):
        with pytest.raises(ValueError):
            tree["root"].remove_child(tree["a1"])

    def test_descendants_pre_order(self, tree):
        names = [w.name for w in tree["root"].get_descendants()]
        assert names == ["a", "a1", "a2", "b"]

    def test_leaf_has_no_descendants(self, tree):
        assert tree["a1"].get_descendants() == []

    def test_children_view_is_live(self, tree):
        view = tree["root"].get_children()
        tree["root"].add_child(Widget("c"))
        assert [w.name for w in view] == ["a", "b", "c"]

    def test_children_view_iteration_is_stable(self, tree):
        view = tree["root"].get_children()
        seen = []
        for child in view:
            seen.append(child.name)
            tree["root"].add_child(Widget("late"))
        assert seen == ["a", "b"]

    def test_children_view_equality_and_indexing(self, tree):
        view = tree["root"].get_children()
        assert isinstance(view, Children)
        assert view == [tree["a"], tree["b"]]
        assert view[1] is tree["b"]
        assert view.owner is tree["root"]

    def test_polish_notifies_parent(self, tree):
        polished = []
        tree["a"].child_polished.connect(polished.append)
        tree["a1"].polish()
        assert polished == [tree["a1"]]


class TestEvents:
    def test_send_event_emits_matching_signal(self, widget):
        keys = []
        widget.key_pressed.connect(keys.append)
        assert widget.send_event(Event.key_press("a")) is True
        assert keys == ["a"]

    def test_key_release(self, widget):
        released = []
        widget.key_released.connect(released.append)
        widget.send_event(Event.key_release("q"))
        assert released == ["q"]

    def test_every_kind_has_a_signal(self, widget):
        for kind in EventKind:
            assert isinstance(widget.signal(kind), Signal)

    def test_mouse_event_carries_position_and_button(self, widget):
        presses = []
        widget.mouse_pressed.connect(presses.append)
        widget.send_event(Event.mouse(EventKind.MOUSE_PRESS, Offset(2, 3), button=3))
        assert presses == [Mouse(Offset(2, 3), 3)]

    def test_move_and_resize(self, widget):
        moves, sizes = [], []
        widget.moved.connect(moves.append)
        widget.resized.connect(sizes.append)
        widget.move_to((4, 5))
        widget.resize((10, 3))
        assert widget.position == Offset(4, 5)
        assert widget.size == Size(10, 3)
        assert moves == [Offset(4, 5)]
        assert sizes == [Size(10, 3)]

    def test_enable_disable(self, widget):
        calls = []
        widget.enabled.connect(lambda: calls.append("on"))
        widget.disabled.connect(lambda: calls.append("off"))
        widget.disable()
        assert widget.is_enabled is False
        widget.enable()
        assert widget.is_enabled is True
        assert calls == ["off", "on"]


class TestEventFilters:
    def test_filter_sees_events_first(self, widget):
        event_filter = RecordingFilter()
        widget.install_event_filter(event_filter)
        widget.send_event(Event.key_press("x"))
        assert event_filter.seen == [("widget", EventKind.KEY_PRESS)]

    def test_filter_can_consume(self, widget):
        keys = []
        widget.key_pressed.connect(keys.append)
        widget.install_event_filter(RecordingFilter(consume={EventKind.KEY_PRESS}))
        assert widget.send_event(Event.key_press("x")) is False
        assert keys == []

    def test_filters_run_in_installation_order(self, widget):
        order = []

        class Named(Widget):
            def filter_event(self, receiver, event):
                order.append(self.name)
                return False

        widget.install_event_filter(Named("first"))
        widget.install_event_filter(Named("second"))
        widget.send_event(Event.simple(EventKind.PAINT))
        assert order == ["first", "second"]

    def test_consuming_filter_stops_later_filters(self, widget):
        later = RecordingFilter("later")
        widget.install_event_filter(RecordingFilter("early", consume={EventKind.TIMER}))
        widget.install_event_filter(later)
        widget.send_event(Event.simple(EventKind.TIMER))
        assert later.seen == []

    def test_same_filter_installed_twice_sees_event_twice(self, widget):
        event_filter = RecordingFilter()
        widget.install_event_filter(event_filter)
        widget.install_event_filter(event_filter)
        widget.send_event(Event.simple(EventKind.PAINT))
        assert len(event_filter.seen) == 2

    def test_remove_removes_every_installation(self, widget):
        event_filter = RecordingFilter()
        widget.install_event_filter(event_filter)
        widget.install_event_filter(event_filter)
        widget.remove_event_filter(event_filter)
        assert widget.event_filters == ()

    def test_remove_unknown_filter_is_noop(self, widget):
        widget.remove_event_filter(RecordingFilter())
        assert widget.event_filters == ()

    def test_destroyed_filter_is_removed(self, widget):
        event_filter = RecordingFilter()
        widget.install_event_filter(event_filter)
        event_filter.destroy()
        assert widget.event_filters == ()

    def test_destroyed_filter_is_removed_from_every_widget(self, tree):
        event_filter = RecordingFilter()
        tree["a"].install_event_filter(event_filter)
        tree["b"].install_event_filter(event_filter)
        tree["b"].install_event_filter(event_filter)
        event_filter.destroy()
        assert tree["a"].event_filters == ()
        assert tree["b"].event_filters == ()

    def test_install_remove_cycles_leave_nothing_behind(self, widget):
        event_filter = RecordingFilter()
        for _ in range(100):
            widget.install_event_filter(event_filter)
            widget.remove_event_filter(event_filter)
        assert len(event_filter.destroyed) == 0
        assert event_filter._filtered_widgets == []

    def test_filter_bookkeeping_does_not_touch_destroyed_signal(self, widget):
        destroyed = []
        event_filter = RecordingFilter()
        event_filter.destroyed.connect(destroyed.append)
        widget.install_event_filter(event_filter)
        assert len(event_filter.destroyed) == 1
        event_filter.destroy()
        assert destroyed == [event_filter]


class TestLifecycle:
    def test_delete_detaches_and_destroys_subtree(self, tree):
        destroyed = []
        for name in ("a", "a1", "a2"):
            tree[name].destroyed.connect(lambda w: destroyed.append(w.name))
        tree["a"].delete()
        assert tree["a"].parent is None
        assert tree["root"].get_children() == [tree["b"]]
        assert destroyed == ["a1", "a2", "a"]

    def test_destroy_stops_animation(self, widget):
        widget.enable_animation(0.5)
        assert widget.is_animated
        widget.destroy()
        assert not widget.is_animated


class TestRepaint:
    def test_update_marks_and_counts(self, widget):
        widget.update()
        widget.update()
        assert widget.needs_repaint is True
        assert widget.update_requests == 2

    def test_repaint_handler_called(self, widget):
        calls = []
        widget.set_repaint_handler(calls.append)
        widget.update()
        assert calls == [widget]

    def test_paint_clears_flag_and_emits(self, widget):
        painted = []
        widget.painted.connect(lambda: painted.append(True))
        widget.update()
        widget.paint()
        assert widget.needs_repaint is False
        assert painted == [True]

    def test_set_wallpaper_copies_glyph(self, widget):
        glyph = Glyph(".")
        widget.set_wallpaper(glyph)
        assert widget.wallpaper == glyph
        assert widget.wallpaper is not glyph
        assert widget.update_requests == 1

    def test_clear_wallpaper(self, widget):
        widget.set_wallpaper(Glyph("."))
        widget.set_wallpaper(None)
        assert widget.wallpaper is None
