"""Tests for Operation, the pipe operator and composition."""

import pytest

from widgetpipe.exceptions import SizePolicyError
from widgetpipe.pipe import (
    Operation,
    add,
    apply,
    bg,
    bordered,
    chain,
    children,
    descendants,
    fixed_width,
    fg,
    name,
    strong_focus,
)
from widgetpipe.widget import Attribute, FocusPolicy, Widget, parse_color


def _recorder(log, label):
    def _record(w):
        log.append((label, w.name))
        return w

    return Operation(_record, label)


class TestOperation:
    def test_immutable(self):
        op = bordered()
        with pytest.raises(AttributeError):
            op.foo = 1

    def test_name_and_repr(self):
        assert bordered().name == "bordered"
        assert repr(bordered()) == "Operation(bordered)"

    def test_callable_directly(self, widget):
        assert add(Attribute.BOLD)(widget) is widget
        assert widget.brush.has_attribute(Attribute.BOLD)

    def test_reusable(self, tree):
        op = add(Attribute.ITALIC)
        tree["a"] | op
        tree["b"] | op
        assert tree["a"].brush.has_attribute(Attribute.ITALIC)
        assert tree["b"].brush.has_attribute(Attribute.ITALIC)


class TestPipeOnWidget:
    def test_returns_widget_for_chaining(self, widget):
        result = widget | bordered() | fg("red")
        assert result is widget
        assert widget.border.enabled
        assert widget.brush.foreground == parse_color("red")

    def test_applied_left_to_right(self, widget):
        widget | fg("red") | fg("blue")
        assert widget.brush.foreground == parse_color("blue")

    def test_apply_helper_matches_operator(self, widget):
        assert apply(widget, name("renamed"), strong_focus()) is widget
        assert widget.name == "renamed"
        assert widget.focus_policy is FocusPolicy.STRONG

    def test_apply_with_no_operations_is_noop(self, widget):
        assert apply(widget) is widget
        assert widget.update_requests == 0


class TestPipeOnChildren:
    def test_applies_to_each_direct_child(self, tree):
        log = []
        result = tree["root"] | children() | _recorder(log, "op")
        assert log == [("op", "a"), ("op", "b")]
        assert result == [tree["a"], tree["b"]]

    def test_does_not_touch_parent_or_grandchildren(self, tree):
        tree["root"] | children() | add(Attribute.BOLD)
        assert not tree["root"].brush.has_attribute(Attribute.BOLD)
        assert not tree["a1"].brush.has_attribute(Attribute.BOLD)

    def test_chained_ops_run_op_by_op(self, tree):
        log = []
        tree["root"] | children() | _recorder(log, "first") | _recorder(log, "second")
        assert log == [("first", "a"), ("first", "b"), ("second", "a"), ("second", "b")]

    def test_leaf_children_is_noop(self, tree):
        result = tree["a1"] | children() | bordered()
        assert len(result) == 0

    def test_get_children_view_pipes_directly(self, tree):
        tree["root"].get_children() | strong_focus()
        assert tree["a"].focus_policy is FocusPolicy.STRONG


class TestPipeOnDescendants:
    def test_applies_pre_order(self, tree):
        log = []
        tree["root"] | descendants() | _recorder(log, "op")
        assert [n for _, n in log] == ["a", "a1", "a2", "b"]

    def test_root_not_included(self, tree):
        tree["root"] | descendants() | add(Attribute.DIM)
        assert not tree["root"].brush.has_attribute(Attribute.DIM)
        assert all(w.brush.has_attribute(Attribute.DIM) for w in tree["root"].get_descendants())

    def test_empty_descendants_is_noop(self, tree):
        leaf = tree["a1"]
        collection = leaf | descendants()
        assert collection == []
        result = collection | bordered() | fg("red")
        assert result is collection
        assert result == []
        assert leaf.update_requests == 0
        assert not leaf.border.enabled

    def test_list_and_tuple_targets(self, tree):
        targets = (tree["a1"], tree["b"])
        assert (targets | bg("blue")) is targets
        assert tree["b"].brush.background == parse_color("blue")


class TestComposition:
    def test_composed_operation_is_an_operation(self):
        assert isinstance(bordered() | fg("red"), Operation)

    def test_composed_applies_in_written_order(self, widget):
        log = []
        combined = _recorder(log, "first") | _recorder(log, "second")
        widget | combined
        assert log == [("first", "widget"), ("second", "widget")]

    def test_composed_on_children(self, tree):
        card = bordered() | add(Attribute.BOLD)
        tree["root"] | children() | card
        for child in tree["root"].get_children():
            assert child.border.enabled
            assert child.brush.has_attribute(Attribute.BOLD)

    def test_accessor_inside_composition(self, tree):
        everything_below = descendants() | strong_focus()
        tree["a"] | everything_below
        assert tree["a1"].focus_policy is FocusPolicy.STRONG
        assert tree["a"].focus_policy is FocusPolicy.NONE

    def test_chain_helper(self, widget):
        op = chain(bordered(), fg("green"), add(Attribute.UNDERLINE))
        widget | op
        assert widget.border.enabled
        assert widget.brush.has_attribute(Attribute.UNDERLINE)

    def test_chain_needs_operations(self):
        with pytest.raises(ValueError):
            chain()


class TestErrors:
    @pytest.mark.parametrize("target", [None, 3, "widget", {"a": 1}])
    def test_bad_target_raises_type_error(self, target):
        with pytest.raises(TypeError):
            target | bordered()

    def test_bad_target_in_composition_raises_type_error(self):
        with pytest.raises(TypeError):
            (bordered() | fg("red"))(42)

    def test_piping_non_operation_into_operation_fails(self):
        with pytest.raises(TypeError):
            bordered() | 5

    def test_error_stops_expression_without_rollback(self, widget):
        with pytest.raises(SizePolicyError):
            widget | bordered() | fixed_width(-1) | fg("red")
        assert widget.border.enabled
        assert widget.brush.foreground is None

    def test_error_midway_through_children(self, tree):
        def _boom(w):
            if w.name == "b":
                raise RuntimeError("boom")
            w.brush.add_attributes(Attribute.BOLD)
            return w

        with pytest.raises(RuntimeError):
            tree["root"] | children() | Operation(_boom)
        assert tree["a"].brush.has_attribute(Attribute.BOLD)
