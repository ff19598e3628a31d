"""Tests for gsmtui.selection."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from gsmtui.selection import SelectableList


class TestConstruction:
    def test_non_empty_selects_first(self):
        items = SelectableList(["a", "b"])
        assert items.selected == 0
        assert items.selected_item == "a"

    def test_empty_selects_nothing(self):
        items = SelectableList()
        assert items.selected is None
        assert items.selected_item is None
        assert len(items) == 0


class TestNavigation:
    def test_next_advances(self):
        items = SelectableList(["a", "b", "c"])
        items.next()
        assert items.selected == 1

    def test_next_wraps_to_start(self):
        items = SelectableList(["a", "b", "c"])
        items.select(2)
        items.next()
        assert items.selected == 0

    def test_previous_wraps_to_end(self):
        items = SelectableList(["a", "b", "c"])
        items.previous()
        assert items.selected == 2

    def test_first_and_last(self):
        items = SelectableList(["a", "b", "c"])
        items.last()
        assert items.selected_item == "c"
        items.first()
        assert items.selected_item == "a"

    def test_single_item_wraps_onto_itself(self):
        items = SelectableList(["only"])
        items.next()
        assert items.selected == 0
        items.previous()
        assert items.selected == 0

    @pytest.mark.parametrize("op", ["next", "previous", "first", "last"])
    def test_empty_list_ops_keep_none(self, op):
        items = SelectableList()
        getattr(items, op)()
        assert items.selected is None


class TestSelect:
    def test_out_of_range_raises(self):
        items = SelectableList(["a"])
        with pytest.raises(IndexError):
            items.select(1)

    def test_select_where_hit(self):
        items = SelectableList(["a", "b", "c"])
        assert items.select_where(lambda x: x == "c")
        assert items.selected == 2

    def test_select_where_miss_keeps_selection(self):
        items = SelectableList(["a", "b"])
        items.next()
        assert not items.select_where(lambda x: x == "z")
        assert items.selected == 1


class TestReplace:
    def test_replace_resets_to_first(self):
        items = SelectableList(["a", "b", "c"])
        items.last()
        items.replace(["x", "y"])
        assert items.items == ["x", "y"]
        assert items.selected == 0

    def test_replace_with_empty(self):
        items = SelectableList(["a"])
        items.replace([])
        assert items.selected is None

    def test_clear(self):
        items = SelectableList(["a"])
        items.clear()
        assert len(items) == 0
        assert items.selected is None


class TestOnSelect:
    def test_called_on_every_move(self):
        hook = Mock()
        items = SelectableList(["a", "b"], on_select=hook)
        items.next()
        items.previous()
        items.first()
        items.last()
        items.select(0)
        assert hook.call_count == 5

    def test_not_called_on_empty(self):
        hook = Mock()
        items = SelectableList(on_select=hook)
        items.next()
        hook.assert_not_called()

    def test_not_called_on_replace(self):
        hook = Mock()
        items = SelectableList(["a"], on_select=hook)
        items.replace(["b"])
        hook.assert_not_called()
