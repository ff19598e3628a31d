"""Tests for gsmtui.state."""

from __future__ import annotations

from gsmtui.state import AppState
from gsmtui.views import ProjectSelector, SecretsList


class TestAppState:
    def test_with_project_starts_in_list(self):
        state = AppState.for_project("demo")
        assert state.current_view == SecretsList()
        assert state.has_project

    def test_without_project_starts_in_selector(self):
        state = AppState.for_project(None)
        assert state.current_view == ProjectSelector()
        assert not state.has_project

    def test_set_status_last_write_wins(self):
        state = AppState()
        state.set_status("first")
        state.set_status("second", is_error=True)
        assert state.status.text == "second"
        assert state.status.is_error
