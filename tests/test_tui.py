"""Tests for gsmtui.tui, driven headless through textual's pilot."""

from __future__ import annotations

from unittest.mock import MagicMock, Mock

import pytest

from gsmtui.client import SecretClientError
from gsmtui.tui import SecretManagerApp
from gsmtui.views import AuthRequired, Input, InputMode, ProjectSelector, SecretDetail

pytestmark = pytest.mark.asyncio


async def _settle(app, pilot) -> None:
    await app.workers.wait_for_complete()
    await pilot.pause()


class TestSecretManagerApp:
    async def test_start_loads_secrets(self, controller, secrets):
        app = SecretManagerApp(controller)
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            assert controller.state.cache.secrets.items == secrets

    async def test_keys_drive_controller(self, controller):
        app = SecretManagerApp(controller)
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            await pilot.press("j")
            await _settle(app, pilot)
            assert controller.state.cache.secrets.selected == 1
            await pilot.press("enter")
            await _settle(app, pilot)
            assert controller.state.current_view == SecretDetail()

    async def test_text_input_captures_letters(self, controller, secret_client):
        app = SecretManagerApp(controller)
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            await pilot.press("n")
            await _settle(app, pilot)
            assert controller.state.current_view == Input(InputMode.NEW_SECRET_NAME)
            for key in ("q", "u", "i", "t"):
                await pilot.press(key)
                await _settle(app, pilot)
            assert controller.state.editor.text == "quit"
            await pilot.press("enter")
            await _settle(app, pilot)
        secret_client.create_secret.assert_awaited_once_with("quit")

    async def test_quit(self, controller):
        app = SecretManagerApp(controller)
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            app.exit = Mock()
            await pilot.press("q")
            await _settle(app, pilot)
            app.exit.assert_called_once_with()

    async def test_auth_flow_runs_login(self, controller, secret_client):
        secret_client.list_secrets.side_effect = SecretClientError("Failed to list secrets: 401")
        login = Mock(return_value=(True, None))
        app = SecretManagerApp(controller, login=login)
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            assert controller.state.current_view == AuthRequired()
            app.suspend = MagicMock()
            await pilot.press("enter")
            await _settle(app, pilot)
            login.assert_called_once_with()
            assert controller.state.current_view == ProjectSelector()
