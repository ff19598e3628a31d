"""The view state machine: one action in, state updated, maybe a signal out."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import assert_never

from gsmtui.actions import Action, Char, Signal
from gsmtui.client import SecretClient
from gsmtui.clipboard import copy_to_clipboard
from gsmtui.guards import GuardError, ensure_can_disable, ensure_can_enable, ensure_readable
from gsmtui.models import VersionInfo, VersionState
from gsmtui.orchestrator import ClientFactory, Orchestrator
from gsmtui.projects import ProjectClient
from gsmtui.selection import SelectableList
from gsmtui.state import AppState
from gsmtui.validation import ValidationError, validate_secret_name
from gsmtui.views import (
    AuthRequired,
    Confirm,
    ConfirmAction,
    DeleteSecret,
    DestroyVersion,
    Input,
    InputMode,
    ProjectSelector,
    SecretDetail,
    SecretsList,
    View,
)

logger = logging.getLogger(__name__)

_NAVIGATION = {
    Action.UP: SelectableList.previous,
    Action.DOWN: SelectableList.next,
    Action.TOP: SelectableList.first,
    Action.BOTTOM: SelectableList.last,
}


class Controller:
    """Owns the application state and dispatches actions by current view.

    Args:
        project_id:     Project to start in; ``None`` starts in the project selector.
        client_factory: Builds a :class:`~gsmtui.client.SecretClient` for a project id.
        project_client: Lists projects for the selector.
        clipboard:      Best-effort text sink; returns whether the copy worked.
    """

    def __init__(
        self,
        project_id: str | None = None,
        client_factory: ClientFactory = SecretClient,
        project_client: ProjectClient | None = None,
        clipboard: Callable[[str], bool] = copy_to_clipboard,
    ) -> None:
        self.state = AppState.for_project(project_id)
        self.orchestrator = Orchestrator(self.state, client_factory, project_client)
        self._clipboard = clipboard

    @property
    def wants_text_input(self) -> bool:
        """True while keys should be captured as free text."""
        return isinstance(self.state.current_view, Input) and not self.state.show_help

    async def start(self) -> None:
        """Load the first screen's data."""
        if self.state.has_project:
            await self.orchestrator.load_secrets()
        else:
            await self.orchestrator.load_projects()

    async def handle(self, action: Action | Char) -> Signal | None:
        if action is Action.HELP:
            self.state.show_help = not self.state.show_help
            return None
        if self.state.show_help:
            self.state.show_help = False
            return None

        view = self.state.current_view
        if isinstance(view, Confirm):
            return await self._handle_confirm(action, view.action)
        if isinstance(view, Input):
            return await self._handle_input(action, view.mode)
        if isinstance(view, AuthRequired):
            return self._handle_auth_required(action)
        if isinstance(view, SecretsList):
            return await self._handle_secrets_list(action)
        if isinstance(view, SecretDetail):
            return await self._handle_secret_detail(action)
        if isinstance(view, ProjectSelector):
            return await self._handle_project_selector(action)
        assert_never(view)

    # --- auth ---

    def _handle_auth_required(self, action: Action | Char) -> Signal | None:
        if action is Action.QUIT:
            return Signal.QUIT
        if action is Action.ENTER:
            return Signal.RUN_AUTH
        return None

    async def on_auth_success(self) -> None:
        self.state.set_status("Authentication successful!")
        self.state.current_view = ProjectSelector()
        self.state.previous_view = None
        await self.orchestrator.load_projects()

    def on_auth_failure(self, detail: str | None = None) -> None:
        if detail:
            self.state.set_status(f"Failed to run gcloud: {detail}", is_error=True)
        else:
            self.state.set_status("Authentication was cancelled or failed", is_error=True)

    # --- per-view handlers ---

    async def _handle_secrets_list(self, action: Action | Char) -> Signal | None:
        cache = self.state.cache
        if action is Action.QUIT:
            return Signal.QUIT
        if action in _NAVIGATION:
            _NAVIGATION[action](cache.secrets)
        elif action is Action.ENTER:
            await self.enter_secret_detail()
        elif action is Action.REFRESH:
            await self.orchestrator.load_secrets()
        elif action is Action.NEW_SECRET:
            self.start_input(InputMode.NEW_SECRET_NAME)
        elif action is Action.DELETE:
            secret = cache.selected_secret
            if secret is not None:
                self._open_dialog(Confirm(DeleteSecret(secret.short_name)))
        elif action is Action.OPEN_PROJECT_SELECTOR:
            await self.open_project_selector()
        return None

    async def _handle_secret_detail(self, action: Action | Char) -> Signal | None:
        cache = self.state.cache
        if action is Action.QUIT:
            return Signal.QUIT
        if action in _NAVIGATION:
            _NAVIGATION[action](cache.versions)
        elif action is Action.BACK:
            self.go_back()
        elif action is Action.REFRESH:
            if await self.orchestrator.load_secret(quiet=True):
                await self.orchestrator.load_versions()
        elif action is Action.NEW_VERSION:
            self.start_input(InputMode.NEW_VERSION_VALUE)
        elif action is Action.TOGGLE_REVEAL:
            await self.toggle_reveal()
        elif action is Action.COPY:
            await self.copy_value()
        elif action is Action.ENABLE:
            await self._change_selected_version(
                ensure_can_enable, self.orchestrator.enable_version
            )
        elif action is Action.DISABLE:
            await self._change_selected_version(
                ensure_can_disable, self.orchestrator.disable_version
            )
        elif action is Action.DELETE:
            target = self._selected_version()
            if target is not None:
                secret_name, version = target
                self._open_dialog(Confirm(DestroyVersion(secret_name, version.version)))
        elif action is Action.OPEN_PROJECT_SELECTOR:
            await self.open_project_selector()
        return None

    async def _handle_project_selector(self, action: Action | Char) -> Signal | None:
        if action is Action.QUIT:
            return Signal.QUIT
        if action in _NAVIGATION:
            _NAVIGATION[action](self.state.cache.projects)
        elif action is Action.BACK:
            if self.state.has_project:
                self.go_back()
            else:
                self.state.set_status("Select a project to continue", is_error=True)
        elif action is Action.REFRESH:
            await self.orchestrator.load_projects()
        elif action is Action.ENTER:
            await self.select_project()
        return None

    async def _handle_input(self, action: Action | Char, mode: InputMode) -> Signal | None:
        editor = self.state.editor
        if isinstance(action, Char):
            editor.insert(action.char)
        elif action is Action.QUIT:
            return Signal.QUIT
        elif action is Action.BACK:
            editor.reset()
            self.go_back()
        elif action is Action.ENTER:
            await self.submit_input(mode)
        elif action is Action.BACKSPACE:
            editor.backspace()
        elif action is Action.CURSOR_LEFT:
            editor.move_left()
        elif action is Action.CURSOR_RIGHT:
            editor.move_right()
        return None

    async def _handle_confirm(
        self, action: Action | Char, confirm: ConfirmAction
    ) -> Signal | None:
        if action is Action.ENTER:
            await self.execute_confirmed(confirm)
        elif action in (Action.BACK, Action.QUIT):
            self.go_back()
        return None

    # --- navigation ---

    def _detail_in_scope(self) -> bool:
        return isinstance(self.state.current_view, SecretDetail) or isinstance(
            self.state.previous_view, SecretDetail
        )

    def _open_dialog(self, view: View) -> None:
        self.state.previous_view = self.state.current_view
        self.state.current_view = view

    def go_back(self) -> None:
        """Return to the recorded previous view, or the secrets list if none."""
        previous = self.state.previous_view
        self.state.previous_view = None
        self.state.current_view = previous if previous is not None else SecretsList()
        self.state.cache.hide_value()
        if not self._detail_in_scope():
            self.state.cache.leave_detail()

    async def enter_secret_detail(self) -> None:
        secret = self.state.cache.selected_secret
        if secret is None:
            return
        self.state.cache.focus_secret(secret)
        self.state.previous_view = SecretsList()
        self.state.current_view = SecretDetail()
        await self.orchestrator.load_versions()

    async def open_project_selector(self) -> None:
        self._open_dialog(ProjectSelector())
        await self.orchestrator.load_projects()

    async def select_project(self) -> None:
        project = self.state.cache.projects.selected_item
        if project is None:
            return
        if project.project_id == self.state.project_id:
            self.state.set_status("Already on this project")
            self.go_back()
            return

        logger.info("Switching project %r -> %r", self.state.project_id, project.project_id)
        self.state.project_id = project.project_id
        self.orchestrator.invalidate_client()
        self.state.cache.clear_project_data()
        self.state.current_view = SecretsList()
        self.state.previous_view = None
        self.state.set_status(f"Switched to project: {project.project_id}")
        await self.orchestrator.load_secrets()

    # --- text input ---

    def start_input(self, mode: InputMode) -> None:
        """Open a fresh text input, remembering the current view to return to."""
        self.state.editor.reset()
        self._open_dialog(Input(mode))

    async def submit_input(self, mode: InputMode) -> None:
        text = self.state.editor.take()
        self.go_back()
        if not text:
            self.state.set_status("Input cannot be empty", is_error=True)
            return

        if mode is InputMode.NEW_SECRET_NAME:
            try:
                validate_secret_name(text)
            except ValidationError as exc:
                self.state.set_status(str(exc), is_error=True)
                return
            if await self.orchestrator.create_secret(text):
                await self.orchestrator.load_secrets(quiet=True, focus=text)
        elif mode is InputMode.NEW_VERSION_VALUE:
            secret = self.state.cache.current_secret
            if secret is None:
                return
            if await self.orchestrator.add_version(secret.short_name, text):
                await self.orchestrator.load_versions(quiet=True)
        else:
            assert_never(mode)

    # --- confirmed operations ---

    async def execute_confirmed(self, confirm: ConfirmAction) -> None:
        """Run the operation captured when the prompt opened."""
        if isinstance(confirm, DeleteSecret):
            if await self.orchestrator.delete_secret(confirm.secret_name):
                self.state.current_view = SecretsList()
                self.state.previous_view = None
                self.state.cache.leave_detail()
                await self.orchestrator.load_secrets(quiet=True)
            else:
                self.go_back()
        elif isinstance(confirm, DestroyVersion):
            self.go_back()
            if await self.orchestrator.destroy_version(confirm.secret_name, confirm.version_id):
                await self.orchestrator.load_versions(quiet=True)
        else:
            assert_never(confirm)

    # --- version operations ---

    def _selected_version(self) -> tuple[str, VersionInfo] | None:
        secret = self.state.cache.current_secret
        version = self.state.cache.selected_version
        if secret is None or version is None:
            return None
        return secret.short_name, version

    async def toggle_reveal(self) -> None:
        cache = self.state.cache
        if cache.revealed_value is not None:
            cache.hide_value()
            return
        target = self._selected_version()
        if target is None:
            return
        secret_name, version = target
        try:
            ensure_readable(version.state, "access")
        except GuardError as exc:
            self.state.set_status(str(exc), is_error=True)
            return
        value = await self.orchestrator.access_version(secret_name, version.version)
        if value is not None:
            cache.revealed_value = value
            self.state.set_status("Press 's' to hide value")

    async def copy_value(self) -> None:
        target = self._selected_version()
        if target is None:
            return
        secret_name, version = target
        try:
            ensure_readable(version.state, "copy")
        except GuardError as exc:
            self.state.set_status(str(exc), is_error=True)
            return
        value = await self.orchestrator.access_version(secret_name, version.version)
        if value is None:
            return
        if self._clipboard(value):
            self.state.set_status("Copied to clipboard!")
        else:
            self.state.set_status("Clipboard not available", is_error=True)

    async def _change_selected_version(
        self,
        guard: Callable[[VersionState], None],
        operation: Callable[[str, str], Awaitable[bool]],
    ) -> None:
        target = self._selected_version()
        if target is None:
            return
        secret_name, version = target
        try:
            guard(version.state)
        except GuardError as exc:
            self.state.set_status(str(exc), is_error=True)
            return
        if await operation(secret_name, version.version):
            await self.orchestrator.load_versions(quiet=True)
