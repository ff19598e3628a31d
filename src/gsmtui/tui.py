"""textual host: feeds key presses to the controller and draws its state."""

from __future__ import annotations

import logging
from collections.abc import Callable

from textual import events, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import Static

from gsmtui.actions import Action, Char, Signal
from gsmtui.auth import run_gcloud_login
from gsmtui.controller import Controller
from gsmtui.keys import decode_command, decode_input
from gsmtui.render import render_body, render_header, render_status

logger = logging.getLogger(__name__)

POLL_INTERVAL = 0.1  # seconds between redraws while a call is in flight


class SecretManagerApp(App[None]):
    """Full-screen front end for a :class:`~gsmtui.controller.Controller`.

    Actions are handled one at a time in an exclusive worker; keys pressed
    while one is running are dropped, so the controller never sees two
    actions (or issues two calls) at once.
    """

    TITLE = "gsmtui"
    CSS = """
    #header { height: 1; padding: 0 1; }
    #body { height: 1fr; padding: 0 1; }
    #status { height: 1; padding: 0 1; }
    """
    BINDINGS = [Binding("ctrl+c", "quit", "Quit", show=False, priority=True)]

    def __init__(
        self,
        controller: Controller,
        login: Callable[[], tuple[bool, str | None]] = run_gcloud_login,
    ) -> None:
        super().__init__()
        self.controller = controller
        self._login = login
        self._dispatching = False

    def compose(self) -> ComposeResult:
        yield Static(id="header")
        with Container(id="body"):
            yield Static(id="view")
        yield Static(id="status")

    def on_mount(self) -> None:
        self.set_interval(POLL_INTERVAL, self.redraw)
        self._dispatching = True
        self._start()

    def redraw(self) -> None:
        state = self.controller.state
        self.query_one("#header", Static).update(render_header(state))
        self.query_one("#view", Static).update(render_body(state))
        self.query_one("#status", Static).update(render_status(state.status))

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        if self._dispatching:
            return
        decode = decode_input if self.controller.wants_text_input else decode_command
        action = decode(event.key, event.character)
        if action is None:
            return
        self._dispatching = True
        self._handle(action)

    @work(exclusive=True)
    async def _start(self) -> None:
        try:
            await self.controller.start()
        finally:
            self._finish()

    @work(exclusive=True)
    async def _handle(self, action: Action | Char) -> None:
        try:
            signal = await self.controller.handle(action)
            if signal is Signal.QUIT:
                self.exit()
            elif signal is Signal.RUN_AUTH:
                await self._authenticate()
        finally:
            self._finish()

    async def _authenticate(self) -> None:
        logger.info("Running interactive gcloud login")
        with self.suspend():
            ok, detail = self._login()
        if ok:
            await self.controller.on_auth_success()
        else:
            self.controller.on_auth_failure(detail)

    def _finish(self) -> None:
        self._dispatching = False
        self.redraw()
