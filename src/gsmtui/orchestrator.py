"""Run remote calls on behalf of the controller and fold results into state.

Every entry point has the same shape: raise the busy flag, post an in-progress
status, await exactly one client call, then either update the cache and post a
success status or post an error status.  The busy flag is lowered on every
path.  ``load_secrets`` and ``load_projects`` double as credential checks: when
they fail the view escalates to :class:`~gsmtui.views.AuthRequired`.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from typing import Any

from gsmtui.client import SecretClient, SecretClientError
from gsmtui.models import VersionInfo
from gsmtui.projects import ProjectClient, ProjectClientError
from gsmtui.state import AppState
from gsmtui.views import AuthRequired

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], SecretClient]


class Orchestrator:
    """Single-flight executor for Secret Manager and Resource Manager calls."""

    def __init__(
        self,
        state: AppState,
        client_factory: ClientFactory = SecretClient,
        project_client: ProjectClient | None = None,
    ) -> None:
        self.state = state
        self._client_factory = client_factory
        self._project_client = project_client if project_client is not None else ProjectClient()

    # --- plumbing ---

    @contextmanager
    def _busy(self, progress: str | None) -> Iterator[None]:
        self.state.busy = True
        if progress:
            self.state.set_status(progress)
        try:
            yield
        finally:
            self.state.busy = False

    def _escalate(self, detail: str) -> None:
        self.state.set_status(f"Auth error: {detail}", is_error=True)
        self.state.current_view = AuthRequired()
        self.state.previous_view = None
        self.state.cache.leave_detail()

    def _get_client(self) -> SecretClient | None:
        """Return the cached client, building it for the active project if needed.

        A construction failure escalates to the auth view and returns ``None``.
        """
        if self.state.client is None:
            try:
                self.state.client = self._client_factory(self.state.project_id)
            except SecretClientError as exc:
                logger.warning("Could not build Secret Manager client: %s", exc)
                self._escalate(str(exc))
                return None
            logger.info("Secret Manager client ready for project %s", self.state.project_id)
        return self.state.client

    def invalidate_client(self) -> None:
        self.state.client = None

    async def _run(
        self,
        progress: str,
        call: Callable[[SecretClient], Awaitable[Any]],
        quiet: bool = False,
    ) -> tuple[bool, Any]:
        """Await one non-escalating client call.

        A quiet call skips the *progress* status, leaving whatever the caller
        posted last in place.

        Returns:
            ``(True, result)`` on success, ``(False, None)`` on failure (an
            error status has been posted by then).
        """
        with self._busy(None if quiet else progress):
            client = self._get_client()
            if client is None:
                return False, None
            logger.debug("%s (project=%s)", progress, self.state.project_id)
            try:
                return True, await call(client)
            except SecretClientError as exc:
                logger.warning("%s failed: %s", progress.rstrip("."), exc)
                self.state.set_status(str(exc), is_error=True)
                return False, None

    # --- loads ---

    async def load_secrets(self, quiet: bool = False, focus: str | None = None) -> bool:
        """Reload the secrets list, escalating to the auth view on failure.

        Args:
            quiet: Skip the progress and count statuses, keeping whatever
                status the caller posted.
            focus: Short name of a secret to select after loading.
        """
        with self._busy(None if quiet else "Loading secrets..."):
            client = self._get_client()
            if client is None:
                return False
            try:
                secrets = await client.list_secrets()
            except SecretClientError as exc:
                logger.warning("Listing secrets failed: %s", exc)
                self._escalate(str(exc))
                return False
            cache = self.state.cache
            cache.secrets.replace(secrets)
            if focus is not None:
                cache.secrets.select_where(lambda s: s.short_name == focus)
            logger.debug("Loaded %d secrets for %s", len(secrets), self.state.project_id)
            if not quiet:
                self.state.set_status(f"Loaded {len(secrets)} secrets")
            return True

    async def load_secret(self, quiet: bool = False) -> bool:
        """Re-read the focused secret's metadata, replacing the snapshot."""
        secret = self.state.cache.current_secret
        if secret is None:
            return False
        ok, refreshed = await self._run(
            "Refreshing secret...", lambda c: c.get_secret(secret.short_name), quiet=quiet
        )
        if ok:
            self.state.cache.current_secret = refreshed
            if not quiet:
                self.state.set_status(f"Refreshed secret: {refreshed.short_name}")
        return ok

    async def load_versions(self, quiet: bool = False) -> bool:
        secret = self.state.cache.current_secret
        if secret is None:
            return False
        cache = self.state.cache
        cache.hide_value()
        ok, versions = await self._run(
            "Loading versions...", lambda c: c.list_versions(secret.short_name), quiet=quiet
        )
        if ok:
            cache.versions.replace(versions)
            if not quiet:
                self.state.set_status(f"Loaded {len(versions)} versions")
        return ok

    async def load_projects(self) -> bool:
        """Reload the project list, escalating to the auth view on failure."""
        with self._busy("Loading projects..."):
            try:
                projects = await self._project_client.list_projects()
            except ProjectClientError as exc:
                logger.warning("Listing projects failed: %s", exc)
                self._escalate(str(exc))
                return False
            cache = self.state.cache
            cache.projects.replace(projects)
            if self.state.has_project:
                cache.projects.select_where(lambda p: p.project_id == self.state.project_id)
            self.state.set_status(f"Found {len(projects)} projects")
            return True

    # --- mutations ---

    async def create_secret(self, name: str) -> bool:
        ok, _ = await self._run("Creating secret...", lambda c: c.create_secret(name))
        if ok:
            self.state.set_status(f"Created secret: {name}")
        return ok

    async def delete_secret(self, name: str) -> bool:
        ok, _ = await self._run("Deleting secret...", lambda c: c.delete_secret(name))
        if ok:
            self.state.set_status(f"Deleted secret: {name}")
        return ok

    async def add_version(self, secret_name: str, value: str) -> bool:
        ok, version = await self._run(
            "Adding version...", lambda c: c.add_version(secret_name, value)
        )
        if ok:
            self.state.set_status(f"Added version: {version.version}")
        return ok

    async def access_version(self, secret_name: str, version: str) -> str | None:
        """Fetch a payload; the caller decides what status to show on success."""
        ok, value = await self._run(
            "Fetching value...", lambda c: c.access_version(secret_name, version)
        )
        return value if ok else None

    async def enable_version(self, secret_name: str, version: str) -> bool:
        return await self._change_version(
            "Enabling", "Enabled", lambda c: c.enable_version(secret_name, version)
        )

    async def disable_version(self, secret_name: str, version: str) -> bool:
        return await self._change_version(
            "Disabling", "Disabled", lambda c: c.disable_version(secret_name, version)
        )

    async def destroy_version(self, secret_name: str, version: str) -> bool:
        return await self._change_version(
            "Destroying", "Destroyed", lambda c: c.destroy_version(secret_name, version)
        )

    async def _change_version(
        self,
        doing: str,
        done: str,
        call: Callable[[SecretClient], Awaitable[VersionInfo]],
    ) -> bool:
        ok, result = await self._run(f"{doing} version...", call)
        if ok:
            self.state.set_status(f"{done} version: {result.version}")
        return ok
