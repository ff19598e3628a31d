"""List the Google Cloud projects visible to the current credentials."""

from __future__ import annotations

import logging

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import resourcemanager_v3

from gsmtui.client import sanitize_error
from gsmtui.models import ProjectInfo

logger = logging.getLogger(__name__)


class ProjectClientError(Exception):
    """Raised when projects cannot be listed."""


class ProjectClient:
    """Thin wrapper over the Resource Manager ``search_projects`` call.

    The underlying client is built on every call so that credentials obtained
    by an interactive login in the meantime are picked up.
    """

    def __init__(self, client: resourcemanager_v3.ProjectsAsyncClient | None = None) -> None:
        self._client = client

    def _make_client(self) -> resourcemanager_v3.ProjectsAsyncClient:
        if self._client is not None:
            return self._client
        return resourcemanager_v3.ProjectsAsyncClient()

    async def list_projects(self) -> list[ProjectInfo]:
        """Return every project the caller can see, sorted by project id.

        Raises:
            ProjectClientError: On credential or API failure.
        """
        try:
            client = self._make_client()
            # An empty query matches every accessible project.
            pager = await client.search_projects(request={"query": ""})
            projects = [
                ProjectInfo(project_id=p.project_id, display_name=p.display_name)
                async for p in pager
            ]
        except (GoogleAPIError, GoogleAuthError) as exc:
            raise ProjectClientError(f"Failed to list projects: {sanitize_error(exc)}") from exc
        logger.debug("search_projects returned %d projects", len(projects))
        return sorted(projects, key=lambda p: p.project_id)
