"""Shared pytest fixtures for gsmtui tests."""

from __future__ import annotations

from datetime import UTC, datetime
from unittest.mock import AsyncMock, Mock

import pytest

from gsmtui.client import SecretClient
from gsmtui.controller import Controller
from gsmtui.models import ProjectInfo, SecretInfo, VersionInfo, VersionState
from gsmtui.projects import ProjectClient


def make_secret(short_name: str, **kwargs) -> SecretInfo:
    kwargs.setdefault("create_time", datetime(2024, 1, 15, tzinfo=UTC))
    return SecretInfo(name=f"projects/demo/secrets/{short_name}", short_name=short_name, **kwargs)


@pytest.fixture()
def secrets() -> list[SecretInfo]:
    """Three secrets in the ``demo`` project, sorted by short name."""
    return [
        make_secret("API_KEY", labels=(("env", "prod"),)),
        make_secret("DB_PASSWORD"),
        make_secret("TOKEN"),
    ]


@pytest.fixture()
def versions() -> list[VersionInfo]:
    """One version per interesting state, newest first."""
    return [
        VersionInfo("3", VersionState.ENABLED, create_time=datetime(2024, 3, 1, tzinfo=UTC)),
        VersionInfo("2", VersionState.DISABLED, create_time=datetime(2024, 2, 1, tzinfo=UTC)),
        VersionInfo(
            "1",
            VersionState.DESTROYED,
            create_time=datetime(2024, 1, 1, tzinfo=UTC),
            destroy_time=datetime(2024, 2, 2, tzinfo=UTC),
        ),
    ]


@pytest.fixture()
def projects() -> list[ProjectInfo]:
    return [ProjectInfo("demo", "Demo"), ProjectInfo("other", "Other project")]


@pytest.fixture()
def secret_client(secrets, versions):
    """An ``AsyncMock`` standing in for :class:`SecretClient`."""
    client = AsyncMock(spec=SecretClient)
    client.list_secrets.return_value = secrets
    client.list_versions.return_value = versions
    client.get_secret.side_effect = lambda name: make_secret(name, labels=(("fresh", "yes"),))
    client.create_secret.side_effect = lambda name: make_secret(name)
    client.delete_secret.return_value = None
    client.access_version.return_value = "FAKE-secret-value"
    client.add_version.return_value = VersionInfo("4", VersionState.ENABLED)
    client.enable_version.side_effect = lambda s, v: VersionInfo(v, VersionState.ENABLED)
    client.disable_version.side_effect = lambda s, v: VersionInfo(v, VersionState.DISABLED)
    client.destroy_version.side_effect = lambda s, v: VersionInfo(v, VersionState.DESTROYED)
    return client


@pytest.fixture()
def client_factory(secret_client):
    return Mock(return_value=secret_client)


@pytest.fixture()
def project_client(projects):
    client = AsyncMock(spec=ProjectClient)
    client.list_projects.return_value = projects
    return client


@pytest.fixture()
def clipboard():
    return Mock(return_value=True)


@pytest.fixture()
def controller(client_factory, project_client, clipboard) -> Controller:
    """A controller on project ``demo`` wired to the fake clients."""
    return Controller(
        project_id="demo",
        client_factory=client_factory,
        project_client=project_client,
        clipboard=clipboard,
    )
