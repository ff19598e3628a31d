"""Tests for gsmtui.models."""

from __future__ import annotations

import dataclasses

import pytest

from gsmtui.models import (
    AutomaticReplication,
    ProjectInfo,
    SecretInfo,
    StatusMessage,
    UserManagedReplication,
    VersionInfo,
    VersionState,
)


class TestReplication:
    def test_automatic(self):
        assert AutomaticReplication().describe() == "Automatic"

    def test_user_managed_lists_locations(self):
        policy = UserManagedReplication(locations=("us-east1", "europe-west1"))
        assert policy.describe() == "User managed (us-east1, europe-west1)"

    def test_user_managed_without_locations(self):
        assert UserManagedReplication().describe() == "User managed"


class TestSecretInfo:
    def test_defaults(self):
        s = SecretInfo(name="projects/p/secrets/API_KEY", short_name="API_KEY")
        assert s.create_time is None
        assert s.labels == ()
        assert isinstance(s.replication, AutomaticReplication)
        assert s.rotation is None
        assert s.version_destroy_ttl is None

    def test_frozen(self):
        s = SecretInfo(name="projects/p/secrets/A", short_name="A")
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.short_name = "B"  # type: ignore[misc]


class TestVersionInfo:
    def test_state_values_are_display_labels(self):
        assert [s.value for s in VersionState] == ["Enabled", "Disabled", "Destroyed", "Unknown"]

    def test_defaults(self):
        v = VersionInfo("1", VersionState.ENABLED)
        assert v.destroy_time is None
        assert v.scheduled_destroy_time is None
        assert not v.has_checksum


class TestProjectInfo:
    def test_display_name_falls_back_to_id(self):
        assert ProjectInfo("my-proj").display_name == "my-proj"

    def test_explicit_display_name(self):
        assert ProjectInfo("my-proj", "My Project").display_name == "My Project"


class TestStatusMessage:
    def test_not_error_by_default(self):
        assert not StatusMessage("Loaded 3 secrets").is_error
