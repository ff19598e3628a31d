"""Tests for gsmtui.cache."""

from __future__ import annotations

from gsmtui.cache import DataCache


class TestDataCache:
    def test_version_selection_hides_value(self, versions):
        cache = DataCache()
        cache.versions.replace(versions)
        cache.revealed_value = "s3cret"
        cache.versions.next()
        assert cache.revealed_value is None

    def test_focus_secret_drops_old_versions(self, secrets, versions):
        cache = DataCache()
        cache.versions.replace(versions)
        cache.revealed_value = "s3cret"
        cache.focus_secret(secrets[1])
        assert cache.current_secret == secrets[1]
        assert len(cache.versions) == 0
        assert cache.revealed_value is None

    def test_clear_project_data(self, secrets, versions):
        cache = DataCache()
        cache.secrets.replace(secrets)
        cache.focus_secret(secrets[0])
        cache.versions.replace(versions)
        cache.clear_project_data()
        assert len(cache.secrets) == 0
        assert len(cache.versions) == 0
        assert cache.current_secret is None

    def test_selected_properties(self, secrets, versions):
        cache = DataCache()
        assert cache.selected_secret is None
        cache.secrets.replace(secrets)
        cache.versions.replace(versions)
        assert cache.selected_secret == secrets[0]
        assert cache.selected_version == versions[0]

