"""Tests for gsmtui.auth."""

from __future__ import annotations

import subprocess
from unittest.mock import patch

from gsmtui.auth import GCLOUD_LOGIN_COMMAND, run_gcloud_login


class TestRunGcloudLogin:
    def test_success(self):
        done = subprocess.CompletedProcess(GCLOUD_LOGIN_COMMAND, 0)
        with patch("gsmtui.auth.subprocess.run", return_value=done) as run:
            assert run_gcloud_login() == (True, None)
        run.assert_called_once_with(
            ["gcloud", "auth", "application-default", "login"], check=False
        )

    def test_cancelled(self):
        done = subprocess.CompletedProcess(GCLOUD_LOGIN_COMMAND, 1)
        with patch("gsmtui.auth.subprocess.run", return_value=done):
            assert run_gcloud_login() == (False, None)

    def test_gcloud_missing(self):
        with patch(
            "gsmtui.auth.subprocess.run",
            side_effect=FileNotFoundError(2, "No such file or directory", "gcloud"),
        ):
            ok, detail = run_gcloud_login()
        assert not ok
        assert "No such file or directory" in detail

