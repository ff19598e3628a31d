"""Interactive re-authentication through the gcloud CLI."""

from __future__ import annotations

import logging
import subprocess

logger = logging.getLogger(__name__)

GCLOUD_LOGIN_COMMAND = ["gcloud", "auth", "application-default", "login"]


def run_gcloud_login() -> tuple[bool, str | None]:
    """Run ``gcloud auth application-default login`` attached to the terminal.

    The caller must release the terminal first; gcloud prints a URL and may
    open a browser.

    Returns:
        ``(True, None)`` when gcloud exits 0, ``(False, None)`` when it exits
        non-zero (cancelled or rejected), and ``(False, detail)`` when gcloud
        could not be started at all.
    """
    try:
        result = subprocess.run(GCLOUD_LOGIN_COMMAND, check=False)
    except OSError as exc:
        logger.warning("Could not start gcloud: %s", exc)
        return False, str(exc)
    if result.returncode != 0:
        logger.info("gcloud login exited with %d", result.returncode)
        return False, None
    return True, None
