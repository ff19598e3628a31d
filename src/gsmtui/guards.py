"""Which operations a version's lifecycle state allows."""

from __future__ import annotations

from gsmtui.models import VersionState


class GuardError(Exception):
    """Raised when a version's state forbids the requested operation."""


def ensure_readable(state: VersionState, verb: str = "access") -> None:
    """Allow reading the payload of enabled (or unknown-state) versions only.

    Args:
        state: The version's current state.
        verb:  Word used in the rejection message, e.g. ``"access"`` or ``"copy"``.

    Raises:
        GuardError: For destroyed or disabled versions.
    """
    if state is VersionState.DESTROYED:
        raise GuardError(f"Cannot {verb} destroyed version - data is permanently gone")
    if state is VersionState.DISABLED:
        raise GuardError("Version is disabled - press 'e' to enable it first")


def ensure_can_enable(state: VersionState) -> None:
    if state is not VersionState.DISABLED:
        raise GuardError("Can only enable disabled versions")


def ensure_can_disable(state: VersionState) -> None:
    if state is not VersionState.ENABLED:
        raise GuardError("Can only disable enabled versions")
