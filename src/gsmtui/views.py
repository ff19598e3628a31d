"""The closed set of views the controller can be in."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InputMode(Enum):
    """What the active text buffer is being collected for."""

    NEW_SECRET_NAME = "new_secret_name"
    NEW_VERSION_VALUE = "new_version_value"


@dataclass(frozen=True)
class DeleteSecret:
    secret_name: str


@dataclass(frozen=True)
class DestroyVersion:
    secret_name: str
    version_id: str


ConfirmAction = DeleteSecret | DestroyVersion


@dataclass(frozen=True)
class AuthRequired:
    """No usable credentials; offers to run gcloud login."""


@dataclass(frozen=True)
class SecretsList:
    """All secrets of the active project."""


@dataclass(frozen=True)
class SecretDetail:
    """Metadata and versions of the focused secret."""


@dataclass(frozen=True)
class Input:
    """Text entry dialog."""

    mode: InputMode


@dataclass(frozen=True)
class Confirm:
    """Yes/no prompt guarding an irreversible operation.

    The target is captured here when the prompt opens, so the operation acts on
    it even if the list cursor moves while the prompt is visible.
    """

    action: ConfirmAction


@dataclass(frozen=True)
class ProjectSelector:
    """Pick the active project."""


View = AuthRequired | SecretsList | SecretDetail | Input | Confirm | ProjectSelector
