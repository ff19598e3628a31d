"""Data models for gsmtui."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum


class VersionState(Enum):
    """Lifecycle state of a secret version."""

    ENABLED = "Enabled"
    DISABLED = "Disabled"
    DESTROYED = "Destroyed"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class AutomaticReplication:
    """Replication managed by Google."""

    def describe(self) -> str:
        return "Automatic"


@dataclass(frozen=True)
class UserManagedReplication:
    """Replication pinned to user-chosen locations."""

    locations: tuple[str, ...] = ()

    def describe(self) -> str:
        if not self.locations:
            return "User managed"
        return "User managed (" + ", ".join(self.locations) + ")"


ReplicationPolicy = AutomaticReplication | UserManagedReplication


@dataclass(frozen=True)
class Rotation:
    """Rotation schedule attached to a secret."""

    next_rotation_time: datetime | None = None
    rotation_period: timedelta | None = None


@dataclass(frozen=True)
class SecretInfo:
    """Snapshot of a secret's metadata (never patched, only replaced)."""

    name: str                  # full resource name, e.g. projects/p/secrets/API_KEY
    short_name: str            # last path segment only, e.g. "API_KEY"
    create_time: datetime | None = None
    labels: tuple[tuple[str, str], ...] = ()
    annotations: tuple[tuple[str, str], ...] = ()
    replication: ReplicationPolicy = field(default_factory=AutomaticReplication)
    topics: tuple[str, ...] = ()
    version_aliases: tuple[tuple[str, int], ...] = ()
    rotation: Rotation | None = None
    version_destroy_ttl: timedelta | None = None


@dataclass(frozen=True)
class VersionInfo:
    """Snapshot of a single secret version."""

    version: str               # version id, usually numeric but may be an alias
    state: VersionState
    create_time: datetime | None = None
    destroy_time: datetime | None = None
    scheduled_destroy_time: datetime | None = None
    has_checksum: bool = False


@dataclass(frozen=True)
class ProjectInfo:
    """A Google Cloud project the caller can see."""

    project_id: str
    display_name: str = ""

    def __post_init__(self) -> None:
        if not self.display_name:
            object.__setattr__(self, "display_name", self.project_id)


@dataclass(frozen=True)
class StatusMessage:
    """The single status line shown under every view."""

    text: str
    is_error: bool = False
