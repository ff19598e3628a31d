"""Async wrapper around Google Cloud Secret Manager."""

from __future__ import annotations

import logging
import re

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import secretmanager

from gsmtui.models import (
    AutomaticReplication,
    ReplicationPolicy,
    Rotation,
    SecretInfo,
    UserManagedReplication,
    VersionInfo,
    VersionState,
)

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
_MAX_ERROR_LEN = 200

_STATE_MAP = {
    secretmanager.SecretVersion.State.ENABLED: VersionState.ENABLED,
    secretmanager.SecretVersion.State.DISABLED: VersionState.DISABLED,
    secretmanager.SecretVersion.State.DESTROYED: VersionState.DESTROYED,
}


class SecretClientError(Exception):
    """Raised when a Secret Manager call fails."""


class AuthError(SecretClientError):
    """Raised when no client can be built from the ambient credentials."""


def sanitize_error(exc: Exception) -> str:
    """Reduce an API exception to one short human-readable line."""
    msg = getattr(exc, "message", None) or str(exc) or type(exc).__name__
    msg = _WHITESPACE_RE.sub(" ", str(msg)).strip()
    if len(msg) > _MAX_ERROR_LEN:
        msg = msg[:_MAX_ERROR_LEN] + "…"
    return msg


def _short_name(resource_name: str) -> str:
    return resource_name.rsplit("/", 1)[-1]


def _replication_from_proto(replication: secretmanager.Replication) -> ReplicationPolicy:
    if "user_managed" in replication:
        return UserManagedReplication(
            locations=tuple(r.location for r in replication.user_managed.replicas)
        )
    return AutomaticReplication()


def _optional(message, field: str):
    """Return *field* of *message*, or ``None`` when it was never set."""
    return getattr(message, field) if field in message else None


def secret_from_proto(secret: secretmanager.Secret) -> SecretInfo:
    """Convert a ``Secret`` message to a :class:`SecretInfo` snapshot."""
    rotation = None
    if "rotation" in secret:
        rotation = Rotation(
            next_rotation_time=_optional(secret.rotation, "next_rotation_time"),
            rotation_period=_optional(secret.rotation, "rotation_period"),
        )
    return SecretInfo(
        name=secret.name,
        short_name=_short_name(secret.name),
        create_time=_optional(secret, "create_time"),
        labels=tuple(sorted(secret.labels.items())),
        annotations=tuple(sorted(secret.annotations.items())),
        replication=_replication_from_proto(secret.replication),
        topics=tuple(t.name for t in secret.topics),
        version_aliases=tuple(sorted(secret.version_aliases.items())),
        rotation=rotation,
        version_destroy_ttl=_optional(secret, "version_destroy_ttl"),
    )


def version_from_proto(version: secretmanager.SecretVersion) -> VersionInfo:
    """Convert a ``SecretVersion`` message, decoding its state exactly once."""
    return VersionInfo(
        version=_short_name(version.name) or "?",
        state=_STATE_MAP.get(version.state, VersionState.UNKNOWN),
        create_time=_optional(version, "create_time"),
        destroy_time=_optional(version, "destroy_time"),
        scheduled_destroy_time=_optional(version, "scheduled_destroy_time"),
        has_checksum=bool(version.client_specified_payload_checksum),
    )


class SecretClient:
    """Secret Manager operations scoped to one project.

    Credentials come from Application Default Credentials; run
    ``gcloud auth application-default login`` if none are configured.
    """

    def __init__(
        self,
        project_id: str,
        client: secretmanager.SecretManagerServiceAsyncClient | None = None,
    ) -> None:
        self.project_id = project_id
        if client is None:
            try:
                client = secretmanager.SecretManagerServiceAsyncClient()
            except GoogleAuthError as exc:
                raise AuthError(
                    "Failed to create Secret Manager client. Authenticate with: "
                    f"gcloud auth application-default login ({sanitize_error(exc)})"
                ) from exc
        self._client = client

    @property
    def parent(self) -> str:
        return f"projects/{self.project_id}"

    def secret_path(self, secret_name: str) -> str:
        return f"{self.parent}/secrets/{secret_name}"

    def version_path(self, secret_name: str, version: str) -> str:
        return f"{self.secret_path(secret_name)}/versions/{version}"

    async def list_secrets(self) -> list[SecretInfo]:
        """Return every secret in the project, sorted by short name."""
        try:
            pager = await self._client.list_secrets(request={"parent": self.parent})
            secrets = [secret_from_proto(s) async for s in pager]
        except (GoogleAPIError, GoogleAuthError) as exc:
            raise SecretClientError(f"Failed to list secrets: {sanitize_error(exc)}") from exc
        logger.debug("list_secrets returned %d secrets for %s", len(secrets), self.parent)
        return sorted(secrets, key=lambda s: s.short_name)

    async def get_secret(self, secret_name: str) -> SecretInfo:
        try:
            secret = await self._client.get_secret(
                request={"name": self.secret_path(secret_name)}
            )
        except (GoogleAPIError, GoogleAuthError) as exc:
            raise SecretClientError(f"Failed to get secret: {sanitize_error(exc)}") from exc
        return secret_from_proto(secret)

    async def create_secret(self, secret_name: str) -> SecretInfo:
        """Create an empty secret with automatic replication."""
        try:
            secret = await self._client.create_secret(
                request={
                    "parent": self.parent,
                    "secret_id": secret_name,
                    "secret": {"replication": {"automatic": {}}},
                }
            )
        except (GoogleAPIError, GoogleAuthError) as exc:
            raise SecretClientError(f"Failed to create secret: {sanitize_error(exc)}") from exc
        return secret_from_proto(secret)

    async def delete_secret(self, secret_name: str) -> None:
        """Delete a secret and all of its versions (irreversible)."""
        try:
            await self._client.delete_secret(request={"name": self.secret_path(secret_name)})
        except (GoogleAPIError, GoogleAuthError) as exc:
            raise SecretClientError(f"Failed to delete secret: {sanitize_error(exc)}") from exc

    async def list_versions(self, secret_name: str) -> list[VersionInfo]:
        """Return all versions of *secret_name*, newest first as the API orders them."""
        try:
            pager = await self._client.list_secret_versions(
                request={"parent": self.secret_path(secret_name)}
            )
            return [version_from_proto(v) async for v in pager]
        except (GoogleAPIError, GoogleAuthError) as exc:
            raise SecretClientError(f"Failed to list versions: {sanitize_error(exc)}") from exc

    async def access_version(self, secret_name: str, version: str) -> str:
        """Fetch the plaintext payload of one version."""
        try:
            response = await self._client.access_secret_version(
                request={"name": self.version_path(secret_name, version)}
            )
        except (GoogleAPIError, GoogleAuthError) as exc:
            raise SecretClientError(
                f"Failed to access secret version: {sanitize_error(exc)}"
            ) from exc
        try:
            return response.payload.data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SecretClientError("Secret value is not valid UTF-8") from exc

    async def add_version(self, secret_name: str, value: str) -> VersionInfo:
        try:
            version = await self._client.add_secret_version(
                request={
                    "parent": self.secret_path(secret_name),
                    "payload": {"data": value.encode("utf-8")},
                }
            )
        except (GoogleAPIError, GoogleAuthError) as exc:
            raise SecretClientError(
                f"Failed to add secret version: {sanitize_error(exc)}"
            ) from exc
        return version_from_proto(version)

    async def enable_version(self, secret_name: str, version: str) -> VersionInfo:
        try:
            result = await self._client.enable_secret_version(
                request={"name": self.version_path(secret_name, version)}
            )
        except (GoogleAPIError, GoogleAuthError) as exc:
            raise SecretClientError(
                f"Failed to enable secret version: {sanitize_error(exc)}"
            ) from exc
        return version_from_proto(result)

    async def disable_version(self, secret_name: str, version: str) -> VersionInfo:
        try:
            result = await self._client.disable_secret_version(
                request={"name": self.version_path(secret_name, version)}
            )
        except (GoogleAPIError, GoogleAuthError) as exc:
            raise SecretClientError(
                f"Failed to disable secret version: {sanitize_error(exc)}"
            ) from exc
        return version_from_proto(result)

    async def destroy_version(self, secret_name: str, version: str) -> VersionInfo:
        """Permanently destroy one version's payload (irreversible)."""
        try:
            result = await self._client.destroy_secret_version(
                request={"name": self.version_path(secret_name, version)}
            )
        except (GoogleAPIError, GoogleAuthError) as exc:
            raise SecretClientError(
                f"Failed to destroy secret version: {sanitize_error(exc)}"
            ) from exc
        return version_from_proto(result)
