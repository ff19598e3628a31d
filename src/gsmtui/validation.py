"""Local checks run before anything is sent to Secret Manager."""

from __future__ import annotations

import re

MAX_SECRET_NAME_LENGTH = 255

_ALLOWED_CHAR_RE = re.compile(r"[A-Za-z0-9_-]")


class ValidationError(ValueError):
    """Raised when user input breaks a Secret Manager naming rule."""


def validate_secret_name(name: str) -> None:
    """Validate *name* against Secret Manager's secret id rules.

    Raises:
        ValidationError: Naming the first rule that *name* violates.
    """
    if not name:
        raise ValidationError("Secret name cannot be empty")
    if len(name) > MAX_SECRET_NAME_LENGTH:
        raise ValidationError(
            f"Secret name must be {MAX_SECRET_NAME_LENGTH} characters or less"
        )
    if not (name[0].isascii() and name[0].isalpha()):
        raise ValidationError("Secret name must start with a letter")
    for char in name:
        if not _ALLOWED_CHAR_RE.fullmatch(char):
            raise ValidationError(
                "Secret name can only contain letters, digits, underscores, "
                f"and hyphens. Found: {char!r}"
            )
    if name.endswith("-"):
        raise ValidationError("Secret name cannot end with a hyphen")
