"""
Input Validation Guardrails

Reject malformed or hostile notification text before it reaches the
speech provider, the audio player or the desktop notifier.

Two stages, both always run:
- validate_text(): denylist check at the HTTP boundary (user-facing 400)
- sanitize_for_shell(): allowlist strip right before OS-level use

The denylist is a best-effort filter, not a security boundary.
The sanitizer is the boundary.
"""

import re
from typing import Any, Optional


MAX_TEXT_LENGTH = 500

# Shell metacharacters, path traversal, script tag opening
_SHELL_METACHARACTERS = re.compile(r"[;&|><`$(){}\[\]\\]")
_PATH_TRAVERSAL = re.compile(r"\.\./")
_SCRIPT_TAG = re.compile(r"<script", re.IGNORECASE)

UNSAFE_PATTERNS = (_SHELL_METACHARACTERS, _PATH_TRAVERSAL, _SCRIPT_TAG)

_DISALLOWED_CHARS = re.compile(r"[^a-zA-Z0-9 .,!?'\-]")
_VOICE_ID_PATTERN = re.compile(r"^[A-Za-z0-9_\-]+$")


class ValidationError(Exception):
    """Notification input rejected at the boundary."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)


class TypeMismatch(ValidationError):
    """Field has the wrong JSON type."""


class TooLong(ValidationError):
    """Field exceeds MAX_TEXT_LENGTH characters."""


class UnsafeContent(ValidationError):
    """Field matches a denylisted pattern."""


def contains_unsafe_content(text: str) -> bool:
    """Return True if any denylisted pattern occurs in text."""
    return any(pattern.search(text) for pattern in UNSAFE_PATTERNS)


def validate_text(value: Any, field: str = "message") -> str:
    """
    Validate a free-text notification field.

    Args:
        value: Raw value from the JSON body
        field: Field name used in error messages

    Returns:
        The original string, unchanged

    Raises:
        TypeMismatch: value is not a string
        TooLong: value is longer than MAX_TEXT_LENGTH
        UnsafeContent: value matches the denylist
    """

    if not isinstance(value, str):
        raise TypeMismatch(field, f"Invalid {field}: must be a string")

    if len(value) > MAX_TEXT_LENGTH:
        raise TooLong(
            field,
            f"Invalid {field}: exceeds {MAX_TEXT_LENGTH} characters",
        )

    if contains_unsafe_content(value):
        raise UnsafeContent(field, f"Invalid {field}: contains unsafe characters")

    return value


def validate_voice_id(value: Any, field: str = "voice_id") -> Optional[str]:
    """
    Validate an optional voice identifier override.

    The id ends up in the provider URL path, so only word characters
    and dashes are accepted.
    """

    if value is None:
        return None

    if not isinstance(value, str):
        raise TypeMismatch(field, f"Invalid {field}: must be a string")

    if len(value) > MAX_TEXT_LENGTH:
        raise TooLong(
            field,
            f"Invalid {field}: exceeds {MAX_TEXT_LENGTH} characters",
        )

    if not _VOICE_ID_PATTERN.match(value):
        raise UnsafeContent(field, f"Invalid {field}: contains unsafe characters")

    return value


def sanitize_for_shell(text: str) -> str:
    """
    Strip everything outside [a-zA-Z0-9 .,!?'-], trim, cap length.

    Applied to title and message independently, immediately before
    they are handed to a speech engine, player or notifier.
    """

    cleaned = _DISALLOWED_CHARS.sub("", text)
    return cleaned.strip()[:MAX_TEXT_LENGTH]
