"""
Notification Schemas

Canonical request built from an inbound JSON body, plus the response
shapes returned to HTTP callers.
"""

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel

from guardrails.validation import TypeMismatch, validate_text, validate_voice_id


DEFAULT_TITLE = "PAI Notification"
DEFAULT_PAI_TITLE = "PAI Assistant"
DEFAULT_MESSAGE = "Task completed"


@dataclass(frozen=True)
class NotificationRequest:
    """Validated notification. Immutable once built."""

    title: str
    message: str
    voice_enabled: bool = True
    voice_id: Optional[str] = None


class NotificationOutcome(BaseModel):
    """Body returned for every notify call."""

    status: Literal["success", "error"]
    message: str


class HealthResponse(BaseModel):
    """Static health / configuration report."""

    status: str
    port: int
    voice_system: str
    default_voice_id: str
    api_key_configured: bool
    platform: str
    model: str


def _field(body: Dict[str, Any], key: str, default: Any) -> Any:
    value = body.get(key)
    return default if value is None else value


def _require_object(payload: Any) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise TypeMismatch("body", "Invalid body: must be a JSON object")
    return payload


def parse_notify_request(payload: Any) -> NotificationRequest:
    """
    Build a NotificationRequest from a /notify body.

    Accepts voice_id, or voice_name as an alias. Anything other than a
    literal false in voice_enabled leaves voice on.

    Raises:
        ValidationError: a field failed validation
    """
    body = _require_object(payload)

    title = validate_text(_field(body, "title", DEFAULT_TITLE), "title")
    message = validate_text(_field(body, "message", DEFAULT_MESSAGE), "message")

    field = "voice_id" if "voice_id" in body else "voice_name"
    voice_id = validate_voice_id(body.get(field), field)

    return NotificationRequest(
        title=title,
        message=message,
        voice_enabled=body.get("voice_enabled", True) is not False,
        voice_id=voice_id,
    )


def parse_pai_request(payload: Any) -> NotificationRequest:
    """
    Build a NotificationRequest from a /pai body.

    Only title and message are read; voice is always on with the
    default voice.
    """
    body = _require_object(payload)

    return NotificationRequest(
        title=validate_text(_field(body, "title", DEFAULT_PAI_TITLE), "title"),
        message=validate_text(_field(body, "message", DEFAULT_MESSAGE), "message"),
    )
