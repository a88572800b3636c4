"""
Notifier module exports.

Request schemas, the delivery pipeline and the health report.
"""

from .schemas import (
    DEFAULT_MESSAGE,
    DEFAULT_PAI_TITLE,
    DEFAULT_TITLE,
    HealthResponse,
    NotificationOutcome,
    NotificationRequest,
    parse_notify_request,
    parse_pai_request,
)
from .pipeline import DeliveryResult, NotificationPipeline
from .health import build_health

__all__ = [
    "DEFAULT_MESSAGE",
    "DEFAULT_PAI_TITLE",
    "DEFAULT_TITLE",
    "HealthResponse",
    "NotificationOutcome",
    "NotificationRequest",
    "parse_notify_request",
    "parse_pai_request",
    "DeliveryResult",
    "NotificationPipeline",
    "build_health",
]
