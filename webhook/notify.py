"""
Notification Endpoints

FastAPI router for the local notification relay.

Flow per request:
1. Rate limit (429 if exceeded)
2. Parse + validate JSON body (400 if invalid)
3. Deliver: speech (provider → local fallback), then toast
4. Always 200 once validation passed

Provider and presenter failures never reach the caller.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from guardrails.rate_limit import client_identity
from guardrails.validation import TypeMismatch
from infra.bootstrap import NotifyBootstrap
from notifier.health import build_health
from notifier.schemas import (
    HealthResponse,
    NotificationOutcome,
    parse_notify_request,
    parse_pai_request,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notifications"])


USAGE_TEXT = (
    "Voice Notify Server\n"
    "\n"
    "POST /notify  {\"title\": \"...\", \"message\": \"...\", "
    "\"voice_enabled\": true, \"voice_id\": \"...\"}\n"
    "POST /pai     {\"title\": \"...\", \"message\": \"...\"}\n"
    "GET  /health\n"
    "\n"
    "Example:\n"
    "  curl -X POST http://localhost:8888/notify "
    "-H 'Content-Type: application/json' "
    "-d '{\"title\": \"Build\", \"message\": \"Build finished\"}'\n"
)


def get_bootstrap(request: Request) -> NotifyBootstrap:
    """Bootstrap owned by the running application."""
    return request.app.state.bootstrap


async def enforce_rate_limit(request: Request) -> None:
    """Count this request against the caller's window; raises RateLimitExceeded."""
    get_bootstrap(request).rate_limiter.check(client_identity(request.headers))


async def read_json_body(request: Request) -> Any:
    """Decode the request body as JSON; malformed JSON is a validation error."""
    try:
        return await request.json()
    except ValueError:
        raise TypeMismatch("body", "Invalid JSON body")


@router.post(
    "/notify",
    response_model=NotificationOutcome,
    dependencies=[Depends(enforce_rate_limit)],
)
async def notify(
    request: Request,
    bootstrap: NotifyBootstrap = Depends(get_bootstrap),
) -> NotificationOutcome:
    """
    Speak and display a notification.

    Body:
        title, message, voice_enabled (default true), voice_id / voice_name

    Returns:
        {"status": "success", "message": "Notification sent"}
    """
    notification = parse_notify_request(await read_json_body(request))

    result = await bootstrap.pipeline.deliver(notification)
    logger.info(
        "Notification delivered",
        extra={"trace_id": result.trace_id, "speech": result.speech},
    )

    return NotificationOutcome(status="success", message="Notification sent")


@router.post(
    "/pai",
    response_model=NotificationOutcome,
    dependencies=[Depends(enforce_rate_limit)],
)
async def pai_notify(
    request: Request,
    bootstrap: NotifyBootstrap = Depends(get_bootstrap),
) -> NotificationOutcome:
    """
    Assistant notification: title and message only, voice always on.

    Returns:
        {"status": "success", "message": "PAI notification sent"}
    """
    notification = parse_pai_request(await read_json_body(request))

    result = await bootstrap.pipeline.deliver(notification)
    logger.info(
        "PAI notification delivered",
        extra={"trace_id": result.trace_id, "speech": result.speech},
    )

    return NotificationOutcome(status="success", message="PAI notification sent")


@router.get("/health", response_model=HealthResponse)
async def health(bootstrap: NotifyBootstrap = Depends(get_bootstrap)) -> HealthResponse:
    """Static configuration report. No side effects."""
    return build_health(bootstrap.config)
