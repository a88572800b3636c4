"""
Notification Pipeline

Composes speech and presentation for one validated request:

1. Sanitize title and message (allowlist strip)
2. If voice is enabled: speak (provider → local fallback)
3. Always: show the desktop toast (detached)

Provider and presenter failures are absorbed here and only logged.
A returned result means "the system attempted to notify", not
"audio definitely played".
"""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

from guardrails.validation import sanitize_for_shell
from services.presenter.base import Presenter
from services.tts.speech import SpeechPath, SpeechService

from .schemas import NotificationRequest

logger = logging.getLogger(__name__)


@dataclass
class DeliveryResult:
    """What the pipeline actually did for one request."""

    trace_id: str
    speech: Optional[SpeechPath]  # None when voice was disabled
    notification_shown: bool


class NotificationPipeline:
    """Speak then display one notification."""

    def __init__(self, speech: SpeechService, presenter: Presenter):
        self.speech = speech
        self.presenter = presenter

    async def deliver(self, request: NotificationRequest) -> DeliveryResult:
        """
        Deliver a validated notification.

        Never raises for downstream failures.
        """
        trace_id = str(uuid4())
        safe_title = sanitize_for_shell(request.title)
        safe_message = sanitize_for_shell(request.message)

        logger.info(
            "Delivering notification",
            extra={
                "trace_id": trace_id,
                "title": safe_title,
                "voice_enabled": request.voice_enabled,
            },
        )

        speech_path: Optional[SpeechPath] = None
        if request.voice_enabled:
            try:
                speech_path = await self.speech.speak(
                    safe_message,
                    voice_id=request.voice_id,
                    trace_id=trace_id,
                )
            except Exception as e:
                logger.error(f"Speech step failed: {e}", exc_info=True)
                speech_path = "failed"

        try:
            self.presenter.show_notification(safe_title, safe_message)
            shown = True
        except Exception as e:
            logger.error(f"Notification display failed: {e}", exc_info=True)
            shown = False

        return DeliveryResult(
            trace_id=trace_id,
            speech=speech_path,
            notification_shown=shown,
        )
