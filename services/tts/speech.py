"""
Speech fallback policy.

Provider first, local speech second, at most once each:

    provider configured? ── no ──────────────────► speak locally
          │ yes
    synthesize ── error / unreachable ───────────► speak locally
          │ ok
    play audio (errors logged, no fallback)

There is no retry loop against the provider.
"""

import logging
from typing import Literal, Optional, Protocol

from services.presenter.base import Presenter, PresenterError

from .base import TTSBackend, TTSRequest

logger = logging.getLogger(__name__)


SpeechPath = Literal["provider", "local", "failed"]


class LocalSpeech(Protocol):
    """Anything that can speak text on this machine."""

    async def speak(self, text: str) -> None:
        ...


class SpeechService:
    """Turns notification text into sound using provider-then-local fallback."""

    def __init__(
        self,
        provider: Optional[TTSBackend],
        local_speech: LocalSpeech,
        presenter: Presenter,
    ):
        self.provider = provider
        self.local_speech = local_speech
        self.presenter = presenter

    async def speak(
        self,
        text: str,
        voice_id: Optional[str] = None,
        trace_id: Optional[str] = None,
    ) -> SpeechPath:
        """
        Speak sanitized text.

        Never raises for provider or presenter failures; the outcome is
        reported as the path that ran.

        Returns:
            "provider" if provider audio was played (or playback attempted),
            "local" if the local fallback spoke,
            "failed" if the local fallback failed too
        """
        if self.provider is None or not self.provider.available:
            logger.info("No speech provider configured, using local speech")
            return await self.speak_locally(text)

        response = await self.provider.synthesize(
            TTSRequest(text=text, voice=voice_id, trace_id=trace_id)
        )

        if not response.ok:
            logger.warning(
                f"Speech provider failed ({response.error_type}), falling back to local speech",
                extra={"metadata": response.metadata},
            )
            return await self.speak_locally(text)

        try:
            await self.presenter.play_audio(response.audio_data, response.audio_format)
        except PresenterError as e:
            logger.error(f"Audio playback failed: {e}")

        return "provider"

    async def speak_locally(self, text: str) -> SpeechPath:
        """Single local speech attempt. Failure is logged, not raised."""
        try:
            await self.local_speech.speak(text)
        except PresenterError as e:
            logger.error(f"Local speech failed: {e}")
            return "failed"
        return "local"
