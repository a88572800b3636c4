"""
Local speech fallback powered by ``pyttsx3``.

Speaks directly through the OS-native engine (NSSpeechSynthesizer on
macOS, SAPI5 on Windows, eSpeak on Linux). Used when the network
provider is unconfigured or fails.
"""

import asyncio
import logging
from typing import Optional

import pyttsx3

from services.presenter.base import PresenterError

logger = logging.getLogger(__name__)


class LocalSpeechBackend:
    """
    OS-native speech synthesis.

    Each call builds a fresh engine in a worker thread; pyttsx3 engines
    are not safe to share across threads.
    """

    name = "pyttsx3"

    def __init__(self, voice_id: Optional[str] = None, rate: Optional[int] = None):
        """
        Args:
            voice_id: pyttsx3 voice id (None → system default)
            rate: Words per minute (None → engine default)
        """
        self.voice_id = voice_id
        self.rate = rate

    def _speak_blocking(self, text: str) -> None:
        engine = pyttsx3.init()
        try:
            if self.voice_id:
                engine.setProperty("voice", self.voice_id)
            if self.rate is not None:
                engine.setProperty("rate", self.rate)
            engine.say(text)
            engine.runAndWait()
        finally:
            engine.stop()

    async def speak(self, text: str) -> None:
        """
        Speak sanitized text and return when speech has finished.

        Raises:
            PresenterError: engine could not be initialised or failed
        """
        if not text:
            return

        logger.info(f"Speaking locally ({len(text)} chars)")
        try:
            await asyncio.to_thread(self._speak_blocking, text)
        except Exception as e:
            raise PresenterError(f"Local speech failed: {e}") from e


class StubLocalSpeech:
    """Records spoken text instead of speaking. For tests and headless runs."""

    name = "stub_local_speech"

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.spoken: list = []

    async def speak(self, text: str) -> None:
        self.spoken.append(text)
        if self.fail:
            raise PresenterError("Local speech disabled")
