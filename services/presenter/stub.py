"""
Stub presenter for testing and headless development.

Records every call; optionally fails on demand.
"""

import asyncio
from typing import List, Optional, Tuple

from .base import Presenter, PresenterError


class StubPresenter(Presenter):
    """Deterministic fake presenter."""

    name = "stub_presenter"

    def __init__(self, fail_audio: bool = False, fail_notification: bool = False):
        self.fail_audio = fail_audio
        self.fail_notification = fail_notification
        self.played: List[Tuple[bytes, str]] = []
        self.notifications: List[Tuple[str, str]] = []

    async def play_audio(self, audio_data: bytes, audio_format: str = "mp3") -> None:
        self.played.append((audio_data, audio_format))
        if self.fail_audio:
            raise PresenterError("Audio playback disabled")

    def show_notification(self, title: str, message: str) -> Optional[asyncio.Task]:
        self.notifications.append((title, message))
        if self.fail_notification:
            raise PresenterError("Notifications disabled")
        return None
