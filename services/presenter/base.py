"""
Presenter abstract interface.

Role: make a notification audible and visible on this machine.

Rules:
- Best-effort: failures raise PresenterError, callers log and continue
- Inputs are already sanitized text / raw audio bytes
- show_notification() is fire-and-forget
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Optional


class PresenterError(Exception):
    """Local playback, speech or notification display failed."""


class Presenter(ABC):
    """
    Abstract presenter boundary.
    Notification code must depend ONLY on this interface.
    """

    name: str = "presenter"

    @abstractmethod
    async def play_audio(self, audio_data: bytes, audio_format: str = "mp3") -> None:
        """
        Play audio and return once playback has finished.

        Raises:
            PresenterError: playback failed
        """
        raise NotImplementedError

    @abstractmethod
    def show_notification(self, title: str, message: str) -> Optional[asyncio.Task]:
        """
        Display a desktop toast without waiting for it.

        Returns:
            The detached task, if one was started
        """
        raise NotImplementedError

    async def aclose(self) -> None:
        """Release resources (no-op by default)."""
        return None
