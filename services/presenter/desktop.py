"""
Desktop presenter.

Audio: write to a temp file, play it with the platform player, delete it.
Toast: plyer notification in a detached task.

Players (first match wins):
- AUDIO_PLAYER env/config override, e.g. "mpv --really-quiet"
- macOS: afplay
- elsewhere: ffplay -nodisp -autoexit -loglevel quiet
"""

import asyncio
import logging
import os
import shlex
import sys
import tempfile
from typing import List, Optional, Set

from plyer import notification

from .base import Presenter, PresenterError

logger = logging.getLogger(__name__)


APP_NAME = "Voice Notify"
TOAST_TIMEOUT_S = 5


def default_player_command(platform: str = sys.platform) -> List[str]:
    """Audio player argv (without the file path) for a platform."""
    if platform == "darwin":
        return ["afplay"]
    return ["ffplay", "-nodisp", "-autoexit", "-loglevel", "quiet"]


class DesktopPresenter(Presenter):
    """
    Plays audio through an OS player process and shows plyer toasts.

    Playback is awaited; toasts are detached tasks whose errors only
    reach the log.
    """

    name = "desktop"

    def __init__(self, player_command: Optional[str] = None, toast_timeout: int = TOAST_TIMEOUT_S):
        """
        Args:
            player_command: Shell-style player command overriding the default
            toast_timeout: Seconds the toast stays visible
        """
        self.player_command = (
            shlex.split(player_command) if player_command else default_player_command()
        )
        self.toast_timeout = toast_timeout
        # Strong refs so detached tasks are not garbage collected mid-flight
        self._pending: Set[asyncio.Task] = set()

    async def play_audio(self, audio_data: bytes, audio_format: str = "mp3") -> None:
        """
        Play audio bytes and wait for the player to exit.

        Raises:
            PresenterError: player missing or exited non-zero
        """
        tmp = tempfile.NamedTemporaryFile(
            prefix="voice-", suffix=f".{audio_format}", delete=False
        )
        try:
            tmp.write(audio_data)
        finally:
            tmp.close()

        try:
            command = [*self.player_command, tmp.name]
            try:
                process = await asyncio.create_subprocess_exec(
                    *command,
                    stdout=asyncio.subprocess.DEVNULL,
                    stderr=asyncio.subprocess.DEVNULL,
                )
            except FileNotFoundError as e:
                raise PresenterError(f"Audio player not found: {command[0]}") from e

            returncode = await process.wait()
            if returncode != 0:
                raise PresenterError(f"{command[0]} exited with code {returncode}")
        finally:
            self._remove_temp_file(tmp.name)

    @staticmethod
    def _remove_temp_file(path: str) -> None:
        try:
            os.unlink(path)
        except OSError as e:
            logger.warning(f"Failed to delete temp audio file {path}: {e}")

    def _notify_blocking(self, title: str, message: str) -> None:
        notification.notify(
            title=title,
            message=message,
            app_name=APP_NAME,
            timeout=self.toast_timeout,
        )

    def show_notification(self, title: str, message: str) -> asyncio.Task:
        """Start a detached toast task and return it without awaiting."""
        task = asyncio.create_task(
            asyncio.to_thread(self._notify_blocking, title, message),
            name="desktop-toast",
        )
        self._pending.add(task)
        task.add_done_callback(self._on_toast_done)
        return task

    def _on_toast_done(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(f"Desktop notification failed: {error}")

    async def aclose(self) -> None:
        """Wait for in-flight toasts so shutdown does not cut them off."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
