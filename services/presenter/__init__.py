"""
Presenter service exports.

Audio playback and desktop toast display.
"""

from .base import Presenter, PresenterError
from .desktop import DesktopPresenter, default_player_command
from .stub import StubPresenter

__all__ = [
    "Presenter",
    "PresenterError",
    "DesktopPresenter",
    "StubPresenter",
    "default_player_command",
]
