"""
Text-to-Speech service exports.

Clean interface for the notification pipeline to import TTS components.
"""

from .base import ProviderError, TTSBackend, TTSRequest, TTSResponse, TTSStatus
from .elevenlabs import ElevenLabsTTSBackend
from .local import LocalSpeechBackend, StubLocalSpeech
from .speech import SpeechPath, SpeechService
from .stub import NoOpTTSBackend, StubTTSBackend
from .text import estimate_cost, max_speech_length, shorten_for_speech

__all__ = [
    "ProviderError",
    "TTSBackend",
    "TTSRequest",
    "TTSResponse",
    "TTSStatus",
    "ElevenLabsTTSBackend",
    "LocalSpeechBackend",
    "StubLocalSpeech",
    "SpeechPath",
    "SpeechService",
    "StubTTSBackend",
    "NoOpTTSBackend",
    "estimate_cost",
    "max_speech_length",
    "shorten_for_speech",
]
