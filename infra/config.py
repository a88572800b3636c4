"""
Infrastructure configuration system.

Environment-based backend selection with sensible defaults.
Without an API key the server still works: speech goes straight to the
local engine.
"""

import os
from dataclasses import dataclass
from typing import Literal, Optional

from services.presenter import DesktopPresenter, Presenter, StubPresenter
from services.tts import (
    ElevenLabsTTSBackend,
    LocalSpeechBackend,
    StubLocalSpeech,
    StubTTSBackend,
    TTSBackend,
)
from services.tts.elevenlabs import DEFAULT_BASE_URL, DEFAULT_MODEL, DEFAULT_VOICE_ID
from services.tts.speech import LocalSpeech


TTSBackendType = Literal["elevenlabs", "stub"]
PresenterBackendType = Literal["desktop", "stub"]

DEFAULT_PORT = 8888
DEFAULT_HOST = "127.0.0.1"


def _optional_int(value: Optional[str]) -> Optional[int]:
    return int(value) if value else None


@dataclass
class InfraConfig:
    """Infrastructure configuration from environment."""

    # Server
    host: str
    port: int

    # Speech provider
    tts_backend: TTSBackendType
    elevenlabs_api_key: str
    elevenlabs_voice_id: str
    elevenlabs_model: str
    elevenlabs_base_url: str

    # Local speech / presentation
    presenter_backend: PresenterBackendType
    audio_player: Optional[str]       # shell-style command, e.g. "mpv --really-quiet"
    local_speech_rate: Optional[int]  # words per minute

    @classmethod
    def from_env(cls) -> "InfraConfig":
        """
        Load configuration from environment variables.

        Defaults:
        - Port 8888 on localhost
        - ElevenLabs provider (inactive until ELEVENLABS_API_KEY is set)
        - Desktop presenter
        """
        return cls(
            host=os.getenv("HOST", DEFAULT_HOST),
            port=int(os.getenv("PORT", str(DEFAULT_PORT))),

            tts_backend=os.getenv("TTS_BACKEND", "elevenlabs"),  # type: ignore
            elevenlabs_api_key=os.getenv("ELEVENLABS_API_KEY", ""),
            elevenlabs_voice_id=os.getenv("ELEVENLABS_VOICE_ID", DEFAULT_VOICE_ID),
            elevenlabs_model=os.getenv("ELEVENLABS_MODEL", DEFAULT_MODEL),
            elevenlabs_base_url=os.getenv("ELEVENLABS_BASE_URL", DEFAULT_BASE_URL),

            presenter_backend=os.getenv("PRESENTER_BACKEND", "desktop"),  # type: ignore
            audio_player=os.getenv("AUDIO_PLAYER") or None,
            local_speech_rate=_optional_int(os.getenv("LOCAL_SPEECH_RATE")),
        )

    def create_tts_backend(self) -> TTSBackend:
        """Create speech provider backend based on configuration."""
        if self.tts_backend == "stub":
            return StubTTSBackend()
        return ElevenLabsTTSBackend(
            api_key=self.elevenlabs_api_key,
            default_voice_id=self.elevenlabs_voice_id,
            model_id=self.elevenlabs_model,
            base_url=self.elevenlabs_base_url,
        )

    def create_local_speech(self) -> LocalSpeech:
        """Create local fallback speech based on configuration."""
        if self.presenter_backend == "stub":
            return StubLocalSpeech()
        return LocalSpeechBackend(rate=self.local_speech_rate)

    def create_presenter(self) -> Presenter:
        """Create presenter based on configuration."""
        if self.presenter_backend == "stub":
            return StubPresenter()
        return DesktopPresenter(player_command=self.audio_player)


def get_config() -> InfraConfig:
    """Get infrastructure configuration from the current environment."""
    return InfraConfig.from_env()
