"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from infra.config import InfraConfig  # noqa: E402
from services.presenter import StubPresenter  # noqa: E402
from services.tts import StubLocalSpeech  # noqa: E402


@pytest.fixture
def stub_config() -> InfraConfig:
    """Configuration that never touches the network or the desktop."""
    return InfraConfig(
        host="127.0.0.1",
        port=8888,
        tts_backend="stub",
        elevenlabs_api_key="",
        elevenlabs_voice_id="voice123",
        elevenlabs_model="eleven_multilingual_v2",
        elevenlabs_base_url="https://api.elevenlabs.io/v1",
        presenter_backend="stub",
        audio_player=None,
        local_speech_rate=None,
    )


@pytest.fixture
def stub_presenter() -> StubPresenter:
    return StubPresenter()


@pytest.fixture
def stub_local_speech() -> StubLocalSpeech:
    return StubLocalSpeech()
