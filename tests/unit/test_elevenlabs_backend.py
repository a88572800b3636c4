"""
Tests for the ElevenLabs TTS backend.

The provider is simulated with httpx.MockTransport; no network access.
"""

import json

import httpx
import pytest

from services.tts.base import ProviderError, TTSRequest
from services.tts.elevenlabs import ElevenLabsTTSBackend


def make_backend(handler, api_key: str = "test-key") -> ElevenLabsTTSBackend:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ElevenLabsTTSBackend(
        api_key=api_key,
        default_voice_id="voice123",
        model_id="eleven_multilingual_v2",
        http_client=client,
    )


class TestAvailability:
    """Backend is only usable with a credential."""

    def test_available_with_key(self):
        assert ElevenLabsTTSBackend(api_key="k").available is True

    @pytest.mark.parametrize("key", ["", None])
    def test_unavailable_without_key(self, key):
        assert ElevenLabsTTSBackend(api_key=key).available is False

    @pytest.mark.asyncio
    async def test_no_key_no_request(self):
        """Unconfigured backend fails without calling the provider."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, content=b"audio")

        backend = make_backend(handler, api_key="")
        response = await backend.synthesize(TTSRequest(text="Hello there"))

        assert response.status == "fatal_error"
        assert response.error_type == "backend_unavailable"
        assert calls == []


class TestSynthesize:
    """Test successful and failing provider calls."""

    @pytest.mark.asyncio
    async def test_success(self):
        """Audio bytes are returned as MP3."""
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["headers"] = request.headers
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, content=b"ID3-mp3-bytes")

        backend = make_backend(handler)
        response = await backend.synthesize(TTSRequest(text="Build complete"))

        assert response.ok
        assert response.audio_data == b"ID3-mp3-bytes"
        assert response.audio_format == "mp3"
        assert captured["url"] == "https://api.elevenlabs.io/v1/text-to-speech/voice123"
        assert captured["headers"]["xi-api-key"] == "test-key"
        assert captured["headers"]["accept"] == "audio/mpeg"
        assert captured["body"]["text"] == "Build complete"
        assert captured["body"]["model_id"] == "eleven_multilingual_v2"
        assert captured["body"]["voice_settings"] == {
            "stability": 0.5,
            "similarity_boost": 0.5,
        }

    @pytest.mark.asyncio
    async def test_voice_override(self):
        """Request voice replaces the default voice in the URL."""
        urls = []

        def handler(request: httpx.Request) -> httpx.Response:
            urls.append(request.url.path)
            return httpx.Response(200, content=b"audio")

        backend = make_backend(handler)
        await backend.synthesize(TTSRequest(text="Hi there", voice="customVoice"))

        assert urls == ["/v1/text-to-speech/customVoice"]

    @pytest.mark.asyncio
    async def test_text_shortened_before_sending(self):
        """200-char message → 100 chars + ellipsis sent to the provider."""
        sent = []

        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(json.loads(request.content)["text"])
            return httpx.Response(200, content=b"audio")

        backend = make_backend(handler)
        await backend.synthesize(TTSRequest(text="a" * 200))

        assert sent == ["a" * 100 + "..."]

    @pytest.mark.asyncio
    async def test_error_status(self):
        """Non-success status becomes a provider_error response."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, text='{"detail": "invalid api key"}')

        backend = make_backend(handler)
        response = await backend.synthesize(TTSRequest(text="Hello there"))

        assert response.status == "fatal_error"
        assert response.error_type == "provider_error"
        assert response.metadata["status_code"] == 401
        assert "invalid api key" in response.metadata["error"]

    @pytest.mark.asyncio
    async def test_unreachable(self):
        """Transport failure becomes a provider_error with status 0."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        backend = make_backend(handler)
        response = await backend.synthesize(TTSRequest(text="Hello there"))

        assert response.error_type == "provider_error"
        assert response.metadata["status_code"] == 0

    @pytest.mark.asyncio
    async def test_generate_speech_raises(self):
        """generate_speech() surfaces ProviderError with status and body."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(429, text="quota exceeded")

        backend = make_backend(handler)

        with pytest.raises(ProviderError) as exc_info:
            await backend.generate_speech("Hello", "voice123")

        assert exc_info.value.status_code == 429
        assert exc_info.value.body == "quota exceeded"

    @pytest.mark.asyncio
    async def test_empty_text(self):
        """Empty text is a recoverable error, no request made."""
        backend = make_backend(lambda request: httpx.Response(200, content=b"audio"))
        response = await backend.synthesize(TTSRequest(text=""))

        assert response.status == "recoverable_error"
        assert response.error_type == "invalid_text"

    @pytest.mark.asyncio
    async def test_aclose(self):
        """Closing releases the client."""
        backend = make_backend(lambda request: httpx.Response(200, content=b"audio"))
        await backend.aclose()

        assert backend.http_client is None
