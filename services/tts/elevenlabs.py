"""
ElevenLabs TTS backend.

Network speech provider. Text is shortened before every call to bound
usage; the estimated cost is logged, never enforced.

Environment variables:
  ELEVENLABS_API_KEY    Provider credential (unset → backend unavailable)
  ELEVENLABS_VOICE_ID   Default voice
  ELEVENLABS_MODEL      Model id (default: eleven_multilingual_v2)
"""

import logging
from typing import Optional

import httpx

from .base import ProviderError, TTSBackend, TTSRequest, TTSResponse
from .text import estimate_cost, shorten_for_speech

logger = logging.getLogger(__name__)


DEFAULT_BASE_URL = "https://api.elevenlabs.io/v1"
DEFAULT_MODEL = "eleven_multilingual_v2"
DEFAULT_VOICE_ID = "21m00Tcm4TlvDq8ikWAM"

VOICE_SETTINGS = {
    "stability": 0.5,
    "similarity_boost": 0.5,
}


class ElevenLabsTTSBackend(TTSBackend):
    """
    ElevenLabs text-to-speech over HTTPS.

    Returns MP3 audio. Any non-2xx status or transport failure becomes a
    fatal_error response carrying the ProviderError details, so the
    caller can fall back to local speech.
    """

    name = "elevenlabs"

    def __init__(
        self,
        api_key: Optional[str],
        default_voice_id: str = DEFAULT_VOICE_ID,
        model_id: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            api_key: ElevenLabs API key; empty/None disables the backend
            default_voice_id: Voice used when the request has none
            model_id: ElevenLabs model id
            base_url: API root, overridable for proxies/tests
            http_client: Pre-built client (tests inject a MockTransport)
        """
        self.api_key = api_key or ""
        self.default_voice_id = default_voice_id
        self.model_id = model_id
        self.base_url = base_url.rstrip("/")
        self.http_client = http_client

    @property
    def available(self) -> bool:
        return bool(self.api_key)

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self.http_client is None:
            # No timeout: a hung provider hangs only this request
            self.http_client = httpx.AsyncClient(timeout=None)
        return self.http_client

    async def generate_speech(self, text: str, voice_id: str) -> bytes:
        """
        Call the provider and return raw MP3 bytes.

        Raises:
            ProviderError: non-success status or provider unreachable
        """
        client = await self._get_http_client()
        url = f"{self.base_url}/text-to-speech/{voice_id}"

        try:
            response = await client.post(
                url,
                headers={
                    "Accept": "audio/mpeg",
                    "Content-Type": "application/json",
                    "xi-api-key": self.api_key,
                },
                json={
                    "text": text,
                    "model_id": self.model_id,
                    "voice_settings": VOICE_SETTINGS,
                },
            )
        except httpx.RequestError as e:
            raise ProviderError(0, str(e)) from e

        if not response.is_success:
            raise ProviderError(response.status_code, response.text)

        return response.content

    async def synthesize(self, request: TTSRequest) -> TTSResponse:
        """
        Synthesize shortened request text with ElevenLabs.

        Args:
            request: TTSRequest; voice None → default_voice_id

        Returns:
            TTSResponse with MP3 audio_data on success, or typed error
        """
        metadata = {"backend": self.name, "model": self.model_id, "trace_id": request.trace_id}

        if not self.available:
            return TTSResponse(
                status="fatal_error",
                error_type="backend_unavailable",
                metadata={**metadata, "reason": "ELEVENLABS_API_KEY not configured"},
            )

        if not request.text:
            return TTSResponse(
                status="recoverable_error",
                error_type="invalid_text",
                metadata=metadata,
            )

        voice_id = request.voice or self.default_voice_id
        text = shorten_for_speech(request.text)

        logger.info(
            f"Requesting speech from ElevenLabs ({len(text)} chars)",
            extra={
                "voice_id": voice_id,
                "original_length": len(request.text),
                "sent_length": len(text),
                "estimated_cost": estimate_cost(text),
            },
        )

        try:
            audio_data = await self.generate_speech(text, voice_id)
        except ProviderError as e:
            logger.warning(f"ElevenLabs request failed: {e}")
            return TTSResponse(
                status="fatal_error",
                error_type="provider_error",
                metadata={
                    **metadata,
                    "status_code": e.status_code,
                    "error": e.body,
                },
            )

        return TTSResponse(
            status="success",
            audio_data=audio_data,
            audio_format="mp3",
            metadata={
                **metadata,
                "voice_id": voice_id,
                "text_length": len(text),
            },
        )

    async def aclose(self) -> None:
        if self.http_client is not None:
            await self.http_client.aclose()
            self.http_client = None
