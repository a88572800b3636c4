"""
Text-to-Speech (TTS) abstract interface.

Role: Text → audio rendering only.

Rules:
- Output-only (no state mutation)
- Optional (failure → local speech fallback)
- All failures are explicit and typed
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Dict, Any, Literal


TTSStatus = Literal["success", "recoverable_error", "fatal_error"]


class ProviderError(Exception):
    """
    Network speech provider failed.

    status_code is 0 when the provider was unreachable.
    """

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"TTS provider error {status_code}: {body}")


@dataclass
class TTSRequest:
    """Text-to-Speech request."""

    text: str
    voice: Optional[str] = None  # None → backend default voice
    trace_id: Optional[str] = None


@dataclass
class TTSResponse:
    """Text-to-Speech response."""

    status: TTSStatus
    audio_data: Optional[bytes] = None  # Raw audio bytes
    audio_format: str = "mp3"  # mp3, wav, ogg
    error_type: Optional[str] = None  # invalid_text | provider_error | backend_unavailable
    metadata: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.status == "success" and bool(self.audio_data)


class TTSBackend(ABC):
    """
    Abstract TTS boundary.
    Notification code must depend ONLY on this interface.
    """

    name: str = "tts"

    @property
    def available(self) -> bool:
        """Whether the backend is configured well enough to try."""
        return True

    @abstractmethod
    async def synthesize(self, request: TTSRequest) -> TTSResponse:
        """
        Synthesize text to audio.

        Args:
            request: TTSRequest with text and optional voice

        Returns:
            TTSResponse with audio data or explicit error status
        """
        raise NotImplementedError

    async def aclose(self) -> None:
        """Release network resources (no-op by default)."""
        return None
