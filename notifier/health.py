"""
Health report for the notification server.

Reflects configuration only. Does NOT call the speech provider or
touch audio/notification subsystems.
"""

import sys
from typing import TYPE_CHECKING

from .schemas import HealthResponse

if TYPE_CHECKING:
    from infra.config import InfraConfig


VOICE_SYSTEM = "ElevenLabs"


def build_health(config: "InfraConfig") -> HealthResponse:
    """Static health/configuration status."""
    return HealthResponse(
        status="healthy",
        port=config.port,
        voice_system=VOICE_SYSTEM,
        default_voice_id=config.elevenlabs_voice_id,
        api_key_configured=bool(config.elevenlabs_api_key),
        platform=sys.platform,
        model=config.elevenlabs_model,
    )
