"""
Infrastructure initialization and bootstrap.

Singleton pattern for creating all service backends from configuration.
Owns the process-lifetime state: backends and the rate limiter.
"""

from typing import Optional

from guardrails.rate_limit import RateLimiter
from notifier.pipeline import NotificationPipeline
from services.presenter import Presenter
from services.tts import SpeechService, TTSBackend
from services.tts.speech import LocalSpeech

from .config import InfraConfig, get_config


class NotifyBootstrap:
    """
    Bootstrap infrastructure based on configuration.

    Singleton pattern - single instance per process. Tests build their
    own instance with explicit backends instead.
    """

    _instance: Optional["NotifyBootstrap"] = None

    def __init__(
        self,
        config: Optional[InfraConfig] = None,
        *,
        tts_backend: Optional[TTSBackend] = None,
        local_speech: Optional[LocalSpeech] = None,
        presenter: Optional[Presenter] = None,
        rate_limiter: Optional[RateLimiter] = None,
    ):
        """Initialize bootstrap with configuration and optional overrides."""
        self.config = config or get_config()
        self.tts_backend = tts_backend or self.config.create_tts_backend()
        self.local_speech = local_speech or self.config.create_local_speech()
        self.presenter = presenter or self.config.create_presenter()
        self.rate_limiter = rate_limiter or RateLimiter()

        self.speech_service = SpeechService(
            provider=self.tts_backend,
            local_speech=self.local_speech,
            presenter=self.presenter,
        )
        self.pipeline = NotificationPipeline(
            speech=self.speech_service,
            presenter=self.presenter,
        )

    @classmethod
    def get_instance(cls, config: Optional[InfraConfig] = None) -> "NotifyBootstrap":
        """
        Get singleton instance.

        Args:
            config: Optional custom configuration (only used first time)

        Returns:
            Singleton NotifyBootstrap instance
        """
        if cls._instance is None:
            cls._instance = cls(config)
        return cls._instance

    @classmethod
    def reset(cls):
        """Reset singleton (for testing)."""
        cls._instance = None

    async def aclose(self) -> None:
        """Close network clients and wait for detached toasts."""
        await self.tts_backend.aclose()
        await self.presenter.aclose()

    def __repr__(self) -> str:
        """String representation showing configured backends."""
        return (
            f"NotifyBootstrap(tts={self.tts_backend.name}, "
            f"provider_available={self.tts_backend.available}, "
            f"local_speech={getattr(self.local_speech, 'name', 'custom')}, "
            f"presenter={self.presenter.name})"
        )


def bootstrap_infrastructure(config: Optional[InfraConfig] = None) -> NotifyBootstrap:
    """
    Bootstrap all infrastructure backends.

    Args:
        config: Optional custom configuration

    Returns:
        NotifyBootstrap instance with all backends initialized
    """
    return NotifyBootstrap.get_instance(config)
