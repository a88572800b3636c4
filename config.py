"""
Configuration management for the Voice Notify server.

Loads environment variables from the project .env file, then ~/.env
(without overriding), and provides typed access to configuration.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env files
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)
load_dotenv(Path.home() / ".env", override=False)


class Config:
    """Configuration class for the Voice Notify server."""

    # Server
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "8888"))

    # ElevenLabs (optional - local speech is used without it)
    ELEVENLABS_API_KEY = os.getenv("ELEVENLABS_API_KEY", "")
    ELEVENLABS_VOICE_ID = os.getenv("ELEVENLABS_VOICE_ID", "21m00Tcm4TlvDq8ikWAM")
    ELEVENLABS_MODEL = os.getenv("ELEVENLABS_MODEL", "eleven_multilingual_v2")

    # Logging / environment
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

    @classmethod
    def validate(cls) -> bool:
        """Report missing optional configuration. Returns True if complete."""
        optional = ["ELEVENLABS_API_KEY"]
        missing = [key for key in optional if not getattr(cls, key)]

        if missing:
            print(f"⚠️  Missing optional environment variables: {', '.join(missing)}")
            print("   Falling back to local speech. Set them in .env or ~/.env")
            return False

        return True


if __name__ == "__main__":
    # Test configuration loading
    print("Configuration loaded:")
    print(f"  Port: {Config.PORT}")
    print(f"  ElevenLabs API Key: {'✓ Set' if Config.ELEVENLABS_API_KEY else '✗ Missing'}")
    print(f"  Voice ID: {Config.ELEVENLABS_VOICE_ID}")
    print(f"  Model: {Config.ELEVENLABS_MODEL}")
    print(f"  Environment: {Config.ENVIRONMENT}")
    print(f"\n  Validation: {'✓ PASSED' if Config.validate() else '✗ FAILED'}")
