"""
Guardrails module exports.

Input validation and rate limiting for the notification endpoints.
"""

from .validation import (
    MAX_TEXT_LENGTH,
    TooLong,
    TypeMismatch,
    UnsafeContent,
    ValidationError,
    contains_unsafe_content,
    sanitize_for_shell,
    validate_text,
    validate_voice_id,
)
from .rate_limit import (
    MAX_REQUESTS,
    UNKNOWN_IDENTITY,
    WINDOW_MS,
    RateLimitExceeded,
    RateLimiter,
    RateLimitRecord,
    client_identity,
)

__all__ = [
    # Validation
    "MAX_TEXT_LENGTH",
    "ValidationError",
    "TypeMismatch",
    "TooLong",
    "UnsafeContent",
    "contains_unsafe_content",
    "sanitize_for_shell",
    "validate_text",
    "validate_voice_id",
    # Rate limiting
    "MAX_REQUESTS",
    "WINDOW_MS",
    "UNKNOWN_IDENTITY",
    "RateLimitExceeded",
    "RateLimiter",
    "RateLimitRecord",
    "client_identity",
]
