"""
Provider text policies.

Shortening bounds what the provider charges per notification.
The factor and clamp are fixed policy, not provider limits.
"""

import math


SHORTEN_FACTOR = 0.7
SHORTEN_MIN_CHARS = 30
SHORTEN_MAX_CHARS = 100
ELLIPSIS = "..."

COST_FACTOR = 1.1


def max_speech_length(length: int) -> int:
    """clamp(floor(length * 0.7), 30, 100)"""
    scaled = math.floor(length * SHORTEN_FACTOR)
    return max(SHORTEN_MIN_CHARS, min(SHORTEN_MAX_CHARS, scaled))


def shorten_for_speech(text: str) -> str:
    """Truncate text to max_speech_length() and mark the cut with an ellipsis."""
    max_length = max_speech_length(len(text))
    if len(text) > max_length:
        return text[:max_length] + ELLIPSIS
    return text


def estimate_cost(text: str) -> int:
    """Approximate provider usage units for text. Logging only."""
    return math.ceil(len(text) * COST_FACTOR)
