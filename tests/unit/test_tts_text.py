"""
Tests for provider text policies: shortening and cost estimation.
"""

import pytest

from services.tts.text import (
    ELLIPSIS,
    estimate_cost,
    max_speech_length,
    shorten_for_speech,
)


class TestMaxSpeechLength:
    """clamp(floor(len * 0.7), 30, 100)"""

    @pytest.mark.parametrize(
        "length, expected",
        [
            (0, 30),
            (10, 30),
            (50, 35),
            (100, 70),
            (143, 100),
            (200, 100),
            (500, 100),
        ],
    )
    def test_clamp(self, length, expected):
        assert max_speech_length(length) == expected


class TestShortenForSpeech:
    """Test shorten_for_speech()."""

    def test_short_text_untouched(self):
        """Text under the 30 char floor is never cut."""
        assert shorten_for_speech("Build done") == "Build done"

    def test_long_text_truncated_to_100(self):
        """200 chars → exactly 100 chars plus ellipsis."""
        text = "x" * 200
        shortened = shorten_for_speech(text)

        assert shortened == "x" * 100 + ELLIPSIS

    def test_medium_text_truncated_by_factor(self):
        """50 chars → floor(35) chars plus ellipsis."""
        text = "abcdefghij" * 5
        assert shorten_for_speech(text) == text[:35] + ELLIPSIS


class TestEstimateCost:
    """Test estimate_cost()."""

    def test_hello(self):
        assert estimate_cost("hello") == 6

    def test_empty(self):
        assert estimate_cost("") == 0

    def test_rounds_up(self):
        assert estimate_cost("a" * 3) == 4
