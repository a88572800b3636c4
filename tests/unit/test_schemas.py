"""
Tests for notification request parsing.
"""

import pytest

from guardrails.validation import TooLong, TypeMismatch, UnsafeContent
from notifier.schemas import (
    DEFAULT_MESSAGE,
    DEFAULT_PAI_TITLE,
    DEFAULT_TITLE,
    NotificationRequest,
    parse_notify_request,
    parse_pai_request,
)


class TestParseNotifyRequest:
    """Test /notify body parsing."""

    def test_full_body(self):
        request = parse_notify_request({
            "title": "Build",
            "message": "Done",
            "voice_enabled": False,
            "voice_id": "voice123",
        })

        assert request == NotificationRequest(
            title="Build", message="Done", voice_enabled=False, voice_id="voice123"
        )

    def test_defaults(self):
        request = parse_notify_request({})

        assert request.title == DEFAULT_TITLE
        assert request.message == DEFAULT_MESSAGE
        assert request.voice_enabled is True
        assert request.voice_id is None

    def test_null_fields_defaulted(self):
        request = parse_notify_request({"title": None, "message": None})

        assert request.title == DEFAULT_TITLE
        assert request.message == DEFAULT_MESSAGE

    def test_voice_name_alias(self):
        request = parse_notify_request({"message": "Hi", "voice_name": "aliasVoice"})
        assert request.voice_id == "aliasVoice"

    def test_voice_enabled_only_false_disables(self):
        """Only a literal false turns voice off."""
        assert parse_notify_request({"voice_enabled": 0}).voice_enabled is True
        assert parse_notify_request({"voice_enabled": False}).voice_enabled is False

    def test_non_string_voice_id(self):
        with pytest.raises(TypeMismatch):
            parse_notify_request({"message": "Hi", "voice_id": 42})

    def test_unsafe_message(self):
        with pytest.raises(UnsafeContent):
            parse_notify_request({"message": "done; rm -rf /"})

    def test_long_title(self):
        with pytest.raises(TooLong):
            parse_notify_request({"title": "t" * 501})

    @pytest.mark.parametrize("body", [[], "text", 5, None])
    def test_body_must_be_object(self, body):
        with pytest.raises(TypeMismatch):
            parse_notify_request(body)

    def test_request_is_immutable(self):
        request = parse_notify_request({})
        with pytest.raises(Exception):
            request.title = "changed"


class TestParsePaiRequest:
    """Test /pai body parsing."""

    def test_overrides_ignored(self):
        """voice_enabled and voice_id are not honoured."""
        request = parse_pai_request({
            "title": "Kai",
            "message": "Task finished",
            "voice_enabled": False,
            "voice_id": 42,
        })

        assert request.voice_enabled is True
        assert request.voice_id is None

    def test_defaults(self):
        request = parse_pai_request({})

        assert request.title == DEFAULT_PAI_TITLE
        assert request.message == DEFAULT_MESSAGE
