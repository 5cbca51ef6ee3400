"""Tests for builder log events."""

from structlog.testing import capture_logs

from line_builder import MessageCollection
from line_builder.utils.logging import get_logger


class TestLogEvents:
    def test_get_logger(self):
        assert get_logger("line_builder.test") is not None

    def test_build_emits_event(self, settings):
        messages = MessageCollection(mode="sdkv2", settings=settings)
        messages.add_text("hi")
        messages.add_text("there")
        with capture_logs() as logs:
            messages.build()
        event = next(e for e in logs if e["event"] == "messages_built")
        assert event["count"] == 2
        assert event["mode"] == "sdkv2"
        assert event["log_level"] == "debug"
