"""Unit tests for Logfire configuration choices."""

from linkedout.config import ObservabilitySettings, Settings
from linkedout.util.observability import resolve_send_to_logfire


def settings_with(**observability) -> Settings:
    return Settings(
        _env_file=None, observability=ObservabilitySettings(**observability)
    )


class TestResolveSendToLogfire:
    """Tests for resolve_send_to_logfire."""

    def test_off_without_token(self):
        assert resolve_send_to_logfire(settings_with()) is False

    def test_on_with_token(self):
        assert resolve_send_to_logfire(settings_with(logfire_token="tok")) is True

    def test_explicit_setting_wins(self):
        settings = settings_with(logfire_token="tok", send_to_logfire=False)
        assert resolve_send_to_logfire(settings) is False
