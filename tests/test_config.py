"""Tests for settings."""

from genai_client.config import Settings, settings


class TestSettings:
    """Test environment-backed settings."""

    def test_api_key_read_on_each_call(self, monkeypatch):
        """The API key is not cached between calls."""
        monkeypatch.setenv("GENAI_API_KEY", "sk-first")
        assert settings.get_api_key() == "sk-first"

        monkeypatch.setenv("GENAI_API_KEY", "sk-second")
        assert settings.get_api_key() == "sk-second"

    def test_empty_api_key_is_unset(self, monkeypatch):
        """An empty variable counts as missing."""
        monkeypatch.setenv("GENAI_API_KEY", "")
        assert Settings.get_api_key() is None

    def test_defaults(self):
        """Defaults point at the public API with a finite timeout."""
        assert settings.BASE_URL.startswith("http")
        assert settings.REQUEST_TIMEOUT > 0
        assert settings.DEBUG_LOG_MAX_LENGTH >= 0

    def test_only_used_debug_switches(self):
        """Settings carry only the debug switches the payload logger reads."""
        assert not hasattr(settings, "DEBUG_MODE")
        assert isinstance(settings.DEBUG_LOG_PAYLOADS, bool)
