"""Unit tests for configuration utilities."""

from subconv.utils.config import get_settings


class TestSettings:
    """Test cases for Settings class."""

    def test_defaults(self, monkeypatch, no_env_file):
        """Should use defaults when nothing is configured."""
        for name in ("SUBCONV_ENCODING", "SUBCONV_LOG_LEVEL", "SUBCONV_LOG_JSON"):
            monkeypatch.delenv(name, raising=False)

        settings = get_settings()

        assert settings.encoding == "utf-8-sig"
        assert settings.log_level == "INFO"
        assert settings.log_json is False

    def test_loads_from_prefixed_env(self, monkeypatch, no_env_file):
        """Should load SUBCONV_-prefixed environment variables."""
        monkeypatch.setenv("SUBCONV_ENCODING", "cp1252")
        monkeypatch.setenv("SUBCONV_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SUBCONV_LOG_JSON", "true")

        settings = get_settings()

        assert settings.encoding == "cp1252"
        assert settings.log_level == "DEBUG"
        assert settings.log_json is True

    def test_ignores_unprefixed_env(self, monkeypatch, no_env_file):
        """Should not pick up variables without the prefix."""
        monkeypatch.delenv("SUBCONV_ENCODING", raising=False)
        monkeypatch.setenv("ENCODING", "latin-1")

        assert get_settings().encoding == "utf-8-sig"

    def test_loads_from_env_file(self, monkeypatch, tmp_path):
        """Should read a .env file in the working directory."""
        monkeypatch.delenv("SUBCONV_LOG_LEVEL", raising=False)
        (tmp_path / ".env").write_text("SUBCONV_LOG_LEVEL=WARNING\n")
        monkeypatch.chdir(tmp_path)

        assert get_settings().log_level == "WARNING"

    def test_get_settings_is_cached(self, monkeypatch):
        """Should return cached settings on subsequent calls."""
        monkeypatch.setenv("SUBCONV_ENCODING", "utf-8")

        settings1 = get_settings()
        monkeypatch.setenv("SUBCONV_ENCODING", "latin-1")
        settings2 = get_settings()

        # Same instance due to caching
        assert settings1 is settings2
        assert settings1.encoding == "utf-8"

    def test_cache_clear_reloads_settings(self, monkeypatch):
        """Should reload settings after cache clear."""
        monkeypatch.setenv("SUBCONV_ENCODING", "utf-8")
        settings1 = get_settings()

        get_settings.cache_clear()
        monkeypatch.setenv("SUBCONV_ENCODING", "latin-1")
        settings2 = get_settings()

        assert settings1.encoding == "utf-8"
        assert settings2.encoding == "latin-1"
        assert settings1 is not settings2
