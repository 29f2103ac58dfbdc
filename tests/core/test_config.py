"""Tests for application settings."""

from pathlib import Path

from tidy_tools.core.config import Settings, get_settings


class TestSettings:
    """Tests for settings loading."""

    def test_default_log_file(self, monkeypatch):
        """Test the default run log location."""
        monkeypatch.delenv("TIDY_LOG_FILE", raising=False)

        settings = Settings()

        assert settings.log_file == Path("organizer.log")

    def test_env_override(self, monkeypatch, tmp_path):
        """Test overriding the run log from the environment."""
        monkeypatch.setenv("TIDY_LOG_FILE", str(tmp_path / "custom.log"))

        settings = get_settings()

        assert settings.log_file == tmp_path / "custom.log"

    def test_dotenv_file(self, monkeypatch, tmp_path):
        """Test reading settings from a .env file in the working directory."""
        monkeypatch.delenv("TIDY_LOG_FILE", raising=False)
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("TIDY_LOG_FILE=from-dotenv.log\nOTHER=1\n")

        settings = Settings()

        assert settings.log_file == Path("from-dotenv.log")
