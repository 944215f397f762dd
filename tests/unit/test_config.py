"""Tests for courtgrid.config module."""

import pytest
from pydantic import ValidationError

from courtgrid.config import Settings
from courtgrid.geometry import Court, default_court


class TestSettings:
    """Tests for the Settings class."""

    def test_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that default values are set correctly."""
        for name in ("COURT_WIDTH", "COURT_HEIGHT", "LOG_LEVEL", "LOG_FORMAT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
        )

        assert settings.COURT_WIDTH == 40000
        assert settings.COURT_HEIGHT == 20000
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_FORMAT == "console"

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that environment variables override defaults."""
        monkeypatch.setenv("COURT_WIDTH", "800")
        monkeypatch.setenv("COURT_HEIGHT", "400")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
        )

        assert settings.COURT_WIDTH == 800
        assert settings.COURT_HEIGHT == 400
        assert settings.LOG_LEVEL == "DEBUG"

    def test_log_format_options(self) -> None:
        """Test that LOG_FORMAT accepts valid options."""
        settings = Settings(
            LOG_FORMAT="json",
            _env_file=None,  # type: ignore[call-arg]
        )
        assert settings.LOG_FORMAT == "json"

    @pytest.mark.parametrize("field", ["COURT_WIDTH", "COURT_HEIGHT"])
    def test_court_dimensions_must_be_positive(self, field: str) -> None:
        with pytest.raises(ValidationError, match="greater than 0"):
            Settings(**{field: 0}, _env_file=None)  # type: ignore[arg-type]

    def test_fixture_settings(self, test_settings: Settings) -> None:
        assert test_settings.LOG_LEVEL == "DEBUG"


def test_default_court_reads_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    from courtgrid.config import settings

    monkeypatch.setattr(settings, "COURT_WIDTH", 1600)
    monkeypatch.setattr(settings, "COURT_HEIGHT", 800)

    assert default_court() == Court(width=1600, height=800)
