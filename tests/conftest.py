"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator

import pytest

from courtgrid.config import Settings
from courtgrid.geometry import Court, RegionGrid
from courtgrid.utils.logging import clear_match_context, configure_logging


@pytest.fixture(autouse=True)
def reset_logging_context() -> Iterator[None]:
    """Reset match context between tests."""
    clear_match_context()
    yield
    clear_match_context()


@pytest.fixture
def test_settings() -> Settings:
    """Create a Settings instance with test-safe defaults."""
    return Settings(
        COURT_WIDTH=40000,
        COURT_HEIGHT=20000,
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
def configure_test_logging() -> Iterator[None]:
    """Configure logging for tests with console output."""
    configure_logging(level="DEBUG", log_format="console")
    yield


@pytest.fixture
def court() -> Court:
    """Court with the default match dimensions."""
    return Court(width=40000, height=20000)


@pytest.fixture
def grid(court: Court) -> RegionGrid:
    """Region grid over the default court."""
    return RegionGrid(court=court)


@pytest.fixture
def small_grid() -> RegionGrid:
    """Region grid over a small court with 10x5 regions."""
    return RegionGrid(court=Court(width=80, height=20))
