"""courtgrid configuration using pydantic-settings.

Court extents are fixed for the process lifetime. They are loaded once from
environment variables or a .env file; the geometry layer turns them into an
explicit ``Court`` value so tests can build grids for other court sizes.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Court dimensions (field units, origin at the home team's bottom-left corner)
    COURT_WIDTH: int = Field(default=40000, gt=0)
    COURT_HEIGHT: int = Field(default=20000, gt=0)

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"


# Singleton instance for import convenience
settings = Settings()
