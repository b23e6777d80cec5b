"""flatgeom configuration using pydantic-settings.

All configuration is strongly typed and supports environment variables
and .env files.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

SRIDPolicy = Literal["ignore", "warn", "error"]


class Settings(BaseSettings):
    """Library settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["console", "json"] = "console"

    # What GeometryCollection.push does with a member whose SRID differs
    # from the collection's own SRID.
    SRID_MISMATCH_POLICY: SRIDPolicy = "warn"


# Singleton instance for import convenience
settings = Settings()
