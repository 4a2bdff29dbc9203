"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Persistence backend (PostgREST / Supabase)
    supabase_url: str | None = Field(
        default=None, description="Base URL of the Supabase project (e.g. https://xyz.supabase.co)"
    )
    supabase_api_key: str | None = Field(
        default=None, description="API key sent as 'apikey' and bearer token"
    )
    ratings_table: str = Field(default="ratings", description="Table holding the ratings")
    api_timeout: int = Field(default=10, description="Timeout for backend requests in seconds")

    # Catalog
    # If not set, the built-in catalog is used
    catalog_file: str | None = Field(
        default=None,
        description="Path to TOML file with [[locations]] entries",
    )

    # Display
    leaderboard_size: int = Field(
        default=3, description="Number of locations shown on the leaderboard"
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Log level for messages on stderr")

    # Geolocation
    geolocation_url: str = Field(
        default="http://ip-api.com/json/",
        description="Endpoint used to approximate the user's position from their IP address",
    )

    @field_validator("supabase_url")
    @classmethod
    def strip_trailing_slash(cls, v: str | None) -> str | None:
        """Normalize the backend URL so paths can be appended."""
        if v is None:
            return None
        v = v.strip().rstrip("/")
        return v or None

    @field_validator("api_timeout")
    @classmethod
    def validate_api_timeout(cls, v: int) -> int:
        """Validate the timeout is positive."""
        if v <= 0:
            raise ValueError("api_timeout must be greater than 0")
        return v

    @field_validator("leaderboard_size")
    @classmethod
    def validate_leaderboard_size(cls, v: int) -> int:
        """Validate the leaderboard shows at least one entry."""
        if v < 1:
            raise ValueError("leaderboard_size must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @property
    def uses_remote_backend(self) -> bool:
        """True when both the backend URL and API key are configured."""
        return bool(self.supabase_url and self.supabase_api_key)

    def get_catalog_config(self) -> list[dict[str, Any]] | None:
        """Parse and return the raw [[locations]] entries from the catalog file.

        Returns None if no catalog file is configured.

        Raises:
            FileNotFoundError: If the configured file does not exist.
            ValueError: If 'locations' is not a list of tables.
        """
        if not self.catalog_file:
            return None

        catalog_path = Path(self.catalog_file)
        if not catalog_path.exists():
            raise FileNotFoundError(f"Catalog file not found: {catalog_path}")

        with open(catalog_path, "rb") as f:
            toml_data = tomllib.load(f)

        locations = toml_data.get("locations", [])
        if not isinstance(locations, list):
            raise ValueError("TOML catalog 'locations' must be a list")
        return [entry for entry in locations if isinstance(entry, dict)]
