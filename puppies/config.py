"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseModel):
    """Vote store configuration."""

    # SQLite file holding the votes table
    path: str = "puppies.sqlite"

    # Delete the existing file before opening it (cold start)
    reset_on_start: bool = False

    @property
    def url(self) -> str:
        """SQLAlchemy URL for the SQLite file."""
        return f"sqlite:///{Path(self.path)}"


class FlickrSettings(BaseModel):
    """Flickr photo search configuration."""

    api_key: str = "CHANGE_ME_IN_PRODUCTION"
    base_url: str = "https://api.flickr.com/services/rest/"

    # Comma separated tags passed to flickr.photos.search
    tags: str = "puppy"
    per_page: int = 20
    timeout: float = 30.0


class PersistenceSettings(BaseModel):
    """Reconciliation between the image registry and the vote store."""

    # Write the registry to the vote store when the app shuts down
    flush_on_shutdown: bool = True

    # Restore stored tallies for photos first seen in a search
    rehydrate_on_search: bool = True


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Set via OBSERVABILITY__LOGFIRE_TOKEN; console-only when missing
    logfire_token: str | None = None

    # None means: send when a token is present
    send_to_logfire: bool | None = None

    # Print spans and logs to the terminal
    console: bool = True

    @property
    def sends(self) -> bool:
        """Whether telemetry leaves the process."""
        if self.send_to_logfire is not None:
            return self.send_to_logfire
        return bool(self.logfire_token)


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, nested values use ``__``:

        ENVIRONMENT=production
        DATABASE__PATH=/var/lib/puppies/puppies.sqlite
        DATABASE__RESET_ON_START=true
        FLICKR__API_KEY=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows DATABASE__PATH syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    host: str = "localhost"
    port: int = 8000

    # Nested settings
    database: DatabaseSettings = DatabaseSettings()
    flickr: FlickrSettings = FlickrSettings()
    persistence: PersistenceSettings = PersistenceSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
