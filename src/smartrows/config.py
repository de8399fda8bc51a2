"""Configuration using pydantic-settings.

Settings come from ``SMARTROWS_*`` environment variables or a ``.env`` file.
The token is required; loading fails with a list of problems otherwise.
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from smartrows.transport import DEFAULT_TIMEOUT, DEFAULT_URL

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    Environment variables:
    - SMARTROWS_TOKEN: API access token (required)
    - SMARTROWS_BASE_URL: API root, defaults to the public endpoint
    - SMARTROWS_TIMEOUT: request timeout in seconds
    - SMARTROWS_LOG_LEVEL: minimum level for the command-line tool's logs
    """

    model_config = SettingsConfigDict(
        env_prefix="SMARTROWS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    token: str = ""
    base_url: str = DEFAULT_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @model_validator(mode="after")
    def validate_required_settings(self) -> "Settings":
        """Validate that required settings are configured."""
        errors = []

        if not self.token:
            errors.append("SMARTROWS_TOKEN must be set")

        if self.timeout <= 0:
            errors.append("SMARTROWS_TIMEOUT must be positive")

        if not self.base_url.startswith(("http://", "https://")):
            errors.append("SMARTROWS_BASE_URL must be an http(s) URL")

        if errors:
            raise ValueError("Configuration errors:\n  - " + "\n  - ".join(errors))

        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
