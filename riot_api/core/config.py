"""Configuration settings for the Riot API client."""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import Region


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    # Riot API
    riot_api_key: SecretStr = Field(default=SecretStr(""))
    riot_region: Region = Field(default=Region.EUW1)

    # HTTP
    request_timeout: float = Field(default=30.0, description="Transport timeout in seconds")
    max_rate_limit_retries: Optional[int] = Field(
        default=None,
        description="Give up after this many consecutive 429 responses (unbounded if unset)",
    )

    # Logging
    log_level: str = Field(default="INFO")

    @field_validator("riot_region", mode="before")
    @classmethod
    def normalize_region(cls, v: object) -> object:
        """Accept region names in any case (e.g. ``EUW1``)."""
        return v.lower() if isinstance(v, str) else v

    @field_validator("max_rate_limit_retries")
    @classmethod
    def validate_max_retries(cls, v: Optional[int]) -> Optional[int]:
        """Reject negative retry caps."""
        if v is not None and v < 0:
            raise ValueError("max_rate_limit_retries must be >= 0")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get a fresh settings instance."""
    load_dotenv()
    return Settings()


# Create a global settings instance lazily
settings: Optional[Settings] = None


def get_global_settings() -> Settings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
