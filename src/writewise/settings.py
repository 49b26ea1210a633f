from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from writewise.modules.assessment.profiles import get_profile


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        # Don't require .env file to exist
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # Scoring Configuration
    SCORING_PROFILE: str = "corrected"
    MIN_SUBMISSION_CHARS: int = 10

    # Application Configuration
    LOG_LEVEL: str = "INFO"

    @field_validator("SCORING_PROFILE")
    @classmethod
    def check_profile(cls, value: str) -> str:
        return get_profile(value).name


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
