"""Engine configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

UnitSystem = Literal["imperial", "metric"]


class Settings(BaseSettings):
    """Settings loaded from BITEPATH_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BITEPATH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Servings
    default_servings: int = Field(default=2, ge=1)

    # Display
    preferred_unit_system: UnitSystem = "imperial"

    # Application
    environment: str = "development"
    log_level: str = "INFO"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
