"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="VENDBUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Stock
    low_stock_threshold: int = Field(default=2, ge=0)
    default_stock_level: int = Field(default=5, ge=0)

    # Machines
    machine_ids: list[str] = Field(default_factory=lambda: ["001", "002", "003"])

    @field_validator("machine_ids")
    @classmethod
    def _check_machine_ids(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("at least one machine id is required")
        if len(set(value)) != len(value):
            raise ValueError("machine ids must be unique")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
