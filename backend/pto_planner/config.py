from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pto_planner.schemas.policy import PolicyConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The default accrual policy can be overridden per field with nested
    variables, e.g. ``POLICY__STANDARD_CAP=200``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "PTO Planner"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:8000"]

    policy: PolicyConfig = Field(default_factory=PolicyConfig)
    projection_years_ahead: int = Field(default=2, ge=0, le=50)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
