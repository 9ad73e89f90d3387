"""Application configuration."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from health_calculator.services.history import (
    DEFAULT_BMI_SLOT,
    DEFAULT_CALORIE_SLOT,
    DEFAULT_HISTORY_LIMIT,
)

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    history_dir: Path = Path(".health_history")
    calorie_history_slot: str = DEFAULT_CALORIE_SLOT
    bmi_history_slot: str = DEFAULT_BMI_SLOT
    history_limit: int = Field(default=DEFAULT_HISTORY_LIMIT, ge=1)
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="HEALTH_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
