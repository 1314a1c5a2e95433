"""Application settings loaded from environment variables."""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application configuration from TAXCALC_* environment variables."""

    log_level: LogLevel = "WARNING"
    prompt_timeout: float | None = None  # seconds per prompt; None waits forever

    model_config = {"env_prefix": "TAXCALC_", "env_file": ".env", "extra": "ignore"}

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


settings = Settings()
