"""Runtime settings using pydantic-settings."""

from __future__ import annotations

from typing import Any, Literal, TypeAlias

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel: TypeAlias = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_LOGGER_NAME = "lambda-connect"


class Settings(BaseSettings):
    """Logging settings, overridable with ``LAMBDA_CONNECT_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="LAMBDA_CONNECT_", extra="ignore")

    logger_name: str = Field(default=DEFAULT_LOGGER_NAME, min_length=1)
    log_level: LogLevel = "INFO"
    log_serialize: bool = True


def load_settings(**overrides: Any) -> Settings:
    """Build settings from the environment, with explicit keyword overrides on top."""
    return Settings(**{key: value for key, value in overrides.items() if value is not None})
