"""
Process-wide settings, read from PYAPPLY_* environment variables
or a .env file in the working directory.
"""
from functools import lru_cache
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings for logging and Task execution
    """
    model_config = SettingsConfigDict(
        env_prefix="PYAPPLY_", env_file=".env", env_ignore_empty=True,
        extra="ignore")

    log_level: int = Field(
        default=logging.WARNING,
        description="Level of the pyapply logger (name or number)")
    task_timeout: float | None = Field(
        default=None, gt=0,
        description="Seconds Task.run_sync waits before cancelling "
            "the computation; no limit when unset")

    @field_validator("log_level", mode="before")
    @classmethod
    def _level_from_name(cls, value):
        if isinstance(value, str) and not value.isdigit():
            level = logging.getLevelName(value.upper())
            if not isinstance(level, int):
                raise ValueError(f"Unknown log level: {value}")
            return level
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
