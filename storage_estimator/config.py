"""
Configuration settings for the SQL Storage Estimator.

Uses Pydantic Settings to load environment variables for logging and the
default form values (agents, repeat time, work hours, column layout) used by
the CLI when an option is not given explicitly.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Estimation defaults
    agents: int = Field(100, ge=0, alias="ESTIMATOR_AGENTS")
    repeat_time: str = Field("00:01:00", alias="ESTIMATOR_REPEAT_TIME")
    work_start: str = Field("09:00", alias="ESTIMATOR_WORK_START")
    work_end: str = Field("17:00", alias="ESTIMATOR_WORK_END")
    column_count: int = Field(6, ge=0, alias="ESTIMATOR_COLUMN_COUNT")
    default_column_type: str = Field("varchar", alias="ESTIMATOR_DEFAULT_COLUMN_TYPE")
    default_column_length: int = Field(50, ge=0, alias="ESTIMATOR_DEFAULT_COLUMN_LENGTH")
    byte_decimals: int = Field(2, alias="ESTIMATOR_BYTE_DECIMALS")

    @field_validator("default_column_type", mode="before")
    @classmethod
    def _normalize_column_type(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
