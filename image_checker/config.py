from __future__ import annotations

"""Configuration module for the image checker."""
from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.constraints import SizeConstraints


class Settings(BaseSettings):
    """Environment-driven settings, read from ``IMAGE_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="IMAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_data_size: int = Field(default=0, ge=0)
    max_width: int = Field(default=0, ge=0)
    max_height: int = Field(default=0, ge=0)
    min_width: int = Field(default=0, ge=0)
    min_height: int = Field(default=0, ge=0)
    locale: str = Field(default="en")
    check_timeout: float = Field(default=10.0, gt=0)
    check_workers: int = Field(default=2, ge=1)
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "IMAGE_LOG_LEVEL", "log_level"),
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    def constraints(self) -> SizeConstraints:
        return SizeConstraints(
            max_data_size=self.max_data_size,
            max_width=self.max_width,
            max_height=self.max_height,
            min_width=self.min_width,
            min_height=self.min_height,
        )


@lru_cache()
def load_settings() -> Settings:
    return Settings()
