"""Runtime settings for the validator.

Values come from ``OCPP_VALIDATE_*`` environment variables or a local
``.env`` file.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ValidatorSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OCPP_VALIDATE_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    eager_load: bool = Field(
        default=False,
        description="Parse every bundled schema when the default registry is built.",
    )
    check_formats: bool = Field(
        default=True,
        description="Check string formats such as date-time and uri.",
    )
    log_level: str = Field(
        default="INFO",
        description="Level passed to logging.basicConfig by configure_logging.",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> ValidatorSettings:
    return ValidatorSettings()


def configure_logging(settings: ValidatorSettings | None = None) -> None:
    """Set up root logging with the configured level."""
    settings = settings or get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level))
