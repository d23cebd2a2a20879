"""Application settings.

Centralises environment variables (pydantic-settings) so the core never
reads process-wide state: the CLI loads :class:`Settings` once and passes
the values into the objects it builds.
"""

from __future__ import annotations

import logging

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from coltype.exceptions import ConfigurationError

_LOG_LEVELS: tuple[str, ...] = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Central configuration, read from ``COLTYPE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="COLTYPE_",
        extra="ignore",
        case_sensitive=False,
    )

    use_locale_parser: bool = Field(
        default=False,
        description="Parse decimal form input with the locale number parser.",
    )
    decimal_point: str = Field(
        default=".",
        min_length=1,
        max_length=1,
        description="Decimal separator accepted by the locale number parser.",
    )
    thousands_separator: str = Field(
        default=",",
        max_length=1,
        description="Grouping separator stripped by the locale number parser.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root logging level for the CLI.",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def check_separators(self) -> Settings:
        if self.decimal_point == self.thousands_separator:
            raise ValueError("decimal_point and thousands_separator must differ")
        return self

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings(**overrides: object) -> Settings:
    """Load :class:`Settings`, mapping validation failures to ``ConfigurationError``."""
    try:
        return Settings(**overrides)  # type: ignore[arg-type]
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ())) or "settings"
        raise ConfigurationError(
            f"Invalid configuration: {location}: {first.get('msg', exc)}",
            hint="Check the COLTYPE_* environment variables.",
        ) from exc
