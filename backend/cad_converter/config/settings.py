"""Application configuration and environment helpers."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_VALET_BASE_URL = "https://www.bankofcanada.ca/valet"
DEFAULT_LOOKBACK_DAYS = 6


class ConverterSettings(BaseSettings):
    """Configuration options for the converter CLI."""

    valet_base_url: str = Field(
        default=DEFAULT_VALET_BASE_URL,
        description="Base URL of the Bank of Canada Valet API.",
    )
    valet_timeout_seconds: float = Field(default=5.0, gt=0)
    lookback_days: int = Field(
        default=DEFAULT_LOOKBACK_DAYS,
        ge=0,
        description="Days before the requested date searched for an observation.",
    )
    log_level: str = Field(default="WARNING")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def dict_for_logging(self) -> dict[str, Any]:
        """Return a plain dict for logging purposes."""

        return self.model_dump()


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> ConverterSettings:
    """Return cached converter settings with optional overrides."""

    if overrides:
        return ConverterSettings(**overrides)
    return ConverterSettings()


__all__ = [
    "ConverterSettings",
    "DEFAULT_LOOKBACK_DAYS",
    "DEFAULT_VALET_BASE_URL",
    "get_settings",
]
