"""Runtime settings, read from CINEMA_* environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class CinemaSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CINEMA_",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Earnings aggregation ignores the requested date range unless enabled.
    EARNINGS_FILTER_BY_DATE: bool = False
    # Only direct sub-providers are aggregated unless enabled.
    EARNINGS_INCLUDE_ALL_DESCENDANTS: bool = False


@lru_cache
def get_settings() -> CinemaSettings:
    return CinemaSettings()
