"""Centralized configuration using Pydantic Settings.

Every setting can be overridden via environment variables:
- OTPI_OTP_BASE_URL=https://otp.example.org
- OTPI_OTP_TIMEOUT_SECONDS=20
- OTPI_DISPLAY_DISTANCE_UNITS=miles
- OTPI_GEOMETRY_CACHE_ENABLED=false
- OTPI_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class OTPConfig(BaseSettings):
    """Connection to the OpenTripPlanner deployment.

    Environment variables prefixed with OTPI_OTP_.
    """

    model_config = SettingsConfigDict(env_prefix="OTPI_OTP_")

    base_url: str = "http://localhost:8080"
    router_id: str = "default"
    timeout_seconds: float = 10.0

    @property
    def plan_url(self) -> str:
        """Full URL of the router's plan endpoint."""
        return f"{self.base_url.rstrip('/')}/otp/routers/{self.router_id}/plan"


class DisplayConfig(BaseSettings):
    """Display preferences.

    Environment variables prefixed with OTPI_DISPLAY_.
    """

    model_config = SettingsConfigDict(env_prefix="OTPI_DISPLAY_")

    distance_units: Literal["kilometers", "miles"] = "kilometers"
    locale: str = "en-US"


class GeometryConfig(BaseSettings):
    """Leg geometry decoding and its external cache.

    Environment variables prefixed with OTPI_GEOMETRY_.
    """

    model_config = SettingsConfigDict(env_prefix="OTPI_GEOMETRY_")

    precision: int = 5
    cache_enabled: bool = True
    cache_max_size: Optional[int] = 512
    cache_ttl_seconds: Optional[float] = None


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with OTPI_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="OTPI_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.otp.plan_url)
        print(config.display.distance_units)

    Environment variables prefixed with OTPI_.
    """

    model_config = SettingsConfigDict(env_prefix="OTPI_")

    otp: OTPConfig = Field(default_factory=OTPConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    output_dir: Path = Field(default_factory=Path.cwd)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. Call reset_config() to
    force a reload (e.g. in tests after changing the environment).
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
