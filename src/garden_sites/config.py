"""Engine configuration."""

import logging
import sys

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``GARDEN_SITES_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GARDEN_SITES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Planar distance in degrees under which an unassigned garden is
    # suggested for a site (0.05 is roughly 5 km at mid latitudes)
    nearby_threshold_degrees: float = Field(default=0.05, ge=0.0)

    # Map framing when nothing is known yet (geographic center of the US)
    default_center_lat: float = Field(default=39.8283, ge=-90.0, le=90.0)
    default_center_lng: float = Field(default=-98.5795, ge=-180.0, le=180.0)

    # Geolocation fixes less accurate than this frame at neighborhood scale
    max_close_up_accuracy_m: float = Field(default=100.0, gt=0.0)
    geolocation_timeout_seconds: float = Field(default=10.0, gt=0.0)

    # Logging
    log_level: str = "info"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept any letter case for the level name."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


settings = Settings()


def setup_logging() -> None:
    """Configure root logging from settings."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )
