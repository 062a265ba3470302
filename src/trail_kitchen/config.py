"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from trail_kitchen.domain.units import METRIC, UNIT_SYSTEMS

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    owner_id: str
    default_unit_system: str = METRIC
    log_level: str = "INFO"
    trips_table: str = "trips"
    food_items_table: str = "food_items"
    user_settings_table: str = "user_settings"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_unit_system(raw: str | None) -> str:
    """Normalize a unit system name, falling back to metric."""
    if raw is None:
        return METRIC
    cleaned = raw.strip().lower()
    if cleaned in UNIT_SYSTEMS:
        return cleaned
    return METRIC
