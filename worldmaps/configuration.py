"""Mini README: Centralised configuration for worldmaps.

Structure:
    * WorldmapsSettings - pydantic-settings model read from the environment.
    * get_settings - cached accessor shared by the CLI and services.

Usage:
    Every field can be overridden with a ``WORLDMAPS_`` prefixed environment
    variable or a ``.env`` file, e.g. ``WORLDMAPS_MAX_LOCATIONS=50000``.
    ``settings.policy()`` turns the bounds into the immutable
    ``ValidationPolicy`` handed to the validator, and
    ``settings.reserved_names()`` loads the reserved-name data.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .geometry import EARTH_RADIUS_KM
from .validation import DEFAULT_CONTACT_EMAIL, ReservedNames, ValidationPolicy, load_reserved_names

_DEFAULT_POLICY = ValidationPolicy()


class WorldmapsSettings(BaseSettings):
    """Runtime configuration for map submission."""

    model_config = SettingsConfigDict(
        env_prefix="WORLDMAPS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label used in log output.",
    )
    log_level: str = Field("INFO", description="Root logging level for the CLI.")

    min_name_length: int = Field(_DEFAULT_POLICY.min_name_length, ge=0)
    max_name_length: int = Field(_DEFAULT_POLICY.max_name_length, ge=0)
    min_short_description_length: int = Field(_DEFAULT_POLICY.min_short_description_length, ge=0)
    max_short_description_length: int = Field(_DEFAULT_POLICY.max_short_description_length, ge=0)
    min_long_description_length: int = Field(_DEFAULT_POLICY.min_long_description_length, ge=0)
    max_long_description_length: int = Field(_DEFAULT_POLICY.max_long_description_length, ge=0)
    min_locations: int = Field(_DEFAULT_POLICY.min_locations, ge=0)
    max_locations: int = Field(_DEFAULT_POLICY.max_locations, ge=0)

    earth_radius_km: float = Field(
        EARTH_RADIUS_KM,
        gt=0,
        description="Sphere radius used when projecting locations for maxDist.",
    )
    contact_email: str = Field(
        DEFAULT_CONTACT_EMAIL,
        description="Address quoted to users who exceed the location limit.",
    )
    countries_path: Optional[Path] = Field(
        None,
        description="JSON list of country codes; defaults to the bundled list.",
    )
    official_maps_path: Optional[Path] = Field(
        None,
        description="JSON object of official country maps; defaults to the bundled data.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unsupported log level: {value}")
        return level

    @field_validator("countries_path", "official_maps_path", mode="before")
    @classmethod
    def _expand_path(cls, value: Optional[str | Path]) -> Optional[Path]:
        """Expand user directories; the file itself is read lazily."""

        if value in (None, ""):
            return None
        return Path(value).expanduser().resolve()

    @model_validator(mode="after")
    def _check_bounds(self) -> "WorldmapsSettings":
        self.policy()
        return self

    def policy(self) -> ValidationPolicy:
        """Build the validation policy from the configured bounds."""

        return ValidationPolicy(
            min_name_length=self.min_name_length,
            max_name_length=self.max_name_length,
            min_short_description_length=self.min_short_description_length,
            max_short_description_length=self.max_short_description_length,
            min_long_description_length=self.min_long_description_length,
            max_long_description_length=self.max_long_description_length,
            min_locations=self.min_locations,
            max_locations=self.max_locations,
        )

    def reserved_names(self) -> ReservedNames:
        return load_reserved_names(self.countries_path, self.official_maps_path)


@lru_cache()
def get_settings() -> WorldmapsSettings:
    """Return cached settings so every module sees the same configuration."""

    return WorldmapsSettings()
