"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, the config file only contains
overrides.  A fresh checkout needs no config file at all.  The sections
are composed by :class:`peashoot.config.settings.PeashootSettings`.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from peashoot.domain.features import FeatureState

DEFAULT_FEATURES: dict[str, FeatureState] = {
    "calculate_date": "enabled",
    "seed_packets": "enabled",
}


class DataConfig(BaseModel):
    """[data] section."""

    model_config = {"frozen": True}

    directory: Path | None = None
    plants_file: str = "plants.yaml"
    seed_packets_file: str = "seed-packets.yaml"
    temperature_data_file: str = "temperature-data.yaml"


class PlantingConfig(BaseModel):
    """[planting] section."""

    model_config = {"frozen": True}

    horizon_months: int = Field(default=12, ge=1, le=24)


def merge_feature_defaults(value: dict[str, FeatureState]) -> dict[str, FeatureState]:
    """Overlay configured feature states on the defaults."""
    return {**DEFAULT_FEATURES, **value}
