"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``PEASHOOT_*`` prefix, ``__`` for nesting
  3. TOML file: ``peashoot.toml`` or ``[tool.peashoot]``, via walk-up
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from peashoot.config.discovery import find_config, read_config_table
from peashoot.config.models import (
    DEFAULT_FEATURES,
    DataConfig,
    PlantingConfig,
    merge_feature_defaults,
)
from peashoot.domain.features import FeatureFlags, FeatureState


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings table of the discovered TOML file, below env vars in priority."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = _read_settings_table(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


def _read_settings_table(toml_path: Path | None) -> dict[str, Any]:
    if toml_path is None or not toml_path.is_file():
        return {}
    try:
        return read_config_table(toml_path) or {}
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class PeashootSettings(BaseSettings):
    """Unified settings for the peashoot CLI and services.

    Attributes:
        root: Project directory (parent of the config file, or CWD).
        config_path: The config file in effect, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PEASHOOT_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    data: DataConfig = Field(default_factory=DataConfig)
    planting: PlantingConfig = Field(default_factory=PlantingConfig)
    features: dict[str, FeatureState] = Field(default_factory=lambda: dict(DEFAULT_FEATURES))

    @field_validator("features")
    @classmethod
    def _merge_features(cls, value: dict[str, FeatureState]) -> dict[str, FeatureState]:
        return merge_feature_defaults(value)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> PeashootSettings:
        """Construct settings from a CLI invocation.

        Discovers the config file via walk-up (or explicit *config_path*),
        resolves *root* from the config file's parent directory, and merges
        CLI flags as highest-priority overrides.
        """
        if config_path:
            toml_path: Path | None = Path(config_path)
            if not toml_path.is_file():
                raise click.BadParameter(
                    f"config file not found: {config_path}", param_hint="'-c' / '--config'"
                )
        else:
            try:
                toml_path = find_config(root)
            except tomllib.TOMLDecodeError as exc:
                raise click.ClickException(f"Invalid TOML during config discovery: {exc}") from exc

        resolved_root = root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(root=resolved_root, config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

    def feature_flags(self) -> FeatureFlags:
        return FeatureFlags(states=self.features)

    def data_directory(self) -> Path | None:
        """Configured fixture directory, resolved against :attr:`root`."""
        directory = self.data.directory
        if directory is None:
            return None
        return directory if directory.is_absolute() else self.root / directory
