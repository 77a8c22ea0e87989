"""Tests for PeashootSettings: TOML, env vars and CLI flags."""

from pathlib import Path

import click
import pytest

from peashoot.config.settings import PeashootSettings
from peashoot.domain.features import is_enabled


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = PeashootSettings.from_cli(root=tmp_path)
        assert settings.root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.planting.horizon_months == 12
        assert settings.data_directory() is None
        assert is_enabled(settings.feature_flags(), "calculate_date")

    def test_frozen(self, tmp_path: Path) -> None:
        settings = PeashootSettings.from_cli(root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_sections(self, tmp_path: Path) -> None:
        (tmp_path / "peashoot.toml").write_text(
            '[planting]\nhorizon_months = 6\n[data]\ndirectory = "fixtures"\n'
        )
        settings = PeashootSettings.from_cli(root=tmp_path)
        assert settings.planting.horizon_months == 6
        assert settings.data_directory() == tmp_path / "fixtures"
        assert settings.data.plants_file == "plants.yaml"

    def test_feature_override_merges_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "peashoot.toml").write_text('[features]\ncalculate_date = "disabled"\n')
        settings = PeashootSettings.from_cli(root=tmp_path)
        assert settings.features == {"calculate_date": "disabled", "seed_packets": "enabled"}
        assert not is_enabled(settings.feature_flags(), "calculate_date")

    def test_root_follows_config_file(self, tmp_path: Path) -> None:
        config = tmp_path / "peashoot.toml"
        config.write_text("")
        settings = PeashootSettings.from_cli(config_path=str(config))
        assert settings.root == tmp_path
        assert settings.config_path == config

    def test_explicit_missing_config(self, tmp_path: Path) -> None:
        with pytest.raises(click.BadParameter):
            PeashootSettings.from_cli(config_path=str(tmp_path / "nope.toml"))

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "peashoot.toml").write_text("[planting\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            PeashootSettings.from_cli(root=tmp_path)

    def test_invalid_pyproject_during_discovery(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            PeashootSettings.from_cli(root=tmp_path)


class TestEnvVars:
    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "peashoot.toml").write_text("[planting]\nhorizon_months = 6\n")
        monkeypatch.setenv("PEASHOOT_PLANTING__HORIZON_MONTHS", "3")
        settings = PeashootSettings.from_cli(root=tmp_path)
        assert settings.planting.horizon_months == 3


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PEASHOOT_QUIET", "false")
        settings = PeashootSettings.from_cli(root=tmp_path, quiet=True, json_output=True)
        assert settings.quiet is True
        assert settings.json_output is True
