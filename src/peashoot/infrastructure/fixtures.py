"""FixtureRepository: read-only catalog backed by YAML/JSON seed files.

Files are read from a configured directory, or from the ``peashoot/data``
package resources when none is configured.  Every file is validated
against its schema on first access; the parsed entities are cached for
the lifetime of the repository.
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from peashoot.config.models import DataConfig
from peashoot.domain.errors import PeashootError
from peashoot.domain.locations import (
    Location,
    TemperatureData,
    locations_from_temperature_data,
)
from peashoot.domain.plants import PlantRecord, SeedPacket
from peashoot.domain.validation import parse

if TYPE_CHECKING:
    from peashoot.config.settings import PeashootSettings

logger = logging.getLogger(__name__)


class FixtureLoadError(PeashootError):
    """A fixture file is missing or is not well-formed YAML/JSON."""

    code = "FIXTURE_ERROR"

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Cannot load fixture {name!r}: {reason}")


def bundled_data() -> Traversable:
    """The data directory shipped inside the package."""
    return resources.files("peashoot").joinpath("data")


def load_document(source: Traversable | Path) -> Any:
    """Read one YAML or JSON document.  ``.json`` files use the JSON parser."""
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise FixtureLoadError(source.name, str(exc)) from exc

    if source.name.endswith(".json"):
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise FixtureLoadError(source.name, str(exc)) from exc
    try:
        return YAML(typ="safe").load(text)
    except YAMLError as exc:
        raise FixtureLoadError(source.name, str(exc)) from exc


class FixtureRepository:
    """Plants, seed packets and locations loaded from seed files."""

    def __init__(
        self,
        directory: Traversable | Path | None = None,
        *,
        files: DataConfig | None = None,
    ) -> None:
        self._directory = directory if directory is not None else bundled_data()
        self._files = files or DataConfig()
        self._plants: list[PlantRecord] | None = None
        self._seed_packets: list[SeedPacket] | None = None
        self._locations: list[Location] | None = None

    @classmethod
    def from_settings(cls, settings: PeashootSettings) -> FixtureRepository:
        return cls(settings.data_directory(), files=settings.data)

    @property
    def directory(self) -> Traversable | Path:
        return self._directory

    def _load(self, filename: str, schema: Any) -> Any:
        source = self._directory.joinpath(filename)
        logger.debug("Loading fixture %s", filename)
        return parse(schema, load_document(source))

    def plants(self) -> list[PlantRecord]:
        if self._plants is None:
            self._plants = self._load(self._files.plants_file, list[PlantRecord])
        return self._plants

    def seed_packets(self) -> list[SeedPacket]:
        if self._seed_packets is None:
            self._seed_packets = self._load(self._files.seed_packets_file, list[SeedPacket])
        return self._seed_packets

    def locations(self) -> list[Location]:
        if self._locations is None:
            data = self._load(self._files.temperature_data_file, TemperatureData)
            self._locations = locations_from_temperature_data(data)
            logger.debug("Loaded %d locations", len(self._locations))
        return self._locations

    def get_location(self, location_id: str) -> Location | None:
        return next((loc for loc in self.locations() if loc.id == location_id), None)
