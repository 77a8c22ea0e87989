"""Tests for the named schema registry."""

import pytest

from peashoot.domain.plants import Garden
from peashoot.domain.registry import SCHEMA_REGISTRY, get_schema
from peashoot.domain.validation import is_valid


class TestRegistry:
    def test_lookup(self) -> None:
        assert get_schema("garden") is Garden

    def test_unknown_kind(self) -> None:
        with pytest.raises(KeyError):
            get_schema("spaceship")

    def test_every_schema_builds_a_validator(self) -> None:
        for schema in SCHEMA_REGISTRY.values():
            assert is_valid(schema, object()) is False
