"""Tests for feature flag lookups."""

import pytest

from peashoot.domain.errors import InvalidArgumentError
from peashoot.domain.features import FeatureFlags, get_feature_state, has_feature, is_enabled

FLAGS = FeatureFlags(states={"calculate_date": "enabled", "seed_packets": "disabled"})


class TestFeatureFlags:
    def test_has_feature(self) -> None:
        assert has_feature(FLAGS, "calculate_date")
        assert has_feature(FLAGS, "seed_packets")
        assert not has_feature(FLAGS, "weather")

    def test_get_state(self) -> None:
        assert get_feature_state(FLAGS, "calculate_date") == "enabled"
        assert get_feature_state(FLAGS, "seed_packets") == "disabled"

    def test_unknown_feature_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="weather"):
            get_feature_state(FLAGS, "weather")

    def test_is_enabled(self) -> None:
        assert is_enabled(FLAGS, "calculate_date")
        assert not is_enabled(FLAGS, "seed_packets")
        assert not is_enabled(FLAGS, "weather")

    def test_states_validated(self) -> None:
        with pytest.raises(Exception):
            FeatureFlags(states={"calculate_date": "maybe"})  # type: ignore[dict-item]
