"""Feature flags: a fixed mapping from feature name to its state.

Callers hold a :class:`FeatureFlags` value and query it through the two
pure functions below rather than through adapter subclasses.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from peashoot.domain.base import DomainModel
from peashoot.domain.errors import InvalidArgumentError

FeatureState = Literal["enabled", "disabled"]


class FeatureFlags(DomainModel):
    states: dict[str, FeatureState] = Field(default_factory=dict)


def has_feature(flags: FeatureFlags, feature: str) -> bool:
    """True when *feature* is declared, whatever its state."""
    return feature in flags.states


def get_feature_state(flags: FeatureFlags, feature: str) -> FeatureState:
    """Return the declared state of *feature*.

    Raises:
        InvalidArgumentError: If *feature* is not declared.
    """
    state = flags.states.get(feature)
    if state is None:
        raise InvalidArgumentError("feature", f"unknown feature {feature!r}")
    return state


def is_enabled(flags: FeatureFlags, feature: str) -> bool:
    return has_feature(flags, feature) and get_feature_state(flags, feature) == "enabled"
