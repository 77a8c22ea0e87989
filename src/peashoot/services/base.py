"""BaseService: shared foundation for peashoot services.

Every service receives a :class:`FixtureRepository` for data access and
the active :class:`PeashootSettings` for feature flags and tunables.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from peashoot.domain.features import is_enabled
from peashoot.domain.validation import dump, parse
from peashoot.services.result import FORBIDDEN, ServiceResult, failure

if TYPE_CHECKING:
    from peashoot.config.settings import PeashootSettings
    from peashoot.infrastructure.fixtures import FixtureRepository

logger = logging.getLogger(__name__)


def dump_validated(schema: Any, value: Any) -> Any:
    """Serialize *value* after checking it against the response *schema*."""
    return dump(parse(schema, dump(value)))


class BaseService:
    """Base for service-layer classes.

    Usage::

        class CatalogService(BaseService):
            def list_items(self) -> ServiceResult:
                plants = self._repository.plants()
                ...
    """

    def __init__(self, repository: FixtureRepository, settings: PeashootSettings) -> None:
        self._repository = repository
        self._settings = settings

    def _require_feature(self, op: str, feature: str) -> ServiceResult | None:
        """Return a failed result when *feature* is not enabled, else None."""
        if is_enabled(self._settings.feature_flags(), feature):
            return None
        logger.info("Rejected %s: feature %s is disabled", op, feature)
        return failure(
            op,
            "FEATURE_DISABLED",
            f"Feature '{feature}' is disabled",
            status=FORBIDDEN,
            detail={"feature": feature},
        )
