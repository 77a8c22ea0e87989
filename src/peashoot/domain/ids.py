"""Prefixed entity identifiers.

Every persisted entity carries an id of the form ``{prefix}_{opaque}``:
the prefix names the entity kind and is what reference fields check.
Two suffix strategies:
- Random (entities created at runtime): UUID4.
- Content-hash (records loaded from seed files): SHA-256 of the
  normalized identifying text, 8 hex chars.

INVARIANT: IDs are permanent. Once generated, an ID never changes.
"""

from __future__ import annotations

import hashlib
import re
import unicodedata
import uuid

ID_SEPARATOR = "_"

ID_PREFIXES: dict[str, str] = {
    "plant": "plant",
    "seed_packet": "spkt",
    "placement": "plcmt",
    "garden_bed": "gbed",
    "garden": "grdn",
    "indicator": "ind",
    "location": "loc",
    "location_temperature": "loctemp",
}


def id_pattern(prefix: str) -> re.Pattern[str]:
    """Compiled pattern for ``{prefix}_{non-empty suffix}``."""
    return re.compile(rf"^{re.escape(prefix)}{ID_SEPARATOR}.+$", re.DOTALL)


def make_unique_id(prefix: str) -> str:
    """Generate a fresh ``{prefix}_{uuid4}`` identifier."""
    return f"{prefix}{ID_SEPARATOR}{uuid.uuid4()}"


def normalize_text(text: str) -> str:
    """Normalize text for content-hash id generation.

    Lowercases, applies NFKC normalization, strips punctuation,
    and collapses whitespace.
    """
    text = unicodedata.normalize("NFKC", text.lower())
    text = re.sub(r"[^\w\s]", "", text)
    return re.sub(r"\s+", " ", text).strip()


def generate_content_id(prefix: str, *parts: str) -> str:
    """Deterministic ``{prefix}_{8 hex}`` id derived from *parts*.

    Used for records loaded from seed files so ids are stable across loads.
    """
    normalized = "\x1f".join(normalize_text(part) for part in parts)
    digest = hashlib.sha256(normalized.encode("utf-8")).hexdigest()[:8]
    return f"{prefix}{ID_SEPARATOR}{digest}"


def is_id_with_prefix(prefix: str, entity_id: str) -> bool:
    """Check whether *entity_id* carries *prefix* and a non-empty suffix."""
    return id_pattern(prefix).match(entity_id) is not None


def validate_id(entity_id: str, kind: str) -> bool:
    """Check whether *entity_id* matches the prefix registered for *kind*."""
    prefix = ID_PREFIXES.get(kind)
    if prefix is None:
        return False
    return is_id_with_prefix(prefix, entity_id)
