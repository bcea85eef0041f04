"""Identifier-or-Name Lookup: decides how a path key addresses an entity.

Invariants:
    - A key is an identifier iff it parses as a UUID; anything else is a name
    - parse_identifier never raises

Design Decisions:
    - Pure classification here, query building in services/entity_repository.py
      (ADR: functional core, imperative shell)
"""

from dataclasses import dataclass
from uuid import UUID

from catalog_api.core.domain_types import EntityId


@dataclass(frozen=True)
class LookupKey:
    """Either an identifier or a name, never both."""
    entity_id: EntityId | None = None
    name: str | None = None

    @property
    def is_identifier(self) -> bool:
        return self.entity_id is not None


def parse_identifier(value: str) -> EntityId | None:
    """Return the UUID encoded in value, or None when value is not one."""
    try:
        return EntityId(UUID(value))
    except (ValueError, TypeError, AttributeError):
        return None


def classify_key(value: str) -> LookupKey:
    """Classify a path parameter as identifier or name."""
    entity_id = parse_identifier(value)
    if entity_id is not None:
        return LookupKey(entity_id=entity_id)
    return LookupKey(name=value)
