"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Implementations live in services/ and are injected by their callers

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO
"""

from typing import Any, Protocol


class EntityLookup(Protocol):
    """Anything that can fetch one entity by its raw identifier string."""
    async def get_by_id(self, entity_id: str) -> Any: ...
