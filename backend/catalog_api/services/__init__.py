"""Services Layer: per-entity repositories and the item reference resolver.

Invariants:
    - Repositories own every query; routes never build SQL
    - Repositories raise core/errors.py types, never HTTPException

Design Decisions:
    - One repository file per entity for locality, shared behaviour in entity_repository.py
"""
