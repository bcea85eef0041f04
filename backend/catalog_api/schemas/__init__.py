"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (request bodies, response bodies)
    - Wire names are camelCase, Python attribute names are snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - One create and one update model per entity: update rules are declared,
      not derived from create rules at runtime
"""
