"""Infrastructure Layer: database access and cross-cutting concerns.

Invariants:
    - Driver exceptions are mapped to core/errors.py types before leaving this layer
"""
