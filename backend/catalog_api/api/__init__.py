"""API Layer: FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response body is JSON: envelope on success, {statusCode, message} on failure
    - The one exception is GET /, which answers with a plain string

Design Decisions:
    - Thin routes delegate to repositories in services/
"""
