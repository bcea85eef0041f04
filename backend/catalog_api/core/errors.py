"""Error Hierarchy: typed, categorized exceptions for every catalog failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status (int)
    - to_response() produces the uniform {statusCode, message} error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CatalogError base: one FastAPI handler catches all
      (ADR: uniform error shape, routes never format errors themselves)
    - Request validation stays on FastAPI's RequestValidationError; only the
      handler in api/error_handlers.py knows about it
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for routing and observability."""
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the standardized REST error body."""
        return {"statusCode": self.http_status, "message": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class NotFoundError(CatalogError):
    """Requested entity does not exist."""
    def __init__(self, entity: str):
        super().__init__(
            f"{entity} not found.",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.entity = entity


class DuplicateKeyError(CatalogError):
    """Unique constraint violated on insert or update."""
    def __init__(self, field: str):
        super().__init__(
            f"{field} already exists",
            "DUPLICATE_KEY", ErrorCategory.CONFLICT, 400,
        )
        self.field = field


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(CatalogError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE, 503,
        )
        self.operation = operation

    def to_response(self) -> dict:
        # driver details stay in the logs
        return {"statusCode": self.http_status, "message": "Database unavailable"}
