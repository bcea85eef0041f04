"""SQLAlchemy Declarative Base: shared base class and timestamp columns.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - created_at is set once; updated_at moves on every UPDATE

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - Timestamps as a mixin: all three catalog entities carry the same pair
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all catalog ORM models."""
    pass


class TimestampMixin:
    """createdAt / updatedAt pair stamped by the application."""
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )
