"""Subcategory ORM: second level, pointing at a Category by id.

Invariants:
    - category_id is stored as given; its existence is not checked at write time
    - category_id is set on create only (not part of the update rule set)
"""

import uuid

from sqlalchemy import String, Text, Boolean, Float
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from catalog_api.db.base import Base, TimestampMixin


class Subcategory(TimestampMixin, Base):
    __tablename__ = "subcategories"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    tax_applicability: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    tax: Mapped[float | None] = mapped_column(Float, nullable=True)
    tax_type: Mapped[str | None] = mapped_column(Text, nullable=True)
    category_id: Mapped[str] = mapped_column(
        Text, nullable=False, index=True,
    )
