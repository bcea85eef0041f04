"""Category ORM: top level of the catalog tree.

Invariants:
    - id is a UUID primary key (application default)
    - name is unique (uq_categories_name); the update path may clear it to NULL
    - every descriptive column is nullable because updates replace unspecified fields
"""

import uuid

from sqlalchemy import String, Text, Boolean, Float, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from catalog_api.db.base import Base, TimestampMixin


class Category(TimestampMixin, Base):
    __tablename__ = "categories"
    __table_args__ = (UniqueConstraint("name", name="uq_categories_name"),)

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    tax_applicability: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    tax: Mapped[float | None] = mapped_column(Float, nullable=True)
    tax_type: Mapped[str | None] = mapped_column(Text, nullable=True)
