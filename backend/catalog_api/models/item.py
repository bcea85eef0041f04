"""Item ORM: sellable entry attached to a Category or a Subcategory.

Invariants:
    - total_amount is always base_amount - discount (set by ItemRepository)
    - (on_model, model_id) is a polymorphic reference; on_model names the target table
    - on_model/model_id are set on create only

Design Decisions:
    - Discriminator column over two nullable FKs: one filter serves both
      "items under category" and "items under subcategory"
"""

import uuid

from sqlalchemy import String, Text, Boolean, Float, Index
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from catalog_api.core.domain_types import ModelRef, OnModel
from catalog_api.db.base import Base, TimestampMixin


class Item(TimestampMixin, Base):
    __tablename__ = "items"
    __table_args__ = (Index("ix_items_on_model_model_id", "on_model", "model_id"),)

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str | None] = mapped_column(Text, nullable=True, index=True)
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    tax_applicability: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    tax: Mapped[float | None] = mapped_column(Float, nullable=True)
    base_amount: Mapped[float | None] = mapped_column(Float, nullable=True)
    discount: Mapped[float | None] = mapped_column(Float, nullable=True)
    total_amount: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    on_model: Mapped[str] = mapped_column(String(20), nullable=False)
    model_id: Mapped[str] = mapped_column(Text, nullable=False)

    @property
    def reference(self) -> ModelRef:
        return ModelRef(OnModel(self.on_model), self.model_id)
