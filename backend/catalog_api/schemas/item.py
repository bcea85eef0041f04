"""Item Schemas: create/update rule sets, public shape and parent lookup result.

Invariants:
    - onModel is exactly "Category" or "Subcategory"
    - totalAmount is output-only; a client-supplied value is ignored
    - onModel/modelId are not part of the update rule set

Design Decisions:
    - Literal over OnModel for the request field: strict mode accepts the raw
      JSON string for a Literal, not for an Enum
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from catalog_api.core.domain_types import OnModel
from catalog_api.schemas.base import RequestModel, ResponseModel
from catalog_api.schemas.category import CategoryRead
from catalog_api.schemas.subcategory import SubcategoryRead


class ItemCreate(RequestModel):
    name: str
    image: str
    description: str
    tax_applicability: bool
    tax: float
    base_amount: float
    discount: float
    on_model: Literal["Category", "Subcategory"]
    model_id: str


class ItemUpdate(RequestModel):
    name: str | None = None
    image: str | None = None
    description: str | None = None
    tax_applicability: bool | None = None
    tax: float | None = None
    base_amount: float | None = None
    discount: float | None = None


class ItemRead(ResponseModel):
    id: UUID
    name: str | None = None
    image: str | None = None
    description: str | None = None
    tax_applicability: bool | None = None
    tax: float | None = None
    base_amount: float | None = None
    discount: float | None = None
    total_amount: float
    on_model: OnModel
    model_id: str
    created_at: datetime
    updated_at: datetime


class ItemParentRead(ResponseModel):
    """The Category or Subcategory an item is attached to; exactly one is set."""
    on_model: OnModel
    category: CategoryRead | None = None
    subcategory: SubcategoryRead | None = None
