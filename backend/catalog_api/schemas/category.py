"""Category Schemas: create/update rule sets and the public shape.

Invariants:
    - CategoryCreate.name: 3-50 chars; description: at least 10 chars
    - CategoryUpdate declares every field optional with the same per-field limits
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from catalog_api.schemas.base import RequestModel, ResponseModel


class CategoryCreate(RequestModel):
    name: str = Field(min_length=3, max_length=50)
    image: str
    description: str = Field(min_length=10)
    tax_applicability: bool
    tax: float
    tax_type: str | None = None


class CategoryUpdate(RequestModel):
    name: str | None = Field(None, min_length=3, max_length=50)
    image: str | None = None
    description: str | None = Field(None, min_length=10)
    tax_applicability: bool | None = None
    tax: float | None = None
    tax_type: str | None = None


class CategoryRead(ResponseModel):
    id: UUID
    name: str | None = None
    image: str | None = None
    description: str | None = None
    tax_applicability: bool | None = None
    tax: float | None = None
    tax_type: str | None = None
    created_at: datetime
    updated_at: datetime
