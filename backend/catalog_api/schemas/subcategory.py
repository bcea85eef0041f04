"""Subcategory Schemas: Category fields plus the categoryId reference.

Invariants:
    - categoryId is required on create and absent from the update rule set
"""

from catalog_api.schemas.category import CategoryCreate, CategoryUpdate, CategoryRead


class SubcategoryCreate(CategoryCreate):
    category_id: str


class SubcategoryUpdate(CategoryUpdate):
    pass


class SubcategoryRead(CategoryRead):
    category_id: str
