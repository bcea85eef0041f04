"""ORM Models: SQLAlchemy declarative models for the three catalog entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - No foreign keys: subcategory.category_id and item.model_id are unvalidated references

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all runs
"""

from catalog_api.models.category import Category  # noqa: F401
from catalog_api.models.subcategory import Subcategory  # noqa: F401
from catalog_api.models.item import Item  # noqa: F401
