"""Category Repository: persistence for categories (name is unique)."""

from catalog_api.models.category import Category
from catalog_api.services.entity_repository import EntityRepository


class CategoryRepository(EntityRepository[Category]):
    model = Category
    entity_name = "Category"
