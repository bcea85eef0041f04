"""Subcategory Repository: persistence for subcategories and lookup by parent category."""

from catalog_api.models.subcategory import Subcategory
from catalog_api.services.entity_repository import EntityRepository


class SubcategoryRepository(EntityRepository[Subcategory]):
    model = Subcategory
    entity_name = "Subcategory"

    async def find_by_category(self, category_id: str) -> list[Subcategory]:
        return await self.find_by(category_id=category_id)
