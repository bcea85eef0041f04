"""Item Repository: persistence for items, derived totals and name search.

Invariants:
    - total_amount recomputed from base_amount/discount on every create and update
    - search_by_name matches a case-insensitive substring; LIKE wildcards in the
      fragment match literally
"""

from sqlalchemy import select

from catalog_api.core.domain_types import ModelRef
from catalog_api.core.item_pricing import compute_total_amount
from catalog_api.models.item import Item
from catalog_api.services.entity_repository import EntityRepository


def _escape_like(fragment: str) -> str:
    return (
        fragment.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    )


class ItemRepository(EntityRepository[Item]):
    model = Item
    entity_name = "Item"

    async def create(self, fields: dict) -> Item:
        fields = {
            **fields,
            "total_amount": compute_total_amount(
                fields.get("base_amount"), fields.get("discount"),
            ),
        }
        return await super().create(fields)

    async def update_by_id(self, entity_id: str, fields: dict) -> Item:
        fields = {
            **fields,
            "total_amount": compute_total_amount(
                fields.get("base_amount"), fields.get("discount"),
            ),
        }
        return await super().update_by_id(entity_id, fields)

    async def find_by_ref(self, ref: ModelRef) -> list[Item]:
        """Items attached to the referenced Category or Subcategory."""
        return await self.find_by(
            on_model=ref.on_model.value, model_id=ref.model_id,
        )

    async def search_by_name(self, fragment: str) -> list[Item]:
        pattern = f"%{_escape_like(fragment)}%"
        result = await self.db.execute(
            select(Item)
            .where(Item.name.ilike(pattern, escape="\\"))
            .order_by(Item.created_at),
        )
        return list(result.scalars().all())
