"""Reference Resolver: follows an item's (onModel, modelId) to the owning entity.

Invariants:
    - Dispatch is on ModelRef.on_model only; every tag has exactly one repository
    - A dangling reference raises NotFoundError for the target entity

Design Decisions:
    - Explicit dict from tag to repository: every mapping visible in one place,
      adding a target collection requires editing this dict
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.domain_types import ModelRef, OnModel
from catalog_api.core.repository_protocols import EntityLookup
from catalog_api.services.category_repository import CategoryRepository
from catalog_api.services.subcategory_repository import SubcategoryRepository

logger = logging.getLogger(__name__)


class ReferenceResolver:
    """Routes ModelRef.on_model -> repository."""

    def __init__(self, db: AsyncSession):
        self._lookups: dict[OnModel, EntityLookup] = {
            OnModel.CATEGORY: CategoryRepository(db),
            OnModel.SUBCATEGORY: SubcategoryRepository(db),
        }

    async def resolve(self, ref: ModelRef):
        lookup = self._lookups[ref.on_model]
        logger.debug(
            f"Resolving {ref.on_model.value} reference",
            extra={"entity": ref.on_model.value, "entity_id": ref.model_id},
        )
        return await lookup.get_by_id(ref.model_id)
