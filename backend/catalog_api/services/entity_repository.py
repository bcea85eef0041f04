"""Entity Repository: create / find / update shared by all three catalog entities.

Invariants:
    - find_all and find_by return lists; an empty list is a valid result, never a 404
    - find_by_id_or_name queries by id when the key is a UUID, otherwise by name
    - update_by_id writes every key it is given, None included (replace semantics)
    - Unique violations on commit surface as DuplicateKeyError(field)

Design Decisions:
    - Subclasses declare model and entity_name; no metaclass or registry
    - Commit errors translated here, not only in DatabaseSessionManager: the
      request session may come from an overridden dependency
"""

import logging
from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.errors import NotFoundError
from catalog_api.core.lookup import classify_key, parse_identifier
from catalog_api.db.base import Base
from catalog_api.infrastructure.database import translate_integrity_error

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class EntityRepository(Generic[ModelT]):
    """Persistence operations for one ORM model."""

    model: type[ModelT]
    entity_name: str

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, fields: dict) -> ModelT:
        entity = self.model(**fields)
        self.db.add(entity)
        await self._commit()
        await self.db.refresh(entity)
        logger.info(
            f"{self.entity_name} created",
            extra={"entity": self.entity_name, "entity_id": str(entity.id)},
        )
        return entity

    async def find_all(self) -> list[ModelT]:
        result = await self.db.execute(
            select(self.model).order_by(self.model.created_at),
        )
        return list(result.scalars().all())

    async def find_by(self, **filters: object) -> list[ModelT]:
        result = await self.db.execute(
            select(self.model)
            .filter_by(**filters)
            .order_by(self.model.created_at),
        )
        return list(result.scalars().all())

    async def get_by_id(self, entity_id: str) -> ModelT:
        """Fetch by identifier only. Malformed identifiers are simply not found."""
        parsed = parse_identifier(entity_id)
        if parsed is None:
            raise NotFoundError(self.entity_name)
        entity = await self.db.get(self.model, parsed)
        if entity is None:
            raise NotFoundError(self.entity_name)
        return entity

    async def find_by_id_or_name(self, key: str) -> ModelT:
        lookup = classify_key(key)
        if lookup.is_identifier:
            clause = self.model.id == lookup.entity_id
        else:
            clause = self.model.name == lookup.name
        result = await self.db.execute(
            select(self.model)
            .where(clause)
            .order_by(self.model.created_at)
            .limit(1),
        )
        entity = result.scalars().first()
        if entity is None:
            raise NotFoundError(self.entity_name)
        return entity

    async def update_by_id(self, entity_id: str, fields: dict) -> ModelT:
        entity = await self.get_by_id(entity_id)
        for column, value in fields.items():
            setattr(entity, column, value)
        await self._commit()
        await self.db.refresh(entity)
        return entity

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            error = translate_integrity_error(e)
            logger.warning(
                f"{self.entity_name} write rejected: {error.message}",
                extra={"entity": self.entity_name, "error_code": error.code},
            )
            raise error from e
