"""Database Session Manager: async connection pool, error mapping and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - Unique violations become DuplicateKeyError, everything else from the
      driver becomes DatabaseError (core/errors.py)

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
      (ADR: no global import side effects)
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Tables created from ORM metadata at startup; the schema has no migrations
"""

import logging
import re
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from pydantic.alias_generators import to_camel
from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from catalog_api.core.errors import CatalogError, DatabaseError, DuplicateKeyError
from catalog_api.db.base import Base

logger = logging.getLogger(__name__)

# SQLite: "UNIQUE constraint failed: categories.name"
# PostgreSQL: 'duplicate key value violates unique constraint "uq_categories_name"'
#             and "Key (name)=(Bakery) already exists."
_UNIQUE_PATTERNS = (
    re.compile(r"UNIQUE constraint failed: \w+\.(?P<column>\w+)"),
    re.compile(r"Key \((?P<column>\w+)\)="),
    re.compile(r'unique constraint "uq_[a-z]+_(?P<column>\w+)"'),
)


def translate_integrity_error(exc: IntegrityError) -> CatalogError:
    """Map an IntegrityError to DuplicateKeyError(field) when it is a unique violation."""
    detail = str(exc.orig) if exc.orig is not None else str(exc)
    for pattern in _UNIQUE_PATTERNS:
        match = pattern.search(detail)
        if match:
            return DuplicateKeyError(to_camel(match.group("column")))
    return DatabaseError("Integrity constraint violated", "commit")


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.warning(f"DB integrity error: {e}")
            raise translate_integrity_error(e) from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Connection or operational error", "execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown") from e
        finally:
            await session.close()

    async def create_all(self) -> None:
        """Create every table registered on Base.metadata (idempotent)."""
        import catalog_api.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
