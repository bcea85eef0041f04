"""Catalog API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {statusCode, message}
    - CORS configured from settings (not hardcoded)
    - Database initialized and tables created on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Versioned prefix applied at include time so routers stay prefix-agnostic
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_api.api.error_handlers import register_error_handlers
from catalog_api.api.routes import categories, health, items, subcategories
from catalog_api.config import get_settings
from catalog_api.infrastructure.database import init_db
from catalog_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.create_all()
    logger.info("Catalog API started")
    yield
    await manager.close()
    logger.info("Catalog API shutting down")


app = FastAPI(title="Catalog API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.root_router)
app.include_router(health.router, prefix=settings.api_prefix)
app.include_router(categories.router, prefix=settings.api_prefix)
app.include_router(subcategories.router, prefix=settings.api_prefix)
app.include_router(items.router, prefix=settings.api_prefix)
