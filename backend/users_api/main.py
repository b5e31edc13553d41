"""Users API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly under settings.api_prefix (no auto-discovery)
    - Global error handlers map UsersApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Startup fails fast when the ORM mapping does not match the database schema

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers registered from api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_api.api.error_handlers import register_error_handlers
from users_api.api.routes import health, users
from users_api.config import get_settings
from users_api.infrastructure.database import init_db
from users_api.infrastructure.observability import setup_logging
import users_api.models  # noqa: F401  (populates Base.metadata)

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
    if settings.database_create_tables:
        await manager.create_tables()
    await manager.verify_schema()
    logger.info(f"{settings.project_name} started")
    yield
    logger.info(f"{settings.project_name} shutting down")
    await manager.dispose()


settings = get_settings()

app = FastAPI(
    title=settings.project_name, version=settings.api_version,
    lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router, prefix=settings.api_prefix)
app.include_router(users.router, prefix=settings.api_prefix)

register_error_handlers(app)
