"""Blueprints API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BlueprintsError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Filter, token service and store chosen once, at startup, from Settings
    - Public (unauthenticated) routes mounted only when public_api_enabled

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app(settings) builds the app; module-level `app` serves uvicorn
      (`uvicorn blueprints.main:app`)
    - SQLite URLs get tables created on startup; PostgreSQL is migrated by Alembic
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blueprints.api.dependencies import init_app_state
from blueprints.api.error_handlers import register_error_handlers
from blueprints.api.routes import auth, health
from blueprints.api.routes import blueprints as blueprint_routes
from blueprints.config import Settings, get_settings
from blueprints.core.domain_types import PersistenceBackend
from blueprints.infrastructure import database
from blueprints.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    init_app_state(app, settings)
    manager = None
    if settings.persistence_backend == PersistenceBackend.SQL:
        manager = database.init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_url.startswith("sqlite"):
            await manager.create_all()
    logger.info("Blueprints API started")
    yield
    if manager is not None:
        await manager.close()
    logger.info("Blueprints API shutting down")


def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(
        title="Blueprints API", version="1.0.0", lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS: origins come from settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes (explicit registration)
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(blueprint_routes.router)
    if settings.public_api_enabled:
        app.include_router(blueprint_routes.public_router)

    register_error_handlers(app)
    return app


app = create_app(get_settings())
