"""API Dependencies — per-request wiring of persistence, filter, service and auth.

Invariants:
    - Process-wide collaborators (filter, token service, memory store) live on
      app.state, set once by init_app_state()
    - SQL persistence gets a fresh session per request (auto-rollback on error)
    - require_scopes: no/invalid bearer token -> 401, wrong scope -> 403

Design Decisions:
    - Bearer header parsed by hand: one scheme, no OAuth2 form flow
    - db_manager read through the module at call time so tests can swap it
"""

import logging
from typing import AsyncGenerator, Callable

from fastapi import Depends, FastAPI, Request

from blueprints.config import Settings
from blueprints.core.domain_types import PersistenceBackend, Scope
from blueprints.core.errors import AuthenticationError, InsufficientScopeError
from blueprints.core.filters import BlueprintFilter, resolve_filter
from blueprints.core.persistence import BlueprintPersistence
from blueprints.infrastructure import database
from blueprints.infrastructure.memory_persistence import InMemoryBlueprintPersistence
from blueprints.infrastructure.security import Principal, TokenService
from blueprints.infrastructure.sql_persistence import SqlBlueprintPersistence
from blueprints.services.blueprint_service import BlueprintService

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def init_app_state(app: FastAPI, settings: Settings) -> None:
    """Resolve the startup-time strategies and store them on app.state."""
    app.state.blueprint_filter = resolve_filter(settings.blueprint_filter)
    app.state.token_service = TokenService(settings.auth_config())
    app.state.memory_store = (
        InMemoryBlueprintPersistence()
        if settings.persistence_backend == PersistenceBackend.MEMORY
        else None
    )
    logger.info(
        "Blueprint pipeline configured",
        extra={
            "filter": settings.blueprint_filter.value,
            "backend": settings.persistence_backend.value,
        },
    )


def get_blueprint_filter(request: Request) -> BlueprintFilter:
    return request.app.state.blueprint_filter


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


async def get_persistence(
    request: Request,
) -> AsyncGenerator[BlueprintPersistence, None]:
    memory_store = request.app.state.memory_store
    if memory_store is not None:
        yield memory_store
        return
    if not database.db_manager:
        raise RuntimeError("Database not initialized")
    async with database.db_manager.session() as db:
        yield SqlBlueprintPersistence(db)


def get_blueprint_service(
    persistence: BlueprintPersistence = Depends(get_persistence),
    blueprint_filter: BlueprintFilter = Depends(get_blueprint_filter),
) -> BlueprintService:
    return BlueprintService(persistence, blueprint_filter)


def require_scopes(*scopes: Scope) -> Callable:
    """Dependency factory: caller must hold at least one of the given scopes."""
    accepted = [scope.value for scope in scopes]

    async def check(
        request: Request,
        tokens: TokenService = Depends(get_token_service),
    ) -> Principal:
        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith(BEARER_PREFIX):
            raise AuthenticationError("Authorization header required")
        principal = tokens.decode(auth_header[len(BEARER_PREFIX):])
        if principal.scopes.isdisjoint(accepted):
            raise InsufficientScopeError(accepted)
        return principal

    return check
