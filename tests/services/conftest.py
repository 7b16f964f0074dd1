"""Service test fixtures — async DB, both persistence backends, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - db_manager patched so request-scoped sessions use the test engine
    - `persistence` runs each contract test against SQL and in-memory stores
    - App state (filter, token service, store) built without the lifespan,
      since ASGITransport does not send lifespan events

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so tables
      created in test_engine are visible to every session
    - db_manager patched with a hand-built manager: skips pool sizing args
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

import blueprints.infrastructure.database as db_module
import blueprints.models  # noqa: F401
from blueprints.api.dependencies import init_app_state
from blueprints.config import Settings
from blueprints.core.domain_types import Blueprint, Point
from blueprints.db.base import Base
from blueprints.infrastructure.database import DatabaseSessionManager
from blueprints.infrastructure.memory_persistence import InMemoryBlueprintPersistence
from blueprints.infrastructure.sql_persistence import SqlBlueprintPersistence
from blueprints.main import create_app

STUDENT_PASSWORD = "student-test-password"


def make_settings(**overrides) -> Settings:
    values = {
        "database_url": "sqlite+aiosqlite:///:memory:",
        "persistence_backend": "sql",
        "blueprint_filter": "identity",
        "public_api_enabled": True,
        "student_password": STUDENT_PASSWORD,
        "assistant_password": None,
        "log_format": "text",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture(params=["sql", "memory"])
async def persistence(request, test_session_factory):
    """Each contract test runs once per backend."""
    if request.param == "memory":
        yield InMemoryBlueprintPersistence()
        return
    async with test_session_factory() as session:
        yield SqlBlueprintPersistence(session)


@pytest.fixture
def make_app(test_engine, test_session_factory, monkeypatch):
    """Build an app for the given Settings overrides, wired to the test DB."""
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    monkeypatch.setattr(db_module, "db_manager", fake_manager)

    def _make(**overrides):
        settings = make_settings(**overrides)
        app = create_app(settings)
        init_app_state(app, settings)
        return app

    return _make


def client_for(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


def bearer_for(app, scope: str | None = None) -> dict[str, str]:
    """Authorization header with a token signed by this app's key."""
    tokens = app.state.token_service
    issued = tokens.issue("student") if scope is None else tokens.issue("student", scope)
    return {"Authorization": f"Bearer {issued.access_token}"}


@pytest.fixture
def make_client(make_app):
    """Factory: (client, headers) over a freshly built app.

    Use the client as an async context manager.
    """
    def _client(**overrides) -> tuple[AsyncClient, dict[str, str]]:
        app = make_app(**overrides)
        return client_for(app), bearer_for(app)
    return _client


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
async def client(app):
    async with client_for(app) as c:
        yield c


@pytest.fixture
def auth_headers(app):
    """Bearer header for a token issued by the app under test."""
    return bearer_for(app)


@pytest.fixture
def scoped_headers(app):
    """Factory: Bearer header carrying only the given scope string."""
    def _headers(scope: str) -> dict[str, str]:
        return bearer_for(app, scope)
    return _headers


@pytest.fixture
async def seed_blueprints(test_db):
    """Two blueprints for 'ana', one for 'luis', stored raw (unfiltered)."""
    store = SqlBlueprintPersistence(test_db)
    seeded = [
        Blueprint("ana", "house", (Point(1, 1), Point(2, 2), Point(2, 2), Point(3, 3))),
        Blueprint("ana", "garden", (Point(0, 0), Point(5, 5), Point(10, 10))),
        Blueprint("luis", "bridge", (Point(4, 4),)),
    ]
    for bp in seeded:
        await store.save(bp)
    return seeded
