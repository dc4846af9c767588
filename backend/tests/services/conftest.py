"""Service test fixtures — async DB, seeded users, services and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - app.state.db_manager wraps the test engine, so get_db runs its real path
    - User fixtures are UUIDs, not ORM objects (a rollback expires loaded rows)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Services built from the same factory functions the routes use
"""

from types import SimpleNamespace

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from pollen8.config import Settings
from pollen8.api.dependencies import build_invite_service, build_network_service
from pollen8.db.base import Base
from pollen8.infrastructure.database import DatabaseSessionManager
from pollen8.models.user import User
from pollen8.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
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


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client backed by the test database."""
    original_manager = getattr(app.state, "db_manager", None)
    app.state.db_manager = DatabaseSessionManager.from_factory(
        test_engine, test_session_factory,
    )

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.db_manager = original_manager


async def _create_user(db: AsyncSession, phone_number: str):
    user = User(phone_number=phone_number, city="Austin", zip_code="78701")
    db.add(user)
    await db.commit()
    return user.id


@pytest.fixture
def make_user(test_db):
    """Create a user with the given phone number; returns its id."""
    async def _make(phone_number: str):
        return await _create_user(test_db, phone_number)
    return _make


@pytest.fixture
async def users(test_db):
    """Three users: alice, bob, carol (ids only)."""
    return SimpleNamespace(
        alice=await _create_user(test_db, "+15550000001"),
        bob=await _create_user(test_db, "+15550000002"),
        carol=await _create_user(test_db, "+15550000003"),
    )


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        invite_base_url="https://pollen8.com/invite",
    )


@pytest.fixture
def network_service(test_db, settings):
    return build_network_service(test_db, settings)


@pytest.fixture
def invite_service(test_db, settings):
    return build_invite_service(test_db, settings)
