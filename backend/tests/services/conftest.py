"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so probes and startup helpers see the test engine
    - Identity travels in the X-User-Id header, exactly as the gateway sends it

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (row locks compile away on SQLite; atomicity is exercised via single commits)
    - auth_headers is a fixture-returned helper instead of a shared module import
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.config import get_settings
from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.models.qualification import Qualification
from app.models.user import User
import app.infrastructure.database as db_module
from app.main import app


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
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def alice(test_db):
    user = User(username="alice", email="alice@example.jp")
    test_db.add(user)
    await test_db.commit()
    return user


@pytest.fixture
async def bob(test_db):
    user = User(username="bob", email="bob@example.jp")
    test_db.add(user)
    await test_db.commit()
    return user


@pytest.fixture
async def qualification(test_db):
    q = Qualification(
        name="基本情報技術者試験", category="IT", difficulty="Intermediate",
        is_official=True,
    )
    test_db.add(q)
    await test_db.commit()
    return q


@pytest.fixture
def auth_headers():
    """Build the gateway identity header for a user."""
    def _headers(user: User) -> dict:
        return {"X-User-Id": str(user.id)}
    return _headers


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {get_settings().admin_token}"}
