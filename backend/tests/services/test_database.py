"""Database Session Manager — rollback and SQLAlchemy error translation.

Invariants:
    - Unique-constraint violations surface as DuplicateResourceError (409)
    - Domain errors raised inside a session propagate unchanged
    - Other SQLAlchemy failures surface as DatabaseError (503)
"""

import pytest
from sqlalchemy import select, text
from sqlalchemy.exc import IntegrityError, OperationalError

from app.core.errors import (
    DatabaseError, DuplicateResourceError, ResourceNotFoundError,
)
from app.infrastructure.database import DatabaseSessionManager, translate_db_error
from app.models.user import User


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await m.create_schema()
    yield m
    await m.dispose()


async def test_duplicate_username_becomes_conflict(manager):
    async with manager.session() as db:
        db.add(User(username="taro", email="taro@example.jp"))
        await db.commit()

    with pytest.raises(DuplicateResourceError) as exc:
        async with manager.session() as db:
            db.add(User(username="taro", email="other@example.jp"))
            await db.commit()
    assert exc.value.http_status == 409


async def test_domain_error_propagates_and_rolls_back(manager):
    with pytest.raises(ResourceNotFoundError):
        async with manager.session() as db:
            db.add(User(username="jiro", email="jiro@example.jp"))
            await db.flush()
            raise ResourceNotFoundError("Article", "x")

    async with manager.session() as db:
        result = await db.execute(select(User).where(User.username == "jiro"))
        assert result.scalar_one_or_none() is None


async def test_bad_sql_becomes_database_error(manager):
    with pytest.raises(DatabaseError) as exc:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc.value.http_status == 503


async def test_health_check(manager):
    assert await manager.health_check() is True


def test_translate_integrity_error():
    err = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))
    assert isinstance(translate_db_error(err), DuplicateResourceError)


def test_translate_operational_error():
    err = OperationalError("SELECT", {}, Exception("connection lost"))
    translated = translate_db_error(err)
    assert isinstance(translated, DatabaseError)
    assert translated.operation == "execute"
