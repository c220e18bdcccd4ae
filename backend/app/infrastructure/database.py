"""Database Session Manager — async engine, per-request sessions, error translation.

Invariants:
    - A session that sees any exception is rolled back before the exception leaves
    - CertStudyError raised inside a session propagates unchanged
    - SQLAlchemy failures leave as CertStudyError: unique/foreign-key violations as
      DuplicateResourceError (409), everything else as DatabaseError (503)
    - Pool sizing applies to server databases only (SQLite keeps its dialect default)

Design Decisions:
    - IntegrityError → 409: the route-level existence checks (username, study-list entry)
      can lose a race; the unique constraint is the real arbiter
    - Module-level db_manager assigned by init_db in the lifespan hook, read at call time
    - create_schema() exists for local SQLite runs without alembic
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from app.core.errors import CertStudyError, DatabaseError, DuplicateResourceError
from app.db.base import Base

logger = logging.getLogger(__name__)


def translate_db_error(exc: SQLAlchemyError) -> CertStudyError:
    """Map a SQLAlchemy failure onto the CertStudy error hierarchy."""
    if isinstance(exc, IntegrityError):
        return DuplicateResourceError("Resource conflicts with existing data")
    if isinstance(exc, OperationalError):
        return DatabaseError("Connection or operational error", "execute")
    return DatabaseError("Database operation failed", "query")


class DatabaseSessionManager:
    """Owns the engine and hands out sessions that roll back on failure."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        options: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            options.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **options)
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except CertStudyError:
            await session.rollback()
            raise
        except SQLAlchemyError as e:
            await session.rollback()
            error = translate_db_error(e)
            logger.error(
                f"{type(e).__name__} during session: {e}",
                extra={"error_code": error.code},
            )
            raise error from e
        finally:
            await session.close()

    async def create_schema(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """True when a trivial query round-trips (readiness probe)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request."""
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
