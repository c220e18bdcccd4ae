"""Page Content Store — explicit key-value store for admin-edited reference pages.

Invariants:
    - Store is bound to one AsyncSession, injected per request (no process-global map)
    - get() on a miss persists the default content, then returns it (load-default-on-miss)
    - put() upserts and commits (persist-on-write)
    - Unknown page ids raise ResourceNotFoundError before touching the DB

Design Decisions:
    - DB-backed instead of in-memory: content survives restarts and multiple workers
    - Defaults come from core.reference_pages (pure) so tests can assert exact content
"""

import logging

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ResourceNotFoundError
from app.core.reference_pages import default_page_content, is_known_page
from app.infrastructure.database import get_db
from app.models.page_content import PageContent

logger = logging.getLogger(__name__)


class PageContentStore:
    """Reference page content keyed by page id."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def get(self, page_id: str) -> str:
        """Stored content, or the default (persisted on first read)."""
        self._require_known(page_id)
        row = await self._db.get(PageContent, page_id)
        if row is not None:
            return row.content
        content = default_page_content(page_id)
        self._db.add(PageContent(page_id=page_id, content=content))
        await self._db.commit()
        logger.info("Loaded default page content", extra={"page_id": page_id})
        return content

    async def put(self, page_id: str, content: str) -> None:
        self._require_known(page_id)
        row = await self._db.get(PageContent, page_id)
        if row is None:
            self._db.add(PageContent(page_id=page_id, content=content))
        else:
            row.content = content
        await self._db.commit()
        logger.info("Page content updated", extra={"page_id": page_id})

    async def stored_page_ids(self) -> set[str]:
        result = await self._db.execute(select(PageContent.page_id))
        return set(result.scalars().all())

    @staticmethod
    def _require_known(page_id: str) -> None:
        if not is_known_page(page_id):
            raise ResourceNotFoundError("Page", page_id)


async def get_page_store(db: AsyncSession = Depends(get_db)) -> PageContentStore:
    """FastAPI dependency: store bound to the request session."""
    return PageContentStore(db)
