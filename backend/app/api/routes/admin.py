"""Admin Content — reference page editing for the hidden admin editor.

Invariants:
    - Reads are open (the public reference pages render from them)
    - Writes and HTML generation require the admin bearer token
    - Unknown page id → 404 on every endpoint
    - Content is always markdown; HTML is produced by core.render_markdown on demand

Design Decisions:
    - PageContentStore injected per request (no process-global content map)
"""

import logging

from fastapi import APIRouter, Depends

from app.api.dependencies import require_admin
from app.core.reference_pages import PAGES
from app.core.render_markdown import render_markdown
from app.infrastructure.page_content_store import PageContentStore, get_page_store
from app.schemas.content import PageContentUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@router.get("/pages")
async def list_pages(store: PageContentStore = Depends(get_page_store)):
    stored = await store.stored_page_ids()
    return [
        {
            "id": page_id,
            "title": config.title,
            "file": config.file,
            "has_content": page_id in stored,
        }
        for page_id, config in PAGES.items()
    ]


@router.get("/pages/{page_id}")
async def get_page(
    page_id: str, store: PageContentStore = Depends(get_page_store),
):
    return {"content": await store.get(page_id)}


@router.put("/pages/{page_id}", dependencies=[Depends(require_admin)])
async def update_page(
    page_id: str,
    body: PageContentUpdate,
    store: PageContentStore = Depends(get_page_store),
):
    await store.put(page_id, body.content)
    return {"message": "Content updated successfully"}


@router.post("/pages/{page_id}/generate", dependencies=[Depends(require_admin)])
async def generate_page(
    page_id: str, store: PageContentStore = Depends(get_page_store),
):
    """Render the page's markdown into the fragment the reference page injects."""
    content = await store.get(page_id)
    return {
        "page_id": page_id,
        "title": PAGES[page_id].title,
        "html": render_markdown(content),
    }
