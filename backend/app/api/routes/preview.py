"""Markdown Preview — renders unsaved article/record text for the editor preview pane."""

from fastapi import APIRouter

from app.core.render_markdown import render_markdown
from app.schemas.content import PreviewRequest, PreviewResponse

router = APIRouter(prefix="/api/v1/preview", tags=["preview"])


@router.post("", response_model=PreviewResponse)
async def preview_markdown(body: PreviewRequest):
    return PreviewResponse(html=render_markdown(body.content))
