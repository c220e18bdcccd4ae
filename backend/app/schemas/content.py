"""Content Schemas — admin page edits and markdown preview requests."""

from pydantic import BaseModel, Field, field_validator


class PageContentUpdate(BaseModel):
    content: str

    @field_validator("content")
    @classmethod
    def require_content(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Content is required")
        return v


class PreviewRequest(BaseModel):
    """Any string is renderable; the size cap only bounds request cost."""
    content: str = Field("", max_length=200_000)


class PreviewResponse(BaseModel):
    html: str
