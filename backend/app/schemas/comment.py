"""Comment Schemas — article comments and study-record comments."""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class CommentBody(BaseModel):
    """Bare comment text (study-record comments)."""
    content: str = Field(min_length=1, max_length=5000)

    @field_validator("content")
    @classmethod
    def strip_content(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("content cannot be empty or whitespace")
        return v


class CommentCreate(CommentBody):
    article_id: UUID
