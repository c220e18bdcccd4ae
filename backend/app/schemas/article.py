"""Article Schemas — create/update validation for markdown articles.

Invariants:
    - title: 1-200 chars after strip; content non-empty
    - excerpt <= 300 chars (derived from content when omitted)
    - ArticleUpdate: every field optional, only provided fields are applied
"""

from pydantic import BaseModel, Field, field_validator


def _strip_required(v: str, field: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError(f"{field} cannot be empty or whitespace")
    return v


class ArticleCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    excerpt: str | None = Field(None, max_length=300)
    tags: list[str] = Field(default_factory=list)
    is_published: bool = True

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_required(v, "title")

    @field_validator("content")
    @classmethod
    def require_content(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("content cannot be empty or whitespace")
        return v


class ArticleUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=200)
    content: str | None = Field(None, min_length=1)
    excerpt: str | None = Field(None, max_length=300)
    tags: list[str] | None = None
    is_published: bool | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return _strip_required(v, "title") if v is not None else None
