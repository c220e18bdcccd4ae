"""Article ORM — persists a user-authored markdown article.

Invariants:
    - Always belongs to a User (author_id FK)
    - title <= 200 chars, excerpt <= 300 chars
    - excerpt derived from content (core.derive_excerpt) when not supplied
    - likes is a JSON array of str(UUID) user ids, no duplicates

Design Decisions:
    - content stored as markdown source; HTML rendered on read (core.render_markdown),
      so renderer fixes apply retroactively to stored articles
    - updated_at set by the update route only (view counting must not touch it)
    - comments removed explicitly by the delete route (bulk DELETE), not ORM cascade
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Text, Integer, Boolean, DateTime, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base, utcnow


class Article(Base):
    """Article entity — markdown body plus like set and view counter."""
    __tablename__ = "articles"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    author_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    excerpt: Mapped[str | None] = mapped_column(String(300), nullable=True)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    likes: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_published: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )

    author: Mapped["User"] = relationship("User", lazy="selectin")
