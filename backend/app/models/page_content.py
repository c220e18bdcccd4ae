"""PageContent ORM — admin-edited markdown for one reference page.

Invariants:
    - page_id is the primary key and a key of core.reference_pages.PAGES
    - A row exists only after first read (default persisted) or first write
"""

from datetime import datetime

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, utcnow


class PageContent(Base):
    """Key-value row: page id → markdown source."""
    __tablename__ = "page_contents"

    page_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow,
    )
