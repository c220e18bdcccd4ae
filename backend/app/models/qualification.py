"""Qualification ORM — a certification users study toward.

Invariants:
    - category and difficulty hold QualificationCategory / Difficulty values
    - is_official rows are managed by services.seed_qualifications; user-created rows
      carry created_by_id
"""

import uuid
from datetime import datetime

from typing import Optional

from sqlalchemy import String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base, utcnow


class Qualification(Base):
    """Qualification catalogue entry."""
    __tablename__ = "qualifications"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    category: Mapped[str] = mapped_column(String(20), nullable=False)
    difficulty: Mapped[str] = mapped_column(
        String(20), nullable=False, default="Intermediate",
    )
    description: Mapped[str | None] = mapped_column(
        String(500), nullable=True,
    )
    exam_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    is_official: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_by_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )

    created_by: Mapped[Optional["User"]] = relationship("User", lazy="selectin")
