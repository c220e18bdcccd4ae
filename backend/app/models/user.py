"""User ORM — community member with profile and follow relationships.

Invariants:
    - username and email are unique
    - followers / following are JSON arrays of str(UUID), never containing duplicates
    - followers and following are only mutated together via services.relationships

Design Decisions:
    - Profile fields flattened onto the row (bio, study_goals, certifications):
      one profile per user, no JOIN needed
    - JSON arrays for follow sets: mirrors core.toggle_membership's list contract
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Text, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base, utcnow


class User(Base):
    """User entity — author of articles, comments and study records."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(30), nullable=False, unique=True,
    )
    email: Mapped[str] = mapped_column(
        String(254), nullable=False, unique=True,
    )
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    study_goals: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    certifications: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    followers: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    following: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
