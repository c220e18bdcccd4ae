"""StudyRecord ORM — a logged study session toward a qualification.

Invariants:
    - Always belongs to a User and a Qualification
    - study_hours in [0, 24] when present (validated at the schema boundary)
    - mood holds a Mood value
    - likes is a JSON array of str(UUID) user ids, no duplicates

Design Decisions:
    - Record comments are their own table (StudyRecordComment) rather than an embedded
      array: ordered by created_at, cascade-deleted with the record
"""

import uuid
from datetime import datetime

from sqlalchemy import (
    String, Text, Float, Boolean, DateTime, JSON, ForeignKey,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base, utcnow


class StudyRecord(Base):
    """Study record entity."""
    __tablename__ = "study_records"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    qualification_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("qualifications.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    study_hours: Mapped[float | None] = mapped_column(Float, nullable=True)
    mood: Mapped[str] = mapped_column(String(8), nullable=False, default="😊")
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    is_public: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    likes: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )

    # Relationships
    user: Mapped["User"] = relationship("User", lazy="selectin")
    qualification: Mapped["Qualification"] = relationship(
        "Qualification", lazy="selectin",
    )
    comments: Mapped[list["StudyRecordComment"]] = relationship(
        "StudyRecordComment", back_populates="record",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="StudyRecordComment.created_at",
    )


class StudyRecordComment(Base):
    """Comment attached to a study record."""
    __tablename__ = "study_record_comments"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    record_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("study_records.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )

    record: Mapped["StudyRecord"] = relationship(
        "StudyRecord", back_populates="comments",
    )
    user: Mapped["User"] = relationship("User", lazy="selectin")
