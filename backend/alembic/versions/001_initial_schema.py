"""Initial schema — users, articles, comments, qualifications, study records.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("username", sa.String(30), nullable=False, unique=True),
        sa.Column("email", sa.String(254), nullable=False, unique=True),
        sa.Column("bio", sa.Text, nullable=True),
        sa.Column("study_goals", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("certifications", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("followers", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("following", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "articles",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("author_id", UUID(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("excerpt", sa.String(300), nullable=True),
        sa.Column("tags", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("likes", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("views", sa.Integer, nullable=False, server_default="0"),
        sa.Column("is_published", sa.Boolean, nullable=False, server_default="true"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_articles_author_id", "articles", ["author_id"])

    op.create_table(
        "comments",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("article_id", UUID(as_uuid=True), sa.ForeignKey("articles.id", ondelete="CASCADE"), nullable=False),
        sa.Column("author_id", UUID(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("likes", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_comments_article_id", "comments", ["article_id"])

    op.create_table(
        "qualifications",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("difficulty", sa.String(20), nullable=False, server_default="Intermediate"),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("exam_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_official", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("created_by_id", UUID(as_uuid=True), sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_qualifications_name", "qualifications", ["name"])

    op.create_table(
        "user_qualifications",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", UUID(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("qualification_id", UUID(as_uuid=True), sa.ForeignKey("qualifications.id", ondelete="CASCADE"), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="studying"),
        sa.Column("target_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("passed_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("score", sa.String(50), nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
        sa.Column("is_public", sa.Boolean, nullable=False, server_default="true"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("user_id", "qualification_id", name="uq_user_qualification"),
    )
    op.create_index("ix_user_qualifications_user_id", "user_qualifications", ["user_id"])
    op.create_index("ix_user_qualifications_qualification_id", "user_qualifications", ["qualification_id"])

    op.create_table(
        "study_records",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", UUID(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("qualification_id", UUID(as_uuid=True), sa.ForeignKey("qualifications.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("study_hours", sa.Float, nullable=True),
        sa.Column("mood", sa.String(8), nullable=False, server_default="😊"),
        sa.Column("tags", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("is_public", sa.Boolean, nullable=False, server_default="true"),
        sa.Column("likes", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_study_records_user_id", "study_records", ["user_id"])
    op.create_index("ix_study_records_qualification_id", "study_records", ["qualification_id"])

    op.create_table(
        "study_record_comments",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("record_id", UUID(as_uuid=True), sa.ForeignKey("study_records.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id", UUID(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_study_record_comments_record_id", "study_record_comments", ["record_id"])


def downgrade() -> None:
    op.drop_table("study_record_comments")
    op.drop_table("study_records")
    op.drop_table("user_qualifications")
    op.drop_table("qualifications")
    op.drop_table("comments")
    op.drop_table("articles")
    op.drop_table("users")
