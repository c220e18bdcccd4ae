"""Comments — article comments with author-only deletion and likes.

Invariants:
    - Comments can only be created on an existing article (→ 404 otherwise)
    - Only the author may delete a comment (→ 403 otherwise)
    - Listing is newest first
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_user
from app.api.routes.presenters import comment_to_dict
from app.core.errors import PermissionDeniedError, ResourceNotFoundError
from app.infrastructure.database import get_db
from app.models.article import Article
from app.models.comment import Comment
from app.models.user import User
from app.schemas.comment import CommentCreate
from app.services.relationships import toggle_like

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/comments", tags=["comments"])


@router.get("/article/{article_id}")
async def list_article_comments(
    article_id: UUID, db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        select(Comment)
        .where(Comment.article_id == article_id)
        .order_by(Comment.created_at.desc()),
    )
    return [comment_to_dict(c) for c in result.scalars().all()]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_comment(
    body: CommentCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    if await db.get(Article, body.article_id) is None:
        raise ResourceNotFoundError("Article", str(body.article_id))
    comment = Comment(
        article_id=body.article_id, author=user, content=body.content,
    )
    db.add(comment)
    await db.commit()
    return comment_to_dict(comment)


@router.delete("/{comment_id}")
async def delete_comment(
    comment_id: UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    comment = await db.get(Comment, comment_id)
    if comment is None:
        raise ResourceNotFoundError("Comment", str(comment_id))
    if comment.author_id != user.id:
        raise PermissionDeniedError("delete", "Comment")
    await db.delete(comment)
    await db.commit()
    return {"message": "Comment deleted successfully"}


@router.post("/{comment_id}/like")
async def like_comment(
    comment_id: UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await toggle_like(db, Comment, "Comment", comment_id, user.id)
