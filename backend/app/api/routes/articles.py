"""Articles — CRUD, search, view counting and likes for markdown articles.

Invariants:
    - Only published articles are listed or readable by id (others → 404)
    - Only the author may update or delete (→ 403 otherwise)
    - GET /{id} increments views atomically (UPDATE views = views + 1)
    - excerpt derived from content when the author gives none
    - List endpoints omit full content; detail includes content_html

Design Decisions:
    - Search via ILIKE on title/content: portable across PostgreSQL and SQLite
    - Likes delegated to services.relationships (row-locked pure toggle)
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_user
from app.api.routes.presenters import article_to_dict
from app.config import get_settings
from app.core.derive_excerpt import derive_excerpt
from app.core.domain_types import ArticleSort
from app.core.errors import PermissionDeniedError, ResourceNotFoundError
from app.core.paginate import page_envelope, page_window
from app.db.base import utcnow
from app.infrastructure.database import get_db
from app.models.article import Article
from app.models.comment import Comment
from app.models.user import User
from app.schemas.article import ArticleCreate, ArticleUpdate
from app.services.relationships import toggle_like

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/articles", tags=["articles"])


async def _paginate(
    db: AsyncSession, query, order, page: int, limit: int,
    *, include_content: bool = True,
) -> dict:
    total = await db.scalar(select(func.count()).select_from(query.subquery()))
    offset, limit = page_window(page, limit)
    result = await db.execute(query.order_by(order).limit(limit).offset(offset))
    articles = [
        article_to_dict(a, include_content=include_content)
        for a in result.scalars().all()
    ]
    return page_envelope("articles", articles, total or 0, page, limit)


async def _get_article_or_404(article_id: UUID, db: AsyncSession) -> Article:
    article = await db.get(Article, article_id)
    if article is None:
        raise ResourceNotFoundError("Article", str(article_id))
    return article


@router.get("/my-articles")
async def list_my_articles(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """The acting user's articles, published or not."""
    query = select(Article).where(Article.author_id == user.id)
    return await _paginate(db, query, Article.created_at.desc(), page, limit)


@router.get("/user/{user_id}")
async def list_user_articles(
    user_id: UUID,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    query = select(Article).where(
        Article.author_id == user_id, Article.is_published.is_(True),
    )
    return await _paginate(db, query, Article.created_at.desc(), page, limit)


@router.get("")
async def list_articles(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: str | None = Query(None, max_length=200),
    sort_by: ArticleSort = Query(ArticleSort.CREATED_AT),
    db: AsyncSession = Depends(get_db),
):
    """Published articles, newest first unless sort_by says otherwise."""
    query = select(Article).where(Article.is_published.is_(True))
    if search and search.strip():
        pattern = f"%{search.strip()}%"
        query = query.where(
            or_(Article.title.ilike(pattern), Article.content.ilike(pattern)),
        )
    order = getattr(Article, sort_by.value).desc()
    return await _paginate(
        db, query, order, page, limit, include_content=False,
    )


@router.get("/{article_id}")
async def get_article(article_id: UUID, db: AsyncSession = Depends(get_db)):
    """Article detail with rendered HTML. Counts one view."""
    article = await _get_article_or_404(article_id, db)
    if not article.is_published:
        raise ResourceNotFoundError("Article", str(article_id))
    await db.execute(
        update(Article)
        .where(Article.id == article_id)
        .values(views=Article.views + 1),
    )
    await db.commit()
    await db.refresh(article, attribute_names=["views"])
    return article_to_dict(article, include_html=True)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_article(
    body: ArticleCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    excerpt = body.excerpt or derive_excerpt(
        body.content, get_settings().excerpt_length,
    )
    article = Article(
        author=user,
        title=body.title,
        content=body.content,
        excerpt=excerpt,
        tags=body.tags,
        is_published=body.is_published,
    )
    db.add(article)
    await db.commit()
    logger.info(
        "Article created",
        extra={"user_id": str(user.id), "resource_id": str(article.id)},
    )
    return article_to_dict(article, include_html=True)


@router.put("/{article_id}")
async def update_article(
    article_id: UUID,
    body: ArticleUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    article = await _get_article_or_404(article_id, db)
    if article.author_id != user.id:
        raise PermissionDeniedError("edit", "Article")

    for field, value in body.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(article, field, value)
    if not article.excerpt:
        article.excerpt = derive_excerpt(
            article.content, get_settings().excerpt_length,
        )
    article.updated_at = utcnow()
    await db.commit()
    return article_to_dict(article, include_html=True)


@router.delete("/{article_id}")
async def delete_article(
    article_id: UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    article = await _get_article_or_404(article_id, db)
    if article.author_id != user.id:
        raise PermissionDeniedError("delete", "Article")

    await db.execute(delete(Comment).where(Comment.article_id == article_id))
    await db.delete(article)
    await db.commit()
    logger.info(
        "Article deleted",
        extra={"user_id": str(user.id), "resource_id": str(article_id)},
    )
    return {"message": "Article deleted successfully"}


@router.post("/{article_id}/like")
async def like_article(
    article_id: UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Toggle the acting user's like. Returns {"likes", "is_liked"}."""
    return await toggle_like(db, Article, "Article", article_id, user.id)
