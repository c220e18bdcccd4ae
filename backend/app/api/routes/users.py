"""Users — registration, profiles, statistics and the follow graph.

Invariants:
    - username and email unique (→ 409)
    - Follow toggles update follower.following and target.followers in one commit
    - Following yourself → 400 SELF_FOLLOW
    - following/followers listings preserve membership order, skipping deleted users
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_user
from app.api.routes.presenters import user_summary, user_to_response
from app.core.errors import DuplicateResourceError, ResourceNotFoundError
from app.infrastructure.database import get_db
from app.models.article import Article
from app.models.user import User
from app.schemas.user import (
    Certification, ProfileUpdate, UserCreate, UserResponse,
)
from app.services.relationships import toggle_follow_users

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/users", tags=["users"])


async def _get_user_or_404(user_id: UUID, db: AsyncSession) -> User:
    user = await db.get(User, user_id)
    if user is None:
        raise ResourceNotFoundError("User", str(user_id))
    return user


async def _load_members(member_ids: list[str], db: AsyncSession) -> list[dict]:
    ids = []
    for member_id in member_ids:
        try:
            ids.append(UUID(member_id))
        except ValueError:
            logger.warning(f"Skipping malformed member id {member_id!r}")
    if not ids:
        return []
    result = await db.execute(select(User).where(User.id.in_(ids)))
    by_id = {u.id: u for u in result.scalars().all()}
    return [user_summary(by_id[i]) for i in ids if i in by_id]


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def register_user(body: UserCreate, db: AsyncSession = Depends(get_db)):
    taken = await db.scalar(
        select(User.id).where(
            or_(User.username == body.username, User.email == body.email),
        ),
    )
    if taken is not None:
        raise DuplicateResourceError("Username or email already registered")
    user = User(username=body.username, email=body.email)
    db.add(user)
    await db.commit()
    logger.info("User registered", extra={"user_id": str(user.id)})
    return user_to_response(user)


@router.get("/stats/{user_id}")
async def user_stats(user_id: UUID, db: AsyncSession = Depends(get_db)):
    """Article count and likes received across all of the user's articles."""
    result = await db.execute(
        select(Article.likes).where(Article.author_id == user_id),
    )
    like_sets = result.scalars().all()
    return {
        "article_count": len(like_sets),
        "total_likes": sum(len(likes or []) for likes in like_sets),
    }


@router.put("/profile", response_model=UserResponse)
async def update_profile(
    body: ProfileUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    updates = body.model_dump(exclude_unset=True, mode="json")
    for field, value in updates.items():
        if value is not None:
            setattr(user, field, value)
    await db.commit()
    return user_to_response(user)


@router.post("/certifications")
async def add_certification(
    body: Certification,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    user.certifications = [*(user.certifications or []), body.model_dump(mode="json")]
    await db.commit()
    return user.certifications


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: UUID, db: AsyncSession = Depends(get_db)):
    return user_to_response(await _get_user_or_404(user_id, db))


@router.post("/{user_id}/follow")
async def follow_user(
    user_id: UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Toggle follow. Returns message, is_following and both counts."""
    return await toggle_follow_users(db, user.id, user_id)


@router.get("/{user_id}/following")
async def list_following(user_id: UUID, db: AsyncSession = Depends(get_db)):
    user = await _get_user_or_404(user_id, db)
    return await _load_members(user.following or [], db)


@router.get("/{user_id}/followers")
async def list_followers(user_id: UUID, db: AsyncSession = Depends(get_db)):
    user = await _get_user_or_404(user_id, db)
    return await _load_members(user.followers or [], db)
