"""Relationship Persistence — applies pure membership toggles under row locks.

Invariants:
    - Rows are read FOR UPDATE inside the request transaction, so concurrent toggles
      on the same entity serialize at the database (no lost likes/follows)
    - populate_existing: the locked read always sees the committed membership,
      never a stale identity-map copy
    - Both sides of a follow are written in ONE commit (both or neither)
    - Counts returned to clients are len() of the persisted lists

Design Decisions:
    - Thin shell around core.toggle_membership (ADR: functional core, imperative shell)
    - One toggle_like for articles, comments and study records: every likeable model
      exposes `id` and a `likes` JSON list
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ResourceNotFoundError, SelfFollowError
from app.core.toggle_membership import toggle_follow, toggle_membership
from app.models.user import User

logger = logging.getLogger(__name__)


async def toggle_like(
    db: AsyncSession,
    model: type,
    resource_type: str,
    entity_id: UUID,
    user_id: UUID,
) -> dict:
    """Like/unlike one entity. Returns {"likes": n, "is_liked": bool}."""
    result = await db.execute(
        select(model)
        .where(model.id == entity_id)
        .with_for_update()
        .execution_options(populate_existing=True),
    )
    entity = result.scalar_one_or_none()
    if entity is None:
        raise ResourceNotFoundError(resource_type, str(entity_id))

    members, added = toggle_membership(entity.likes, str(user_id))
    entity.likes = members
    await db.commit()
    logger.info(
        f"{resource_type} {'liked' if added else 'unliked'}",
        extra={
            "user_id": str(user_id), "resource_type": resource_type,
            "resource_id": str(entity_id),
        },
    )
    return {"likes": len(members), "is_liked": added}


async def toggle_follow_users(
    db: AsyncSession, follower_id: UUID, target_id: UUID,
) -> dict:
    """Follow/unfollow target on behalf of follower; updates both users atomically."""
    if follower_id == target_id:
        raise SelfFollowError()

    # lock both rows in id order
    result = await db.execute(
        select(User)
        .where(User.id.in_([follower_id, target_id]))
        .order_by(User.id)
        .with_for_update()
        .execution_options(populate_existing=True),
    )
    users = {user.id: user for user in result.scalars().all()}
    follower = users.get(follower_id)
    target = users.get(target_id)
    if target is None:
        raise ResourceNotFoundError("User", str(target_id))
    if follower is None:
        raise ResourceNotFoundError("User", str(follower_id))

    outcome = toggle_follow(
        follower.following, target.followers, str(follower.id), str(target.id),
    )
    follower.following = outcome.following
    target.followers = outcome.followers
    await db.commit()
    logger.info(
        f"User {'followed' if outcome.added else 'unfollowed'}",
        extra={"user_id": str(follower_id), "resource_id": str(target_id)},
    )
    return {
        "message": "Followed" if outcome.added else "Unfollowed",
        "is_following": outcome.added,
        "followers_count": len(outcome.followers),
        "following_count": len(outcome.following),
    }
