"""Request Dependencies — acting-user and admin resolution for route handlers.

Invariants:
    - Identity arrives in the X-User-Id header, set by the upstream auth gateway
      (token issuance is not this service's concern)
    - Missing, malformed or unknown identity → AuthenticationError (401)
    - Admin endpoints require Authorization: Bearer <ADMIN_TOKEN>, compared in constant time
"""

import secrets
from uuid import UUID

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.errors import AuthenticationError
from app.infrastructure.database import get_db
from app.models.user import User


async def get_current_user(
    x_user_id: str | None = Header(None),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the acting user from the gateway header."""
    if not x_user_id:
        raise AuthenticationError()
    try:
        user_id = UUID(x_user_id)
    except ValueError:
        raise AuthenticationError("Invalid user identity")
    user = await db.get(User, user_id)
    if user is None:
        raise AuthenticationError("Unknown user")
    return user


async def require_admin(authorization: str | None = Header(None)) -> None:
    token = get_settings().admin_token
    if not token:
        raise AuthenticationError("Admin access is not configured")
    expected = f"Bearer {token}"
    if not authorization or not secrets.compare_digest(authorization, expected):
        raise AuthenticationError("Unauthorized")
