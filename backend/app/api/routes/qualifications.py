"""Qualifications — catalogue browsing, categories and user-created entries.

Invariants:
    - Listing order: official first, then by name
    - categories lists only categories that have at least one qualification
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_user
from app.api.routes.presenters import qualification_to_dict
from app.core.domain_types import QualificationCategory
from app.core.paginate import page_envelope, page_window
from app.infrastructure.database import get_db
from app.models.qualification import Qualification
from app.models.user import User
from app.schemas.qualification import QualificationCreate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/qualifications", tags=["qualifications"])


@router.get("")
async def list_qualifications(
    search: str | None = Query(None, max_length=200),
    category: QualificationCategory | None = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    query = select(Qualification)
    if search and search.strip():
        pattern = f"%{search.strip()}%"
        query = query.where(or_(
            Qualification.name.ilike(pattern),
            Qualification.description.ilike(pattern),
        ))
    if category:
        query = query.where(Qualification.category == category.value)

    total = await db.scalar(select(func.count()).select_from(query.subquery()))
    offset, limit = page_window(page, limit)
    result = await db.execute(
        query.order_by(Qualification.is_official.desc(), Qualification.name)
        .limit(limit).offset(offset),
    )
    items = [qualification_to_dict(q) for q in result.scalars().all()]
    return page_envelope("qualifications", items, total or 0, page, limit)


@router.get("/categories")
async def list_categories(db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(Qualification.category).distinct().order_by(Qualification.category),
    )
    return list(result.scalars().all())


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_qualification(
    body: QualificationCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    qualification = Qualification(
        name=body.name,
        category=body.category.value,
        difficulty=body.difficulty.value,
        description=body.description,
        exam_date=body.exam_date,
        is_official=False,
        created_by=user,
    )
    db.add(qualification)
    await db.commit()
    logger.info(
        "Qualification created",
        extra={"user_id": str(user.id), "resource_id": str(qualification.id)},
    )
    return qualification_to_dict(qualification)
