"""Study Records — study timeline, personal study lists, likes and comments.

Invariants:
    - Timeline shows public records only; my-records shows all of the acting user's
    - A qualification is added to a user's study list at most once (→ 409)
    - Records and list entries reference existing qualifications (→ 404 otherwise)
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_user
from app.api.routes.presenters import (
    record_comment_to_dict,
    study_record_to_dict,
    user_qualification_to_dict,
)
from app.core.errors import DuplicateResourceError, ResourceNotFoundError
from app.core.paginate import page_envelope, page_window
from app.infrastructure.database import get_db
from app.models.qualification import Qualification
from app.models.study_record import StudyRecord, StudyRecordComment
from app.models.user import User
from app.models.user_qualification import UserQualification
from app.schemas.comment import CommentBody
from app.schemas.qualification import UserQualificationCreate
from app.schemas.study_record import StudyRecordCreate
from app.services.relationships import toggle_like

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/study-records", tags=["study-records"])


async def _paginate_records(
    db: AsyncSession, query, page: int, limit: int,
) -> dict:
    total = await db.scalar(select(func.count()).select_from(query.subquery()))
    offset, limit = page_window(page, limit)
    result = await db.execute(
        query.order_by(StudyRecord.created_at.desc()).limit(limit).offset(offset),
    )
    records = [study_record_to_dict(r) for r in result.scalars().all()]
    return page_envelope("records", records, total or 0, page, limit)


async def _get_qualification_or_404(
    qualification_id: UUID, db: AsyncSession,
) -> Qualification:
    qualification = await db.get(Qualification, qualification_id)
    if qualification is None:
        raise ResourceNotFoundError("Qualification", str(qualification_id))
    return qualification


@router.get("/timeline")
async def study_timeline(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    qualification_id: UUID | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Public study records from every user, newest first."""
    query = select(StudyRecord).where(StudyRecord.is_public.is_(True))
    if qualification_id:
        query = query.where(StudyRecord.qualification_id == qualification_id)
    return await _paginate_records(db, query, page, limit)


@router.get("/my-records")
async def my_records(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    qualification_id: UUID | None = Query(None),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    query = select(StudyRecord).where(StudyRecord.user_id == user.id)
    if qualification_id:
        query = query.where(StudyRecord.qualification_id == qualification_id)
    return await _paginate_records(db, query, page, limit)


@router.get("/my-qualifications")
async def my_qualifications(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        select(UserQualification)
        .where(UserQualification.user_id == user.id)
        .order_by(UserQualification.created_at.desc()),
    )
    return [user_qualification_to_dict(e) for e in result.scalars().all()]


@router.post("/add-qualification", status_code=status.HTTP_201_CREATED)
async def add_qualification(
    body: UserQualificationCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    qualification = await _get_qualification_or_404(body.qualification_id, db)
    existing = await db.scalar(
        select(UserQualification.id).where(
            UserQualification.user_id == user.id,
            UserQualification.qualification_id == qualification.id,
        ),
    )
    if existing is not None:
        raise DuplicateResourceError("Qualification already added")

    entry = UserQualification(
        user_id=user.id,
        qualification=qualification,
        status=body.status.value,
        target_date=body.target_date,
        notes=body.notes,
    )
    db.add(entry)
    await db.commit()
    return user_qualification_to_dict(entry)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_record(
    body: StudyRecordCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    qualification = await _get_qualification_or_404(body.qualification_id, db)
    record = StudyRecord(
        user=user,
        qualification=qualification,
        title=body.title,
        content=body.content,
        study_hours=body.study_hours,
        mood=body.mood.value,
        tags=body.tags,
        is_public=body.is_public,
        comments=[],
    )
    db.add(record)
    await db.commit()
    logger.info(
        "Study record created",
        extra={"user_id": str(user.id), "resource_id": str(record.id)},
    )
    return study_record_to_dict(record)


@router.post("/{record_id}/like")
async def like_record(
    record_id: UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await toggle_like(db, StudyRecord, "StudyRecord", record_id, user.id)


@router.post("/{record_id}/comment", status_code=status.HTTP_201_CREATED)
async def comment_on_record(
    record_id: UUID,
    body: CommentBody,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    if await db.get(StudyRecord, record_id) is None:
        raise ResourceNotFoundError("StudyRecord", str(record_id))
    comment = StudyRecordComment(
        record_id=record_id, user=user, content=body.content,
    )
    db.add(comment)
    await db.commit()
    return record_comment_to_dict(comment)
