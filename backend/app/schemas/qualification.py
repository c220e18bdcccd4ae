"""Qualification Schemas — catalogue entries and a user's study list."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from app.core.domain_types import QualificationCategory, Difficulty, StudyStatus


class QualificationCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    category: QualificationCategory
    difficulty: Difficulty = Difficulty.INTERMEDIATE
    description: str | None = Field(None, max_length=500)
    exam_date: datetime | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class UserQualificationCreate(BaseModel):
    qualification_id: UUID
    status: StudyStatus = StudyStatus.STUDYING
    target_date: datetime | None = None
    notes: str | None = Field(None, max_length=2000)
