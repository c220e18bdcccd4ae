"""Study Record Schemas — logged study sessions.

Invariants:
    - study_hours in [0, 24]
    - mood restricted to the Mood enum
"""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from app.core.domain_types import Mood


class StudyRecordCreate(BaseModel):
    qualification_id: UUID
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    study_hours: float | None = Field(None, ge=0, le=24)
    mood: Mood = Mood.HAPPY
    tags: list[str] = Field(default_factory=list)
    is_public: bool = True

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v
