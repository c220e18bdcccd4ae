"""User Schemas — registration, profile updates and public user views.

Invariants:
    - username: 3-30 chars, letters/digits/underscore, stripped
    - email lower-cased
    - UserResponse never carries anything beyond public profile data
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from app.core.domain_types import CertificationStatus


class UserCreate(BaseModel):
    """Registration payload. Credentials are handled by the auth gateway."""
    username: str = Field(min_length=3, max_length=30, pattern=r"^\w+$")
    email: str = Field(
        max_length=254, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
    )

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.strip().lower()


class Certification(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    status: CertificationStatus

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class ProfileUpdate(BaseModel):
    bio: str | None = Field(None, max_length=2000)
    study_goals: list[str] | None = None
    certifications: list[Certification] | None = None

    @field_validator("bio")
    @classmethod
    def strip_bio(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else None


class UserResponse(BaseModel):
    """Public user profile."""
    id: UUID
    username: str
    bio: str | None = None
    study_goals: list[str] = []
    certifications: list[Certification] = []
    followers: list[str] = []
    following: list[str] = []
    followers_count: int = 0
    following_count: int = 0
    created_at: datetime
