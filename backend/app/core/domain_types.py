"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, ArticleId wrap UUIDs; never use bare UUID in domain logic
    - MemberId is the string form stored in membership sets (likes, followers, following)
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders, double as Pydantic field types
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
ArticleId = NewType("ArticleId", UUID)
MemberId = NewType("MemberId", str)     # str(UUID) as persisted in JSON sets


# ─── Enums ───────────────────────────────────────────────────────

class QualificationCategory(str, Enum):
    """Qualification catalogue categories."""
    IT = "IT"
    BUSINESS = "Business"
    LANGUAGE = "Language"
    FINANCE = "Finance"
    MEDICAL = "Medical"
    LEGAL = "Legal"
    ENGINEERING = "Engineering"
    OTHER = "Other"


class Difficulty(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class StudyStatus(str, Enum):
    """A user's progress toward one qualification."""
    STUDYING = "studying"
    PASSED = "passed"
    FAILED = "failed"
    PLANNING = "planning"


class CertificationStatus(str, Enum):
    """Self-declared certification on a user profile (no 'failed')."""
    STUDYING = "studying"
    PASSED = "passed"
    PLANNING = "planning"


class Mood(str, Enum):
    """Mood attached to a study record."""
    HAPPY = "😊"
    NEUTRAL = "😐"
    SAD = "😔"
    FIRED_UP = "🔥"
    SLEEPY = "😴"


class CalloutKind(str, Enum):
    """Blockquote call-out variants, in match priority order."""
    NOTE = "note"
    WARNING = "warning"
    TIP = "tip"
    QUOTE = "quote"


class ArticleSort(str, Enum):
    """Sortable article columns (always descending)."""
    CREATED_AT = "created_at"
    VIEWS = "views"
    TITLE = "title"
