"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Membership sets (likes, followers, following) are JSON arrays of str(UUID),
      written back whole after core.toggle_membership computes the new list

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from app.models.user import User  # noqa: F401
from app.models.article import Article  # noqa: F401
from app.models.comment import Comment  # noqa: F401
from app.models.qualification import Qualification  # noqa: F401
from app.models.user_qualification import UserQualification  # noqa: F401
from app.models.study_record import StudyRecord, StudyRecordComment  # noqa: F401
from app.models.page_content import PageContent  # noqa: F401
