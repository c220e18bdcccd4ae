"""Response Presenters — ORM rows to JSON-ready dicts shared by route modules.

Invariants:
    - Pure projections: never touch the session, never trigger lazy loads
      (only selectin-loaded relationships are read)
    - Membership lists exposed as counts; raw id lists only on user profiles
    - Markdown bodies exposed both raw (content) and rendered (content_html)
"""

from app.core.render_markdown import render_markdown
from app.models.article import Article
from app.models.comment import Comment
from app.models.qualification import Qualification
from app.models.study_record import StudyRecord, StudyRecordComment
from app.models.user import User
from app.models.user_qualification import UserQualification
from app.schemas.user import UserResponse


def user_summary(user: User | None) -> dict | None:
    if user is None:
        return None
    return {"id": str(user.id), "username": user.username}


def user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        bio=user.bio,
        study_goals=user.study_goals or [],
        certifications=user.certifications or [],
        followers=user.followers or [],
        following=user.following or [],
        followers_count=len(user.followers or []),
        following_count=len(user.following or []),
        created_at=user.created_at,
    )


def article_to_dict(
    article: Article, *, include_content: bool = True, include_html: bool = False,
) -> dict:
    data = {
        "id": str(article.id),
        "title": article.title,
        "excerpt": article.excerpt,
        "tags": article.tags or [],
        "author": user_summary(article.author),
        "likes": len(article.likes or []),
        "views": article.views,
        "is_published": article.is_published,
        "created_at": article.created_at.isoformat(),
        "updated_at": article.updated_at.isoformat(),
    }
    if include_content:
        data["content"] = article.content
    if include_html:
        data["content_html"] = render_markdown(article.content)
    return data


def comment_to_dict(comment: Comment) -> dict:
    return {
        "id": str(comment.id),
        "article_id": str(comment.article_id),
        "content": comment.content,
        "author": user_summary(comment.author),
        "likes": len(comment.likes or []),
        "created_at": comment.created_at.isoformat(),
    }


def qualification_to_dict(qualification: Qualification) -> dict:
    return {
        "id": str(qualification.id),
        "name": qualification.name,
        "category": qualification.category,
        "difficulty": qualification.difficulty,
        "description": qualification.description,
        "exam_date": (
            qualification.exam_date.isoformat() if qualification.exam_date else None
        ),
        "is_official": qualification.is_official,
        "created_by": user_summary(qualification.created_by),
    }


def qualification_summary(qualification: Qualification) -> dict:
    return {
        "id": str(qualification.id),
        "name": qualification.name,
        "category": qualification.category,
        "difficulty": qualification.difficulty,
    }


def user_qualification_to_dict(entry: UserQualification) -> dict:
    return {
        "id": str(entry.id),
        "qualification": qualification_summary(entry.qualification),
        "status": entry.status,
        "target_date": entry.target_date.isoformat() if entry.target_date else None,
        "passed_date": entry.passed_date.isoformat() if entry.passed_date else None,
        "score": entry.score,
        "notes": entry.notes,
        "is_public": entry.is_public,
        "created_at": entry.created_at.isoformat(),
    }


def record_comment_to_dict(comment: StudyRecordComment) -> dict:
    return {
        "id": str(comment.id),
        "user": user_summary(comment.user),
        "content": comment.content,
        "created_at": comment.created_at.isoformat(),
    }


def study_record_to_dict(record: StudyRecord) -> dict:
    return {
        "id": str(record.id),
        "user": user_summary(record.user),
        "qualification": qualification_summary(record.qualification),
        "title": record.title,
        "content": record.content,
        "content_html": render_markdown(record.content),
        "study_hours": record.study_hours,
        "mood": record.mood,
        "tags": record.tags or [],
        "is_public": record.is_public,
        "likes": len(record.likes or []),
        "comments": [record_comment_to_dict(c) for c in record.comments],
        "created_at": record.created_at.isoformat(),
    }
