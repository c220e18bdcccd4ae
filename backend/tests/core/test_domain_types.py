"""Domain Types — verifies enum values used at the API boundary."""

from app.core.domain_types import (
    ArticleSort, CalloutKind, CertificationStatus, Mood, QualificationCategory,
    StudyStatus,
)


def test_qualification_categories():
    assert [c.value for c in QualificationCategory] == [
        "IT", "Business", "Language", "Finance", "Medical", "Legal",
        "Engineering", "Other",
    ]


def test_certification_status_has_no_failed():
    assert "failed" in {s.value for s in StudyStatus}
    assert "failed" not in {s.value for s in CertificationStatus}


def test_moods_are_single_emoji():
    assert len(Mood) == 5
    assert Mood("🔥") is Mood.FIRED_UP


def test_callout_kinds_in_priority_order():
    assert list(CalloutKind) == [
        CalloutKind.NOTE, CalloutKind.WARNING, CalloutKind.TIP, CalloutKind.QUOTE,
    ]


def test_article_sort_values_are_column_names():
    assert {s.value for s in ArticleSort} == {"created_at", "views", "title"}
