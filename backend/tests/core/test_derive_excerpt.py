"""Excerpt Derivation — plain-text previews from article markdown."""

from app.core.derive_excerpt import ELLIPSIS, derive_excerpt


def test_short_content_returned_as_plain_text():
    assert derive_excerpt("# Title\n\n**bold** text") == "Title bold text"


def test_entities_unescaped():
    assert derive_excerpt("A & B <c>") == "A & B <c>"


def test_code_box_header_included_as_text():
    excerpt = derive_excerpt("```swift\nlet x = 1\n```")
    assert "<" not in excerpt
    assert "let x = 1" in excerpt


def test_truncates_with_ellipsis():
    excerpt = derive_excerpt("a" * 250, limit=200)
    assert excerpt == "a" * 200 + ELLIPSIS


def test_exact_limit_not_truncated():
    assert derive_excerpt("b" * 10, limit=10) == "b" * 10


def test_whitespace_collapsed():
    assert derive_excerpt("one\n\n\ntwo   three") == "one two three"


def test_empty_content():
    assert derive_excerpt("") == ""


def test_inline_markup_leaves_no_gap():
    assert derive_excerpt("**太字**の本文と`code`") == "太字の本文とcode"


def test_code_box_header_separated_from_code():
    assert derive_excerpt("```swift\nlet x = 1\n```") == "Swift let x = 1"
