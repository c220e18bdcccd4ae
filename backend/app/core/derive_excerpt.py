"""Excerpt Derivation — plain-text preview of article markdown.

Invariants:
    - Pure: output depends only on content and limit
    - Result never contains HTML tags; entities are unescaped
    - Inline markup vanishes without a gap; block boundaries become one space
    - len(result) <= limit + len(ELLIPSIS)
"""

import html
import re

from app.core.render_markdown import render_markdown

ELLIPSIS = "..."
DEFAULT_EXCERPT_LENGTH = 200

_INLINE_TAG_RE = re.compile(r"</?(?:strong|em|code|a)\b[^>]*>")
_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")


def derive_excerpt(content: str, limit: int = DEFAULT_EXCERPT_LENGTH) -> str:
    """Render, strip tags, collapse whitespace, truncate with ellipsis."""
    rendered = _INLINE_TAG_RE.sub("", render_markdown(content or ""))
    plain = html.unescape(_TAG_RE.sub(" ", rendered))
    plain = _WHITESPACE_RE.sub(" ", plain).strip()
    if len(plain) <= limit:
        return plain
    return plain[:limit] + ELLIPSIS
