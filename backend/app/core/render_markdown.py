"""Markdown Rendering — pure conversion of the CertStudy markdown subset to an HTML fragment.

Invariants:
    - render_markdown is total: any str (empty, unmatched delimiters, raw HTML) returns a str
    - All functions are PURE: no IO, no async, no DB, no logging
    - Text outside recognized markup is HTML-escaped; hrefs are attribute-escaped
    - Only Paragraph blocks emit <p>; headings, call-outs, code boxes and lists never get wrapped
    - Fenced code content is literal (no inline formatting inside code)
    - Adjacent list items always coalesce into ONE <ul> container

Design Decisions:
    - Two passes (parse_blocks -> render_blocks) over a tagged block list instead of a
      chain of whole-document substitutions: block priority is decided once per line,
      so later rules can never re-match markup produced by earlier ones
    - Inline spans still use ordered substitutions (bold before italic), applied per block
      after code spans and links are stashed behind placeholders
    - Ordered items render inside <ul> with the number kept in the item text, matching the
      reference pages authored against the original renderer
    - Unterminated fences degrade to a literal paragraph instead of swallowing the document
"""

import html
import re
from dataclasses import dataclass, field
from typing import Union

from app.core.domain_types import CalloutKind


CODE_HEADER_SWIFT = "Swift"
CODE_HEADER_GENERIC = "コード例"
WARNING_TITLE = "⚠️ 注意"
TIP_TITLE = "\U0001f4a1 ヒント"

_SAFE_SCHEMES = ("http", "https", "mailto")


# ─── Block Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class Heading:
    level: int
    text: str


@dataclass(frozen=True)
class Paragraph:
    text: str


@dataclass(frozen=True)
class CodeBlock:
    code: str
    language: str = ""


@dataclass(frozen=True)
class Callout:
    kind: CalloutKind
    title: str | None = None
    lines: tuple[str, ...] = ()


@dataclass(frozen=True)
class ListItem:
    text: str
    marker: str = "*"

    @property
    def ordered(self) -> bool:
        return self.marker != "*"


@dataclass(frozen=True)
class ListBlock:
    items: tuple[ListItem, ...] = field(default_factory=tuple)

    @property
    def ordered(self) -> bool:
        return bool(self.items) and all(item.ordered for item in self.items)


Block = Union[Heading, Paragraph, CodeBlock, Callout, ListBlock]


# ─── Line Patterns ───────────────────────────────────────────────

_HEADING_RE = re.compile(r"^(#{1,4}) (.*)$")
_FENCE_OPEN_RE = re.compile(r"^```([^`]*)$")
_UNORDERED_RE = re.compile(r"^\* (.*)$")
_ORDERED_RE = re.compile(r"^(\d+)\. (.*)$")
_TITLED_NOTE_RE = re.compile(r"^\*\*(.+?)\*\*(.*)$")
_WARNING_RE = re.compile("^⚠️? (.*)$")
_TIP_RE = re.compile("^\U0001f4a1 (.*)$")

# ─── Inline Patterns ─────────────────────────────────────────────

_CODE_SPAN_RE = re.compile(r"`([^`]+)`")
_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_ITALIC_RE = re.compile(r"\*(.+?)\*")
_PLACEHOLDER_RE = re.compile("\x00(\\d+)\x00")
_SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*):")
_CONTROL_RE = re.compile(r"[\x00-\x20]")


# === Public API ===============================================================

def render_markdown(source: str) -> str:
    """Render markdown-subset text to an HTML fragment. Never raises."""
    if not source:
        return ""
    return render_blocks(parse_blocks(source))


def parse_blocks(source: str) -> list[Block]:
    """Tokenize source into blocks. First matching rule per line wins:
    fence, heading, call-out, list item, paragraph.
    """
    lines = source.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    blocks: list[Block] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if not line.strip():
            i += 1
            continue
        parsed = (
            _parse_fence(lines, i)
            or _parse_heading(lines, i)
            or _parse_callout(lines, i)
            or _parse_list(lines, i)
            or (Paragraph(line.strip()), i + 1)
        )
        block, i = parsed
        blocks.append(block)
    return blocks


def render_blocks(blocks: list[Block]) -> str:
    """Render a block list; blocks joined by newlines."""
    return "\n".join(_render_block(block) for block in blocks)


def render_inline(text: str) -> str:
    """Render inline spans: code, links, bold, italic. Escapes everything else."""
    stash: list[str] = []
    sources: list[str] = []

    def _protect(fragment: str, source: str) -> str:
        stash.append(fragment)
        sources.append(source)
        return f"\x00{len(stash) - 1}\x00"

    def _unprotect(raw: str) -> str:
        return _PLACEHOLDER_RE.sub(lambda m: sources[int(m.group(1))], raw)

    text = text.replace("\x00", "")
    text = _CODE_SPAN_RE.sub(
        lambda m: _protect(f"<code>{_escape(m.group(1))}</code>", m.group(0)),
        text,
    )
    # hrefs are built from source text, never from stashed HTML
    text = _LINK_RE.sub(
        lambda m: _protect(
            _render_link(m.group(1), _unprotect(m.group(2))), m.group(0),
        ),
        text,
    )
    text = _emphasize(_escape(text))
    # link labels may carry code-span placeholders: restore until stable
    while _PLACEHOLDER_RE.search(text):
        text = _PLACEHOLDER_RE.sub(lambda m: stash[int(m.group(1))], text)
    return text


# === Block Parsers ============================================================
# Each returns (block, next_line_index) or None when the rule does not apply.

def _parse_fence(lines: list[str], start: int) -> tuple[Block, int] | None:
    match = _FENCE_OPEN_RE.match(lines[start])
    if not match:
        return None
    for end in range(start + 1, len(lines)):
        if lines[end].strip() == "```":
            code = "\n".join(lines[start + 1:end])
            return CodeBlock(code=code, language=match.group(1).strip()), end + 1
    return None


def _parse_heading(lines: list[str], start: int) -> tuple[Block, int] | None:
    match = _HEADING_RE.match(lines[start])
    if not match:
        return None
    return Heading(len(match.group(1)), match.group(2).strip()), start + 1


def _parse_callout(lines: list[str], start: int) -> tuple[Block, int] | None:
    if not _is_quote_line(lines[start]):
        return None
    kind, title, body = _classify_callout(_quote_content(lines[start]))
    body_lines = [body] if body else []
    i = start + 1
    while i < len(lines) and _is_quote_line(lines[i]):
        content = _quote_content(lines[i])
        if _classify_callout(content)[0] != CalloutKind.QUOTE:
            break  # a new cue starts its own call-out
        if content.strip():
            body_lines.append(content.strip())
        i += 1
    return Callout(kind, title, tuple(body_lines)), i


def _parse_list(lines: list[str], start: int) -> tuple[Block, int] | None:
    if _match_list_item(lines[start]) is None:
        return None
    items: list[ListItem] = []
    i = start
    while i < len(lines):
        item = _match_list_item(lines[i])
        if item is not None:
            items.append(item)
        elif lines[i].strip():
            break
        i += 1
    return ListBlock(tuple(items)), i


def _match_list_item(line: str) -> ListItem | None:
    match = _UNORDERED_RE.match(line)
    if match:
        return ListItem(match.group(1).strip(), "*")
    match = _ORDERED_RE.match(line)
    if match:
        return ListItem(match.group(2).strip(), f"{match.group(1)}.")
    return None


def _is_quote_line(line: str) -> bool:
    return line == ">" or line.startswith("> ")


def _quote_content(line: str) -> str:
    return line[2:]


def _classify_callout(content: str) -> tuple[CalloutKind, str | None, str]:
    """Priority: titled note, warning, tip, plain quote."""
    match = _TITLED_NOTE_RE.match(content)
    if match:
        return CalloutKind.NOTE, match.group(1), match.group(2).strip()
    match = _WARNING_RE.match(content)
    if match:
        return CalloutKind.WARNING, WARNING_TITLE, match.group(1).strip()
    match = _TIP_RE.match(content)
    if match:
        return CalloutKind.TIP, TIP_TITLE, match.group(1).strip()
    return CalloutKind.QUOTE, None, content.strip()


# === Block Renderers ==========================================================

def _render_block(block: Block) -> str:
    if isinstance(block, Heading):
        return f"<h{block.level}>{render_inline(block.text)}</h{block.level}>"
    if isinstance(block, CodeBlock):
        return _render_code_block(block)
    if isinstance(block, Callout):
        return _render_callout(block)
    if isinstance(block, ListBlock):
        return _render_list(block)
    return f"<p>{render_inline(block.text)}</p>"


def _render_code_block(block: CodeBlock) -> str:
    header = (
        CODE_HEADER_SWIFT if block.language.lower() == "swift"
        else CODE_HEADER_GENERIC
    )
    return (
        f'<div class="code-example"><div class="code-header">{header}</div>'
        f'<div class="code-content"><pre><code>{_escape(block.code)}</code></pre>'
        f"</div></div>"
    )


def _render_callout(block: Callout) -> str:
    body = "<br>".join(render_inline(line) for line in block.lines)
    if block.kind == CalloutKind.QUOTE:
        return f"<blockquote>{body}</blockquote>"
    css = "warning" if block.kind == CalloutKind.WARNING else "note"
    title = render_inline(block.title or "")
    paragraph = f"<p>{body}</p>" if body else ""
    return (
        f'<div class="{css}"><div class="{css}-title">{title}</div>'
        f"{paragraph}</div>"
    )


def _render_list(block: ListBlock) -> str:
    items = []
    for item in block.items:
        prefix = f"{_escape(item.marker)} " if item.ordered else ""
        items.append(f"<li>{prefix}{render_inline(item.text)}</li>")
    return "<ul>" + "\n".join(items) + "</ul>"


# === Inline Helpers ===========================================================

def _escape(text: str) -> str:
    return html.escape(text, quote=False)


def _emphasize(escaped: str) -> str:
    """Bold before italic: '**' must never be read as two italic delimiters."""
    return _ITALIC_RE.sub(r"<em>\1</em>", _BOLD_RE.sub(r"<strong>\1</strong>", escaped))


def _render_link(label: str, url: str) -> str:
    label_html = _emphasize(_escape(label))
    url = url.strip()
    if not _is_safe_href(url):
        return label_html
    return f'<a href="{html.escape(url, quote=True)}">{label_html}</a>'


def _is_safe_href(url: str) -> bool:
    """Relative URLs and http/https/mailto only."""
    match = _SCHEME_RE.match(_CONTROL_RE.sub("", url))
    return match is None or match.group(1).lower() in _SAFE_SCHEMES
