"""Markdown Rendering — verifies block priority, inline spans, escaping and degradation.

Invariants:
    - render_markdown is total over any str
    - Headings, call-outs, code boxes and lists never get a <p> wrapper
    - Adjacent list items coalesce into one <ul>
    - A swift fence never gets the generic header
    - Raw HTML in prose is escaped; unsafe link schemes never become hrefs
"""

import pytest

from app.core.domain_types import CalloutKind
from app.core.render_markdown import (
    CODE_HEADER_GENERIC,
    CODE_HEADER_SWIFT,
    TIP_TITLE,
    WARNING_TITLE,
    Callout,
    CodeBlock,
    Heading,
    ListBlock,
    Paragraph,
    parse_blocks,
    render_inline,
    render_markdown,
)


# --- Headings -----------------------------------------------------------------

def test_h1_has_no_paragraph_wrapper():
    assert render_markdown("# Hello") == "<h1>Hello</h1>"


@pytest.mark.parametrize("level", [1, 2, 3, 4])
def test_heading_levels_one_to_four(level):
    assert render_markdown("#" * level + " T") == f"<h{level}>T</h{level}>"


def test_five_hashes_is_a_paragraph():
    assert render_markdown("##### T") == "<p>##### T</p>"


def test_hash_without_space_is_a_paragraph():
    assert render_markdown("#tag") == "<p>#tag</p>"


def test_heading_renders_inline_spans():
    assert render_markdown("## Use `Text`") == "<h2>Use <code>Text</code></h2>"


# --- Emphasis -----------------------------------------------------------------

def test_bold_then_literal_then_italic():
    assert render_markdown("**bold** and *italic*") == (
        "<p><strong>bold</strong> and <em>italic</em></p>"
    )


def test_double_asterisk_never_read_as_two_italics():
    html = render_inline("**x**")
    assert html == "<strong>x</strong>"
    assert "<em>" not in html


def test_unmatched_bold_leaks_literal_asterisks():
    assert render_markdown("**open") == "<p>**open</p>"


# --- Inline code and links ----------------------------------------------------

def test_code_span_content_is_literal():
    assert render_inline("`**not bold**`") == "<code>**not bold**</code>"


def test_code_span_escapes_html():
    assert render_inline("`<View>`") == "<code>&lt;View&gt;</code>"


def test_link_renders_anchor():
    assert render_inline("[Apple](https://developer.apple.com)") == (
        '<a href="https://developer.apple.com">Apple</a>'
    )


def test_relative_link_allowed():
    assert render_inline("[docs](/pages/views)") == '<a href="/pages/views">docs</a>'


def test_mailto_link_allowed():
    assert render_inline("[mail](mailto:a@b.jp)") == '<a href="mailto:a@b.jp">mail</a>'


@pytest.mark.parametrize("url", [
    "javascript:alert(1)",
    "JavaScript:alert(1)",
    " javascript:alert(1)",
    "java\tscript:alert(1)",
    "data:text/html;base64,xx",
])
def test_unsafe_link_renders_label_only(url):
    html = render_inline(f"[click]({url})")
    assert html == "click"
    assert "href" not in html


def test_link_href_is_attribute_escaped():
    html = render_inline('[q](/search?a=1&b="2")')
    assert html == '<a href="/search?a=1&amp;b=&quot;2&quot;">q</a>'


def test_code_span_in_link_url_cannot_break_out_of_href():
    html = render_markdown('[x](`" onmouseover="alert(1)`)')
    assert 'onmouseover="alert' not in html
    assert html == (
        '<p><a href="`&quot; onmouseover=&quot;alert(1)`">x</a></p>'
    )


def test_code_span_in_link_label_still_renders():
    assert render_inline("[`cmd`](/x)") == '<a href="/x"><code>cmd</code></a>'


def test_link_label_may_carry_emphasis():
    assert render_inline("[**go**](/x)") == '<a href="/x"><strong>go</strong></a>'


# --- Escaping -----------------------------------------------------------------

def test_raw_html_in_prose_is_escaped():
    assert render_markdown("<script>alert(1)</script>") == (
        "<p>&lt;script&gt;alert(1)&lt;/script&gt;</p>"
    )


def test_ampersand_escaped_once():
    assert render_markdown("A & B") == "<p>A &amp; B</p>"


def test_placeholder_marker_in_source_is_stripped():
    assert render_inline("a\x000\x00b") == "a0b"


# --- Fenced code --------------------------------------------------------------

def test_swift_fence_gets_swift_header():
    html = render_markdown("```swift\nText(\"Hi\")\n```")
    assert f'<div class="code-header">{CODE_HEADER_SWIFT}</div>' in html
    assert CODE_HEADER_GENERIC not in html


def test_swift_tag_is_case_insensitive():
    html = render_markdown("```Swift\nlet x = 1\n```")
    assert CODE_HEADER_SWIFT in html


def test_untagged_fence_gets_generic_header():
    html = render_markdown("```\nls -la\n```")
    assert html == (
        f'<div class="code-example"><div class="code-header">{CODE_HEADER_GENERIC}</div>'
        '<div class="code-content"><pre><code>ls -la</code></pre></div></div>'
    )


def test_other_language_gets_generic_header():
    html = render_markdown("```python\nprint(1)\n```")
    assert CODE_HEADER_GENERIC in html
    assert f">{CODE_HEADER_SWIFT}<" not in html


def test_fence_content_is_literal_and_escaped():
    html = render_markdown("```\n# not heading\n**x** <b>\n```")
    assert "<code># not heading\n**x** &lt;b&gt;</code>" in html
    assert "<h1>" not in html
    assert "<strong>" not in html


def test_unterminated_fence_degrades_to_paragraphs():
    html = render_markdown("```swift\nlet x = 1\n# Title")
    assert html == "<p>```swift</p>\n<p>let x = 1</p>\n<h1>Title</h1>"


def test_blocks_after_fence_still_render():
    html = render_markdown("```\ncode\n```\n## After")
    assert html.endswith("<h2>After</h2>")


# --- Call-outs ----------------------------------------------------------------

def test_warning_callout_has_fixed_title():
    html = render_markdown("> \u26a0\ufe0f careful")
    assert html == (
        f'<div class="warning"><div class="warning-title">{WARNING_TITLE}</div>'
        "<p>careful</p></div>"
    )
    assert "<blockquote>" not in html


def test_warning_without_variation_selector():
    blocks = parse_blocks("> \u26a0 careful")
    assert blocks == [Callout(CalloutKind.WARNING, WARNING_TITLE, ("careful",))]


def test_tip_callout():
    html = render_markdown("> \U0001f4a1 use previews")
    assert html == (
        f'<div class="note"><div class="note-title">{TIP_TITLE}</div>'
        "<p>use previews</p></div>"
    )


def test_titled_note_beats_plain_quote():
    html = render_markdown("> **Title**note")
    assert html == (
        '<div class="note"><div class="note-title">Title</div><p>note</p></div>'
    )
    assert "**" not in html


def test_titled_note_collects_continuation_lines():
    html = render_markdown("> **\U0001f4a1 ヒント**\n> first\n> second")
    assert html == (
        '<div class="note"><div class="note-title">\U0001f4a1 ヒント</div>'
        "<p>first<br>second</p></div>"
    )


def test_titled_note_without_body_omits_paragraph():
    assert render_markdown("> **Only title**") == (
        '<div class="note"><div class="note-title">Only title</div></div>'
    )


def test_plain_quote():
    assert render_markdown("> just a quote") == "<blockquote>just a quote</blockquote>"


def test_new_cue_starts_new_callout():
    blocks = parse_blocks("> plain\n> \u26a0\ufe0f careful")
    assert [b.kind for b in blocks] == [CalloutKind.QUOTE, CalloutKind.WARNING]


def test_gt_without_space_is_a_paragraph():
    assert render_markdown(">tight") == "<p>&gt;tight</p>"


# --- Lists --------------------------------------------------------------------

def test_adjacent_items_coalesce_into_one_list():
    html = render_markdown("* a\n* b\n* c")
    assert html == "<ul><li>a</li>\n<li>b</li>\n<li>c</li></ul>"
    assert html.count("<ul>") == 1
    assert html.count("<li>") == 3


def test_ordered_items_keep_their_number():
    html = render_markdown("1. first\n2. second")
    assert html == "<ul><li>1. first</li>\n<li>2. second</li></ul>"


def test_blank_line_inside_list_run_does_not_split():
    html = render_markdown("* a\n\n* b")
    assert html.count("<ul>") == 1


def test_list_block_ordered_flag():
    (block,) = parse_blocks("1. a\n2. b")
    assert isinstance(block, ListBlock)
    assert block.ordered
    (mixed,) = parse_blocks("1. a\n* b")
    assert not mixed.ordered


def test_list_items_render_inline():
    assert render_markdown("* **key**: `value`") == (
        "<ul><li><strong>key</strong>: <code>value</code></li></ul>"
    )


# --- Paragraphs and structure -------------------------------------------------

def test_each_prose_line_is_a_paragraph():
    assert render_markdown("one\ntwo") == "<p>one</p>\n<p>two</p>"


def test_blank_lines_produce_no_empty_paragraphs():
    html = render_markdown("a\n\n\n\nb")
    assert "<p></p>" not in html
    assert html == "<p>a</p>\n<p>b</p>"


def test_crlf_line_endings():
    assert render_markdown("# A\r\nb") == "<h1>A</h1>\n<p>b</p>"


def test_parse_blocks_tags_every_kind():
    source = "# T\n\ntext\n\n```swift\nx\n```\n\n> \U0001f4a1 tip\n\n* item"
    kinds = [type(b) for b in parse_blocks(source)]
    assert kinds == [Heading, Paragraph, CodeBlock, Callout, ListBlock]


@pytest.mark.parametrize("source", [
    "", " ", "\n\n", "**", "*", "`", "```", "```swift", "> ", ">", "[a](",
    "[](x)", "1.", "* ", "\x00", "# ", "> **", "****", "<>&",
])
def test_renderer_is_total(source):
    assert isinstance(render_markdown(source), str)


def test_empty_source_renders_empty_string():
    assert render_markdown("") == ""
