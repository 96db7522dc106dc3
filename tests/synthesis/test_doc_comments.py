"""Tests for doc-comment parsing and re-emission."""

from __future__ import annotations

from polydts.models import DocComment, DocTag
from polydts.synthesis.doc_comments import comment_lines, format_tag, merge_tags, parse_doc_comment


def test_parse_splits_description_and_tags() -> None:
    doc = parse_doc_comment(
        """
        Fires a tap event.

        @param {string} name The event name
          spanning two lines.
        @return {boolean} Whether it fired.
        @polymerBehavior
        """
    )

    assert doc.description == "Fires a tap event."
    assert doc.tags == (
        DocTag(title="param", type="string", name="name", description="The event name spanning two lines."),
        DocTag(title="return", type="boolean", description="Whether it fired."),
        DocTag(title="polymerBehavior"),
    )


def test_parse_empty_text() -> None:
    assert parse_doc_comment(None) == DocComment()
    assert parse_doc_comment("   ").is_empty()


def test_format_tag_omits_missing_parts() -> None:
    assert format_tag(DocTag(title="namespace")) == "@namespace"
    assert format_tag(DocTag(title="type", type="number")) == "@type {number}"
    assert format_tag(DocTag(title="param", name="x", description="value")) == "@param x value"


def test_comment_lines_render_block_comment() -> None:
    doc = DocComment(description="First line.\n\nSecond paragraph.", tags=(DocTag(title="polymer"),))

    assert comment_lines(doc) == [
        "/**",
        " * First line.",
        " *",
        " * Second paragraph.",
        " *",
        " * @polymer",
        " */",
    ]


def test_comment_lines_empty_doc_emits_nothing() -> None:
    assert comment_lines(DocComment()) == []
    assert comment_lines(DocComment(description="   ")) == []
    assert comment_lines(None) == []


def test_comment_lines_bare_tag_only() -> None:
    assert comment_lines(DocComment(tags=(DocTag(title="namespace"),))) == ["/**", " * @namespace", " */"]


def test_comment_lines_escape_terminator() -> None:
    lines = comment_lines(DocComment(description="Matches /* and */ tokens."))
    assert lines[1] == " * Matches /* and *\\/ tokens."


def test_merge_tags_appends() -> None:
    doc = DocComment(description="Text")
    merged = merge_tags(doc, [DocTag(title="return", description="x")])

    assert merged.description == "Text"
    assert merged.tags == (DocTag(title="return", description="x"),)
    assert merge_tags(doc, []) is doc
