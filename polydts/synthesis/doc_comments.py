"""Parsing and re-emission of JSDoc-style documentation comments."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence

from ..models import DocComment, DocTag

_TAG_LINE = re.compile(r"^@(?P<title>[A-Za-z][\w-]*)\s*(?P<rest>.*)$")
_TYPE_HINT = re.compile(r"^\{(?P<type>[^}]*)\}\s*(?P<rest>.*)$")

# Tags whose first word after the optional type hint is a name.
_NAMED_TAGS = frozenset(
    {"param", "arg", "argument", "property", "prop", "typedef", "callback", "event", "fires"}
)


def parse_doc_comment(text: Optional[str]) -> DocComment:
    """Split free text into a description and the ``@tag`` lines that follow it."""
    if not text:
        return DocComment()
    description: List[str] = []
    pending: List[tuple[str, List[str]]] = []
    in_tag = False

    for raw in text.strip().splitlines():
        line = raw.rstrip()
        match = _TAG_LINE.match(line.strip())
        if match:
            pending.append((match.group("title"), [match.group("rest")]))
            in_tag = True
            continue
        if in_tag and line.strip():
            # Continuation of the previous tag's text.
            pending[-1][1].append(line.strip())
            continue
        in_tag = False
        description.append(line)

    tags = tuple(_parse_tag(title, parts) for title, parts in pending)
    return DocComment(description="\n".join(description).strip(), tags=tags)


def _parse_tag(title: str, parts: Sequence[str]) -> DocTag:
    rest = " ".join(part.strip() for part in parts).strip()

    tag_type: Optional[str] = None
    type_match = _TYPE_HINT.match(rest)
    if type_match:
        tag_type = type_match.group("type").strip() or None
        rest = type_match.group("rest").strip()

    name: Optional[str] = None
    if title in _NAMED_TAGS and rest:
        name, _, rest = rest.partition(" ")
        rest = rest.strip()

    return DocTag(title=title, type=tag_type, name=name, description=rest or None)


def merge_tags(doc: DocComment, tags: Iterable[DocTag]) -> DocComment:
    """Return ``doc`` with structured tags appended (analysis output keeps some apart)."""
    extra = tuple(tags)
    if not extra:
        return doc
    return DocComment(description=doc.description, tags=doc.tags + extra)


def format_tag(tag: DocTag) -> str:
    parts = [f"@{tag.title}"]
    if tag.type:
        parts.append(f"{{{tag.type}}}")
    if tag.name:
        parts.append(tag.name)
    if tag.description:
        parts.append(tag.description)
    return " ".join(parts)


def comment_lines(doc: Optional[DocComment]) -> List[str]:
    """Render ``doc`` as ``/** ... */`` lines; an empty comment renders nothing."""
    if doc is None or doc.is_empty():
        return []
    body: List[str] = []
    if doc.description.strip():
        body.extend(doc.description.strip().splitlines())
    if doc.tags:
        if body:
            body.append("")
        body.extend(format_tag(tag) for tag in doc.tags)

    lines = ["/**"]
    for line in body:
        # Keep an embedded terminator from closing the comment early.
        text = line.rstrip().replace("*/", "*\\/")
        lines.append(f" * {text}" if text else " *")
    lines.append(" */")
    return lines


__all__ = ["comment_lines", "format_tag", "merge_tags", "parse_doc_comment"]
