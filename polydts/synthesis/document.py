"""A tiny structural document model: lines nested in indented blocks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

INDENT_UNIT = "  "


@dataclass(frozen=True)
class Line:
    """A single output line, indented to the depth of its enclosing block."""

    text: str = ""


@dataclass(frozen=True)
class Block:
    """Children rendered one indentation level deeper than the parent."""

    children: Tuple["Node", ...] = ()


Node = Union[Line, Block]


def lines(texts: Iterable[str]) -> Tuple[Line, ...]:
    return tuple(Line(text) for text in texts)


def braced(opening: str, body: Sequence[Node], closing: str = "}") -> Tuple[Node, ...]:
    """``opening`` line, indented ``body`` and ``closing`` line."""
    return (Line(opening), Block(tuple(body)), Line(closing))


def _walk(nodes: Iterable[Node], depth: int) -> Iterator[Tuple[int, str]]:
    for node in nodes:
        if isinstance(node, Block):
            yield from _walk(node.children, depth + 1)
        else:
            yield depth, node.text


def render(
    nodes: Sequence[Node],
    *,
    indent_unit: str = INDENT_UNIT,
    keep_blank_lines: bool = True,
) -> str:
    """Render ``nodes`` to text without a trailing newline.

    Blank-looking lines never receive indentation. With ``keep_blank_lines`` they
    are emitted as empty lines, otherwise they are dropped.
    """
    output: List[str] = []
    for depth, text in _walk(nodes, 0):
        if not text.strip():
            if keep_blank_lines:
                output.append("")
            continue
        output.append(f"{indent_unit * depth}{text.rstrip()}")
    return "\n".join(output)


__all__ = ["Block", "INDENT_UNIT", "Line", "Node", "braced", "lines", "render"]
