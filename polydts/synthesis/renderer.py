"""Rendering of declaration descriptors into ambient module blocks."""

from __future__ import annotations

import json
from typing import Dict, Iterable, List, Sequence

from ..models import DeclarationDescriptor, MemberFragment, ModuleBucket, Shape
from .doc_comments import comment_lines
from .document import INDENT_UNIT, Node, braced, lines, render

_CONSTRUCTIBLE = "{new (...args: any[]): T}"


class DeclarationRenderer:
    """Emits one ``declare module`` block per bucket."""

    def __init__(self, *, indent_unit: str = INDENT_UNIT, keep_blank_lines: bool = False) -> None:
        self.indent_unit = indent_unit
        self.keep_blank_lines = keep_blank_lines

    def render(self, bucket: ModuleBucket) -> Dict[str, str]:
        """Return ``module key -> block text`` in bucket order."""
        return {key: self.render_module(key, descriptors) for key, descriptors in bucket.items()}

    def render_module(self, module_key: str, descriptors: Sequence[DeclarationDescriptor]) -> str:
        return render(
            self.module_nodes(module_key, descriptors),
            indent_unit=self.indent_unit,
            keep_blank_lines=self.keep_blank_lines,
        )

    def render_declaration(self, descriptor: DeclarationDescriptor) -> str:
        return render(
            self.declaration_nodes(descriptor),
            indent_unit=self.indent_unit,
            keep_blank_lines=self.keep_blank_lines,
        )

    def module_nodes(
        self, module_key: str, descriptors: Iterable[DeclarationDescriptor]
    ) -> tuple[Node, ...]:
        body: List[Node] = []
        for descriptor in descriptors:
            body.extend(self.declaration_nodes(descriptor))
        quoted = json.dumps(module_key, ensure_ascii=False)
        return braced(f"declare module {quoted} {{", body)

    def declaration_nodes(self, descriptor: DeclarationDescriptor) -> List[Node]:
        nodes: List[Node] = list(lines(comment_lines(descriptor.doc)))
        if descriptor.shape is Shape.CLASS:
            nodes.extend(self._class(descriptor))
        elif descriptor.shape is Shape.INTERFACE:
            nodes.extend(self._interface(descriptor))
        elif descriptor.shape is Shape.HIGHER_ORDER_FUNCTION:
            nodes.extend(self._mixin(descriptor))
        else:
            nodes.extend(self._function(descriptor))
        return nodes

    # ------------------------------------------------------------------
    # Shapes

    def _class(self, descriptor: DeclarationDescriptor) -> tuple[Node, ...]:
        body = self._member_nodes(descriptor.members)
        body.extend(lines(["constructor();"]))
        return braced(f"export class {descriptor.name} {{", body)

    def _interface(self, descriptor: DeclarationDescriptor) -> tuple[Node, ...]:
        # Behaviors exist at runtime as singletons, so a value of the same name follows the type.
        body = self._member_nodes(descriptor.members)
        body.extend(lines([f"new (...args: any[]): {descriptor.name};"]))
        return braced(f"export interface {descriptor.name} {{", body) + lines(
            [f"export const {descriptor.name}: {descriptor.name};"]
        )

    def _mixin(self, descriptor: DeclarationDescriptor) -> tuple[Node, ...]:
        head = (
            f"export function {descriptor.name}<T extends object>(Base: {_CONSTRUCTIBLE}): "
            "{new (...args: any[]): T & "
        )
        members = descriptor.members
        if any(not member.doc.is_empty() for member in members):
            return braced(head + "{", self._member_nodes(members), "}};")
        inline = "; ".join(member.text.rstrip(";") for member in members)
        literal = "{ " + inline + " }" if inline else "{}"
        return lines([head + literal + "};"])

    def _function(self, descriptor: DeclarationDescriptor) -> tuple[Node, ...]:
        signature = descriptor.signature or "(): any"
        return lines([f"export function {descriptor.name}{signature};"])

    @staticmethod
    def _member_nodes(members: Iterable[MemberFragment]) -> List[Node]:
        nodes: List[Node] = []
        for member in members:
            nodes.extend(lines(comment_lines(member.doc)))
            nodes.extend(lines([member.text]))
        return nodes


__all__ = ["DeclarationRenderer"]
