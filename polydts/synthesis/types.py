"""Mapping of dynamically typed member descriptors onto TypeScript types."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import AbstractSet, Iterable, List, Optional

from ..config import DEFAULT_UNREPRESENTABLE_TYPES, DEFAULT_VOID_METHODS
from ..models import MemberRecord, ParamRecord

ANY = "any"
VOID = "void"
ARRAY = "Array<any>"
CALLABLE = "(...args: any[]) => any"

_PRIMITIVES = {
    "string": "string",
    "number": "number",
    "boolean": "boolean",
    "date": "Date",
    "symbol": "symbol",
}
_VOID_RETURNS = {"void", "undefined"}
_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


@dataclass(frozen=True)
class TypeDescriptor:
    """A descriptor with its nullability, optionality and variadic markers split off."""

    base: str
    nullable: bool = False
    optional: bool = False
    variadic: bool = False


def parse_descriptor(descriptor: Optional[str]) -> TypeDescriptor:
    """Split Closure-style markers (``...``, ``?``, ``!``, ``=``) from a type descriptor."""
    text = (descriptor or "").strip()
    variadic = text.startswith("...")
    if variadic:
        text = text[3:].strip()
    nullable = False
    if text[:1] in {"?", "!"}:
        nullable = text[0] == "?"
        text = text[1:].strip()
    optional = text.endswith("=")
    if optional:
        text = text[:-1].strip()
    return TypeDescriptor(base=text, nullable=nullable, optional=optional, variadic=variadic)


def _is_array(base: str) -> bool:
    return (
        base == "Array"
        or base.startswith(("Array<", "Array.<"))
        or (base.endswith("[]") and len(base) > 2)
    )


def _is_callable(base: str) -> bool:
    return base == "Function" or base.startswith("function(")


def format_member_name(name: str) -> str:
    """Quote member names that are not valid identifiers (``aria-label``)."""
    return name if _IDENTIFIER.match(name) else json.dumps(name)


class TypeMapper:
    """Total mapping from descriptors to TypeScript signature fragments."""

    def __init__(
        self,
        void_methods: Iterable[str] = DEFAULT_VOID_METHODS,
        unrepresentable_types: Iterable[str] = DEFAULT_UNREPRESENTABLE_TYPES,
    ) -> None:
        self.void_methods: AbstractSet[str] = frozenset(void_methods)
        self.unrepresentable_types: AbstractSet[str] = frozenset(
            item.lower() for item in unrepresentable_types
        )

    def map_type(self, descriptor: Optional[str], *, variadic: bool = False) -> str:
        parsed = parse_descriptor(descriptor)
        if variadic or parsed.variadic:
            return ARRAY
        base = parsed.base
        primitive = _PRIMITIVES.get(base.lower())
        if primitive is not None:
            return primitive
        if _is_array(base):
            return ARRAY
        if _is_callable(base):
            return CALLABLE
        return ANY

    def is_representable(self, descriptor: Optional[str]) -> bool:
        return parse_descriptor(descriptor).base.lower() not in self.unrepresentable_types

    def is_function_shaped(self, member: MemberRecord) -> bool:
        if member.kind == "method" or member.params is not None:
            return True
        return _is_callable(parse_descriptor(member.type).base)

    def return_type(self, member: MemberRecord) -> str:
        if member.name in self.void_methods:
            return VOID
        declared_method = member.kind == "method" or member.params is not None
        if not declared_method:
            # A property typed as the Function constructor; nothing is known about its result.
            return ANY
        if member.return_type is None:
            return VOID
        if parse_descriptor(member.return_type).base.lower() in _VOID_RETURNS:
            return VOID
        return self.map_type(member.return_type)

    def render_params(self, params: Iterable[ParamRecord]) -> str:
        rendered: List[str] = []
        seen_optional = False
        for index, param in enumerate(params):
            raw_name = param.name.strip()
            parsed = parse_descriptor(param.type)
            variadic = raw_name.startswith("...") or parsed.variadic
            name = raw_name.lstrip(".").strip() or f"arg{index}"
            if not _IDENTIFIER.match(name):
                name = f"arg{index}"
            if variadic:
                rendered.append(f"...{name}: {self.map_type(param.type, variadic=True)}")
                continue
            # TypeScript rejects a required parameter after an optional one.
            seen_optional = seen_optional or parsed.optional
            marker = "?" if seen_optional else ""
            rendered.append(f"{name}{marker}: {ANY}")
        return ", ".join(rendered)

    def render_member(self, member: MemberRecord) -> str:
        name = format_member_name(member.name)
        marker = "?" if parse_descriptor(member.type).optional else ""
        if self.is_function_shaped(member):
            params = self.render_params(member.params or ())
            return f"{name}{marker}({params}): {self.return_type(member)};"
        readonly = "readonly " if member.read_only else ""
        return f"{readonly}{name}{marker}: {self.map_type(member.type)};"


__all__ = [
    "ANY",
    "ARRAY",
    "CALLABLE",
    "TypeDescriptor",
    "TypeMapper",
    "VOID",
    "format_member_name",
    "parse_descriptor",
]
