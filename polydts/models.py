"""Core data models shared across polydts components."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

COMPONENT = "component"
SHARED_BEHAVIOR = "shared-behavior"
MIXIN = "mixin"
FUNCTION = "function"
NAMESPACE_VALUE = "namespace-value"


@dataclass(frozen=True)
class DocTag:
    """A single `@title {type} name description` annotation."""

    title: str
    type: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class DocComment:
    """Documentation attached to a feature or member."""

    description: str = ""
    tags: Tuple[DocTag, ...] = ()

    def is_empty(self) -> bool:
        return not self.description.strip() and not self.tags


@dataclass(frozen=True)
class ParamRecord:
    """Parameter of a function-shaped member."""

    name: str
    type: Optional[str] = None


@dataclass(frozen=True)
class MemberRecord:
    """Property or method reported by the analysis engine."""

    name: str
    kind: str = "property"
    privacy: str = "public"
    type: Optional[str] = None
    params: Optional[Tuple[ParamRecord, ...]] = None
    return_type: Optional[str] = None
    doc: DocComment = field(default_factory=DocComment)
    read_only: bool = False

    @property
    def is_public(self) -> bool:
        return self.privacy == "public"


@dataclass(frozen=True)
class AnalyzedFeature:
    """One analyzed unit (element, behavior, mixin, function or namespace)."""

    kinds: FrozenSet[str]
    identifier: Optional[str] = None
    tag_name: Optional[str] = None
    members: Tuple[MemberRecord, ...] = ()
    doc: DocComment = field(default_factory=DocComment)
    source_path: str = ""
    # Call signature, only meaningful for free functions.
    params: Tuple[ParamRecord, ...] = ()
    return_type: Optional[str] = None


class Shape(Enum):
    """Structural shape of an emitted declaration."""

    CLASS = "class"
    INTERFACE = "interface"
    HIGHER_ORDER_FUNCTION = "higher-order-function"
    FUNCTION = "function"


@dataclass(frozen=True)
class MemberFragment:
    """Rendered member signature with the comment that precedes it."""

    text: str
    doc: DocComment = field(default_factory=DocComment)


@dataclass(frozen=True)
class DeclarationDescriptor:
    """Classified unit consumed by the grouper and renderer."""

    name: str
    namespace: Optional[str]
    shape: Shape
    module_key: str
    properties: Tuple[MemberFragment, ...] = ()
    methods: Tuple[MemberFragment, ...] = ()
    doc: DocComment = field(default_factory=DocComment)
    signature: Optional[str] = None

    @property
    def members(self) -> Tuple[MemberFragment, ...]:
        return self.properties + self.methods


ModuleBucket = Dict[str, Tuple[DeclarationDescriptor, ...]]
OutputFiles = Dict[str, str]
