"""Factories for analyzed feature records used across synthesis tests."""

from __future__ import annotations

from typing import Iterable, Optional

from polydts.models import (
    COMPONENT,
    FUNCTION,
    MIXIN,
    NAMESPACE_VALUE,
    SHARED_BEHAVIOR,
    AnalyzedFeature,
    DocComment,
    MemberRecord,
    ParamRecord,
)


def prop(
    name: str,
    type: Optional[str] = None,
    *,
    read_only: bool = False,
    privacy: str = "public",
    doc: str = "",
) -> MemberRecord:
    return MemberRecord(
        name=name,
        kind="property",
        privacy=privacy,
        type=type,
        read_only=read_only,
        doc=DocComment(description=doc),
    )


def method(
    name: str,
    *params: str,
    returns: Optional[str] = None,
    privacy: str = "public",
    doc: str = "",
) -> MemberRecord:
    return MemberRecord(
        name=name,
        kind="method",
        privacy=privacy,
        type="Function",
        params=tuple(ParamRecord(name=param) for param in params),
        return_type=returns,
        doc=DocComment(description=doc),
    )


def feature(
    kind: str,
    *,
    identifier: Optional[str] = None,
    tag_name: Optional[str] = None,
    members: Iterable[MemberRecord] = (),
    doc: str = "",
    source_path: str = "my-element.html",
) -> AnalyzedFeature:
    return AnalyzedFeature(
        kinds=frozenset({kind}),
        identifier=identifier,
        tag_name=tag_name,
        members=tuple(members),
        doc=DocComment(description=doc),
        source_path=source_path,
    )


def component(tag_name: str, *members: MemberRecord, **kwargs) -> AnalyzedFeature:
    return feature(COMPONENT, tag_name=tag_name, members=members, **kwargs)


def behavior(identifier: str, *members: MemberRecord, **kwargs) -> AnalyzedFeature:
    return feature(SHARED_BEHAVIOR, identifier=identifier, members=members, **kwargs)


def mixin(identifier: str, *members: MemberRecord, **kwargs) -> AnalyzedFeature:
    return feature(MIXIN, identifier=identifier, members=members, **kwargs)


def function(identifier: str, *params: str, returns: Optional[str] = None, **kwargs) -> AnalyzedFeature:
    base = feature(FUNCTION, identifier=identifier, **kwargs)
    return AnalyzedFeature(
        kinds=base.kinds,
        identifier=base.identifier,
        doc=base.doc,
        source_path=base.source_path,
        params=tuple(ParamRecord(name=param) for param in params),
        return_type=returns,
    )


def namespace(identifier: str, **kwargs) -> AnalyzedFeature:
    return feature(NAMESPACE_VALUE, identifier=identifier, **kwargs)


__all__ = ["behavior", "component", "feature", "function", "method", "mixin", "namespace", "prop"]
