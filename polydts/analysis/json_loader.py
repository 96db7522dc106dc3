"""Conversion of Polymer analysis JSON documents into feature records."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence

from ..logging import get_logger
from ..models import (
    COMPONENT,
    FUNCTION,
    MIXIN,
    NAMESPACE_VALUE,
    SHARED_BEHAVIOR,
    AnalyzedFeature,
    DocComment,
    DocTag,
    MemberRecord,
    ParamRecord,
)
from ..synthesis.doc_comments import merge_tags, parse_doc_comment
from .base import AnalysisEngine, AnalysisError

_logger = get_logger("analysis")


class AnalysisJsonEngine(AnalysisEngine):
    """Reads analysis documents written by ``polymer analyze > analysis.json``."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = root or Path.cwd()

    def supports(self, path: str) -> bool:
        return path.lower().endswith(".json")

    def analyze(self, inputs: Sequence[str]) -> List[AnalyzedFeature]:
        features: List[AnalyzedFeature] = []
        for raw in inputs:
            document = load_analysis_file(self.root / raw)
            features.extend(features_from_analysis(document))
        return features


def load_analysis_file(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisError(f"Failed to read analysis file {path}: {exc}") from exc
    return parse_analysis(text, source=str(path))


def parse_analysis(text: str, *, source: str = "<analysis>") -> Dict[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise AnalysisError(f"Invalid analysis JSON in {source}: {exc}") from exc
    if not isinstance(data, dict):
        raise AnalysisError(f"Analysis document in {source} must be a JSON object")
    return data


def features_from_analysis(document: Mapping[str, Any]) -> List[AnalyzedFeature]:
    """Flatten an analysis document (including nested namespaces) into features."""
    features = list(_collect(document))

    metadata = _as_dict(document.get("metadata"))
    behaviors = _as_dict(metadata.get("polymer")).get("behaviors")
    for entry in _entries(behaviors, "behavior"):
        features.append(_element_like(entry, frozenset({SHARED_BEHAVIOR}), identifier=_str(entry.get("name"))))
    return features


def _collect(container: Mapping[str, Any]) -> Iterator[AnalyzedFeature]:
    for entry in _entries(container.get("elements"), "element"):
        yield _element_like(
            entry,
            frozenset({COMPONENT}),
            identifier=_str(entry.get("name")),
            tag_name=_str(entry.get("tagname")),
        )
    for entry in _entries(container.get("mixins"), "mixin"):
        yield _element_like(entry, frozenset({MIXIN}), identifier=_str(entry.get("name")))
    for entry in _entries(container.get("classes"), "class"):
        # Plain classes have no declaration shape; the filter drops them.
        yield _element_like(entry, frozenset({"class"}), identifier=_str(entry.get("name")))
    for entry in _entries(container.get("functions"), "function"):
        yield _function(entry)
    for entry in _entries(container.get("namespaces"), "namespace"):
        yield AnalyzedFeature(
            kinds=frozenset({NAMESPACE_VALUE}),
            identifier=_str(entry.get("name")),
            doc=_doc(entry),
            source_path=_source_path(entry),
        )
        yield from _collect(entry)


def _element_like(
    entry: Mapping[str, Any],
    kinds: frozenset[str],
    *,
    identifier: Optional[str],
    tag_name: Optional[str] = None,
) -> AnalyzedFeature:
    members = [_property(item) for item in _entries(entry.get("properties"), "property")]
    members.extend(_method(item) for item in _entries(entry.get("methods"), "method"))
    return AnalyzedFeature(
        kinds=kinds,
        identifier=identifier,
        tag_name=tag_name,
        members=tuple(member for member in members if member is not None),
        doc=_doc(entry),
        source_path=_source_path(entry),
    )


def _function(entry: Mapping[str, Any]) -> AnalyzedFeature:
    params = _params(entry.get("params"))
    return_info = _as_dict(entry.get("return"))
    return AnalyzedFeature(
        kinds=frozenset({FUNCTION}),
        identifier=_str(entry.get("name")),
        doc=merge_tags(_doc(entry), _signature_tags(entry.get("params"), return_info)),
        source_path=_source_path(entry),
        params=params,
        return_type=_str(return_info.get("type")),
    )


def _property(entry: Mapping[str, Any]) -> Optional[MemberRecord]:
    name = _str(entry.get("name"))
    if not name:
        _logger.debug("Skipping property without a name")
        return None
    polymer_meta = _as_dict(_as_dict(entry.get("metadata")).get("polymer"))
    read_only = bool(entry.get("readOnly") or polymer_meta.get("readOnly"))
    return MemberRecord(
        name=name,
        kind="property",
        privacy=_str(entry.get("privacy")) or "public",
        type=_str(entry.get("type")),
        doc=parse_doc_comment(_str(entry.get("description"))),
        read_only=read_only,
    )


def _method(entry: Mapping[str, Any]) -> Optional[MemberRecord]:
    name = _str(entry.get("name"))
    if not name:
        _logger.debug("Skipping method without a name")
        return None
    return_info = _as_dict(entry.get("return"))
    doc = parse_doc_comment(_str(entry.get("description")))
    return MemberRecord(
        name=name,
        kind="method",
        privacy=_str(entry.get("privacy")) or "public",
        type="Function",
        params=_params(entry.get("params")),
        return_type=_str(return_info.get("type")),
        doc=merge_tags(doc, _signature_tags(entry.get("params"), return_info, existing=doc)),
    )


def _params(value: Any) -> tuple[ParamRecord, ...]:
    params: List[ParamRecord] = []
    for entry in _entries(value, "parameter"):
        name = _str(entry.get("name"))
        if not name:
            continue
        if entry.get("rest") and not name.startswith("..."):
            name = f"...{name}"
        params.append(ParamRecord(name=name, type=_str(entry.get("type"))))
    return tuple(params)


def _signature_tags(
    params: Any, return_info: Mapping[str, Any], existing: DocComment | None = None
) -> List[DocTag]:
    """``@param``/``@return`` tags for documented parameters not already in the text."""
    present = {(tag.title, tag.name) for tag in existing.tags} if existing else set()
    tags: List[DocTag] = []
    for entry in _entries(params, "parameter"):
        name = _str(entry.get("name"))
        description = _str(entry.get("description"))
        if not name or not description or ("param", name) in present:
            continue
        tags.append(DocTag(title="param", type=_str(entry.get("type")), name=name, description=description))
    return_desc = _str(return_info.get("desc"))
    if return_desc and not any(title in {"return", "returns"} for title, _ in present):
        tags.append(DocTag(title="return", type=_str(return_info.get("type")), description=return_desc))
    return tags


def _doc(entry: Mapping[str, Any]) -> DocComment:
    text = _str(entry.get("description")) or _str(entry.get("summary"))
    return parse_doc_comment(text)


def _source_path(entry: Mapping[str, Any]) -> str:
    source_range = _as_dict(entry.get("sourceRange"))
    return _str(source_range.get("file")) or _str(entry.get("path")) or ""


def _entries(value: Any, label: str) -> Iterable[Mapping[str, Any]]:
    if not isinstance(value, list):
        return []
    valid: List[Mapping[str, Any]] = []
    for item in value:
        if isinstance(item, dict):
            valid.append(item)
        else:
            _logger.debug("Skipping malformed %s entry: %r", label, item)
    return valid


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


__all__ = [
    "AnalysisJsonEngine",
    "features_from_analysis",
    "load_analysis_file",
    "parse_analysis",
]
