"""Selection of analyzed features that map onto a declaration shape."""

from __future__ import annotations

from typing import AbstractSet, Iterable, List

from ..models import (
    COMPONENT,
    FUNCTION,
    MIXIN,
    NAMESPACE_VALUE,
    SHARED_BEHAVIOR,
    AnalyzedFeature,
)

SUPPORTED_KINDS = frozenset({COMPONENT, SHARED_BEHAVIOR, MIXIN, FUNCTION, NAMESPACE_VALUE})


def is_supported(feature: AnalyzedFeature, supported: AbstractSet[str] = SUPPORTED_KINDS) -> bool:
    return bool(feature.kinds & supported)


def filter_features(
    features: Iterable[AnalyzedFeature], supported: AbstractSet[str] = SUPPORTED_KINDS
) -> List[AnalyzedFeature]:
    """Keep features whose kind tags intersect ``supported``, preserving order.

    Templates, style modules and other unsupported kinds are dropped silently.
    """
    return [feature for feature in features if is_supported(feature, supported)]


__all__ = ["SUPPORTED_KINDS", "filter_features", "is_supported"]
