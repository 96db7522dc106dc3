"""Partitioning of classified descriptors into declaration modules."""

from __future__ import annotations

from typing import Dict, Iterable, List

from ..models import DeclarationDescriptor, ModuleBucket


def group_by_module(descriptors: Iterable[DeclarationDescriptor]) -> ModuleBucket:
    """Bucket descriptors by module key.

    Keys keep first-seen order and descriptors keep analysis order inside their
    bucket. Identical descriptors are not deduplicated.
    """
    buckets: Dict[str, List[DeclarationDescriptor]] = {}
    for descriptor in descriptors:
        buckets.setdefault(descriptor.module_key, []).append(descriptor)
    return {key: tuple(members) for key, members in buckets.items()}


__all__ = ["group_by_module"]
