"""Declaration-synthesis engine: filter, classify, map, group, render, split."""

from __future__ import annotations

from .classifier import FeatureClassifier, shape_for
from .filter import SUPPORTED_KINDS, filter_features, is_supported
from .grouping import group_by_module
from .naming import derive_module_key, split_identifier, to_identifier_case
from .renderer import DeclarationRenderer
from .splitter import derive_file_name, split_per_file, split_single
from .types import TypeMapper

__all__ = [
    "DeclarationRenderer",
    "FeatureClassifier",
    "SUPPORTED_KINDS",
    "TypeMapper",
    "derive_file_name",
    "derive_module_key",
    "filter_features",
    "group_by_module",
    "is_supported",
    "shape_for",
    "split_identifier",
    "split_per_file",
    "split_single",
    "to_identifier_case",
]
