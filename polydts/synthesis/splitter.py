"""Regrouping of rendered module blocks into output files."""

from __future__ import annotations

import posixpath
from typing import Dict, List, Mapping

from ..models import OutputFiles

DECLARATION_EXTENSION = ".d.ts"
DEFAULT_COMBINED_NAME = f"index{DECLARATION_EXTENSION}"
_BLOCK_SEPARATOR = "\n\n"


def derive_file_name(module_key: str) -> str:
    """Base name of a module key: namespace and scheme dropped, extension stripped.

    ``bower:paper-input/paper-input.html#Polymer`` becomes ``paper-input``.
    """
    path = module_key.split("#", 1)[0]
    head, sep, tail = path.partition(":")
    if sep and "/" not in head:
        path = tail
    base = posixpath.basename(path.rstrip("/")) or path
    stem, _ = posixpath.splitext(base)
    return stem or base or "index"


def _join(blocks: List[str]) -> str:
    return _BLOCK_SEPARATOR.join(block.rstrip("\n") for block in blocks) + "\n"


def split_single(rendered: Mapping[str, str], file_name: str = DEFAULT_COMBINED_NAME) -> OutputFiles:
    """Concatenate every block, in bucket order, into one file.

    The file is always produced; with nothing rendered it is empty.
    """
    if not rendered:
        return {file_name: ""}
    return {file_name: _join(list(rendered.values()))}


def split_per_file(rendered: Mapping[str, str], extension: str = DECLARATION_EXTENSION) -> OutputFiles:
    """One file per derived base name; colliding module keys share a file."""
    grouped: Dict[str, List[str]] = {}
    for module_key, block in rendered.items():
        grouped.setdefault(f"{derive_file_name(module_key)}{extension}", []).append(block)
    return {name: _join(blocks) for name, blocks in grouped.items()}


__all__ = [
    "DECLARATION_EXTENSION",
    "DEFAULT_COMBINED_NAME",
    "derive_file_name",
    "split_per_file",
    "split_single",
]
