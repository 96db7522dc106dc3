"""Name, namespace and module-key derivation."""

from __future__ import annotations

import re
from typing import Iterable, Optional, Tuple

_HYPHEN_RUN = re.compile(r"(?:^-*|-+)(.)")


def to_identifier_case(name: str) -> str:
    """Uppercase the first letter of every hyphen-separated run and drop hyphens.

    ``my-element`` becomes ``MyElement``; already-cased names are unchanged.
    """
    cased = _HYPHEN_RUN.sub(lambda match: match.group(1).upper(), name)
    return cased.replace("-", "")


def split_identifier(identifier: Optional[str], tag_name: Optional[str]) -> Tuple[str, Optional[str]]:
    """Return ``(name, namespace)`` for a dotted identifier or a bare tag name."""
    if identifier and "." in identifier:
        namespace, _, name = identifier.rpartition(".")
        return name, namespace or None
    if identifier:
        return identifier, None
    return tag_name or "", None


def derive_module_key(
    source_path: str,
    namespace: Optional[str],
    dependency_roots: Iterable[Tuple[str, str]],
) -> str:
    """Rewrite a leading dependency root to its scheme prefix and append ``#namespace``."""
    path = source_path.replace("\\", "/")
    while path.startswith("./"):
        path = path[2:]

    head, sep, rest = path.partition("/")
    if sep:
        for directory, prefix in dependency_roots:
            if head == directory:
                path = f"{prefix}{rest}"
                break

    if namespace:
        return f"{path}#{namespace}"
    return path


__all__ = ["derive_module_key", "split_identifier", "to_identifier_case"]
