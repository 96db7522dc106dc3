"""Default input discovery from bower.json / package.json dependencies."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Tuple

from .logging import get_logger

_logger = get_logger("manifests")

# (project manifest, install directory, per-package manifest names)
_ECOSYSTEMS: Tuple[Tuple[str, str, Tuple[str, ...]], ...] = (
    ("bower.json", "bower_components", ("bower.json", ".bower.json")),
    ("package.json", "node_modules", ("package.json",)),
)


def load_manifest(path: Path) -> Dict[str, object]:
    """Return the parsed manifest contents or an empty dict."""
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        _logger.debug("Ignoring unreadable manifest %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def declared_dependencies(manifest: Dict[str, object]) -> List[str]:
    deps = manifest.get("dependencies", {})
    if isinstance(deps, dict):
        return list(deps.keys())
    return []


def main_entries(manifest: Dict[str, object]) -> List[str]:
    main = manifest.get("main")
    if isinstance(main, str):
        return [main]
    if isinstance(main, list):
        return [item for item in main if isinstance(item, str)]
    return []


def discover_default_inputs(root: Path) -> List[str]:
    """Main entry files of every declared dependency, relative to ``root``."""
    inputs: List[str] = []
    seen = set()
    for project_manifest, install_dir, package_manifests in _ECOSYSTEMS:
        manifest = load_manifest(root / project_manifest)
        for name in declared_dependencies(manifest):
            package_dir = root / install_dir / name
            package: Dict[str, object] = {}
            for candidate in package_manifests:
                package = load_manifest(package_dir / candidate)
                if package:
                    break
            for entry in main_entries(package):
                relative = (Path(install_dir) / name / entry).as_posix()
                if not (root / relative).exists():
                    _logger.debug("Main entry %s of %s does not exist", entry, name)
                    continue
                if relative not in seen:
                    seen.add(relative)
                    inputs.append(relative)
    return inputs


__all__ = ["declared_dependencies", "discover_default_inputs", "load_manifest", "main_entries"]
