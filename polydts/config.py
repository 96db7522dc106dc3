"""Configuration loading for polydts (.polydts.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import yaml

CONFIG_FILENAME = ".polydts.yml"

DEFAULT_DEPENDENCY_ROOTS: Tuple[Tuple[str, str], ...] = (
    ("bower_components", "bower:"),
    ("node_modules", "npm:"),
)

# Lifecycle and callback methods of the Polymer object model that never return a value.
DEFAULT_VOID_METHODS: Tuple[str, ...] = (
    "created",
    "ready",
    "attached",
    "detached",
    "attributeChanged",
    "connectedCallback",
    "disconnectedCallback",
    "attributeChangedCallback",
    "updateStyles",
    "linkPaths",
    "unlinkPaths",
    "notifySplices",
    "set",
    "setProperties",
)

DEFAULT_UNREPRESENTABLE_TYPES: Tuple[str, ...] = ("conditional",)

DEFAULT_ANALYZER_COMMAND: Tuple[str, ...] = ("polymer", "analyze")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class AnalyzerConfig:
    """How the external analysis engine is invoked."""

    command: Tuple[str, ...] = DEFAULT_ANALYZER_COMMAND
    timeout: Optional[float] = None


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings that drive declaration synthesis and output."""

    root: Path = field(default_factory=Path.cwd)
    out_dir: Path = Path("types")
    output: Optional[Path] = None
    dependency_roots: Tuple[Tuple[str, str], ...] = DEFAULT_DEPENDENCY_ROOTS
    void_methods: frozenset[str] = frozenset(DEFAULT_VOID_METHODS)
    unrepresentable_types: frozenset[str] = frozenset(DEFAULT_UNREPRESENTABLE_TYPES)
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)

    def with_overrides(
        self,
        *,
        root: Optional[Path] = None,
        out_dir: Optional[Path] = None,
        output: Optional[Path] = None,
    ) -> "GeneratorConfig":
        """Return a copy with CLI-provided paths taking precedence."""
        changes: Dict[str, Any] = {}
        if root is not None:
            changes["root"] = root
        if out_dir is not None:
            changes["out_dir"] = out_dir
        if output is not None:
            changes["output"] = output
        return replace(self, **changes) if changes else self


def load_config(config_path: Path) -> GeneratorConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return GeneratorConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    defaults = GeneratorConfig(root=root)

    out_dir_str = _as_str(data.get("out_dir"))
    output_str = _as_str(data.get("output"))

    roots = _as_roots(data.get("dependency_roots"))
    void_methods = _as_str_list(data.get("void_methods"))
    unrepresentable = _as_str_list(data.get("unrepresentable_types"))

    analyzer = defaults.analyzer
    analyzer_data = _as_dict(data.get("analyzer"))
    if analyzer_data:
        command = _as_command(analyzer_data.get("command"))
        analyzer = AnalyzerConfig(
            command=command or DEFAULT_ANALYZER_COMMAND,
            timeout=_as_float(analyzer_data.get("timeout")),
        )

    return GeneratorConfig(
        root=root,
        out_dir=Path(out_dir_str) if out_dir_str else defaults.out_dir,
        output=Path(output_str) if output_str else None,
        dependency_roots=roots if roots else defaults.dependency_roots,
        void_methods=frozenset(void_methods) if "void_methods" in data else defaults.void_methods,
        unrepresentable_types=(
            frozenset(unrepresentable)
            if "unrepresentable_types" in data
            else defaults.unrepresentable_types
        ),
        analyzer=analyzer,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


def _as_command(value: Any) -> Tuple[str, ...]:
    if isinstance(value, str):
        return tuple(value.split())
    return tuple(_as_str_list(value))


def _as_roots(value: Any) -> Tuple[Tuple[str, str], ...]:
    if not isinstance(value, dict):
        return ()
    roots: List[Tuple[str, str]] = []
    for directory, prefix in value.items():
        if not isinstance(directory, str) or not isinstance(prefix, str):
            raise ConfigError("dependency_roots must map directory names to scheme prefixes")
        roots.append((directory.strip("/"), prefix))
    return tuple(roots)


__all__ = [
    "AnalyzerConfig",
    "ConfigError",
    "GeneratorConfig",
    "load_config",
]
