"""Analysis engine adapters and input routing."""

from __future__ import annotations

from typing import Dict, List, Sequence

from ..config import GeneratorConfig
from ..models import AnalyzedFeature
from .base import AnalysisEngine, AnalysisError
from .json_loader import AnalysisJsonEngine, features_from_analysis
from .polymer_cli import PolymerCliEngine


def default_engines(config: GeneratorConfig) -> List[AnalysisEngine]:
    """JSON documents are read directly; anything else goes to the external analyzer."""
    return [
        AnalysisJsonEngine(root=config.root),
        PolymerCliEngine(
            config.analyzer.command,
            root=config.root,
            timeout=config.analyzer.timeout,
        ),
    ]


def analyze_inputs(
    inputs: Sequence[str],
    config: GeneratorConfig,
    engines: Sequence[AnalysisEngine] | None = None,
) -> List[AnalyzedFeature]:
    """Route each input to the first engine that supports it and run every engine once."""
    selected = list(engines) if engines is not None else default_engines(config)
    batches: Dict[int, List[str]] = {}
    for path in inputs:
        for index, engine in enumerate(selected):
            if engine.supports(path):
                batches.setdefault(index, []).append(path)
                break
        else:
            raise AnalysisError(f"No analysis engine accepts input {path}")

    features: List[AnalyzedFeature] = []
    for index, paths in batches.items():
        features.extend(selected[index].analyze(paths))
    return features


__all__ = [
    "AnalysisEngine",
    "AnalysisError",
    "AnalysisJsonEngine",
    "PolymerCliEngine",
    "analyze_inputs",
    "default_engines",
    "features_from_analysis",
]
