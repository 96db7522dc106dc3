"""Pipeline orchestration: analysis, synthesis and output."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .analysis import AnalysisEngine, AnalysisError, analyze_inputs
from .config import GeneratorConfig
from .logging import get_logger
from .manifests import discover_default_inputs
from .models import AnalyzedFeature, OutputFiles
from .synthesis import (
    DeclarationRenderer,
    FeatureClassifier,
    filter_features,
    group_by_module,
    split_per_file,
    split_single,
)
from .writer import write_files


@dataclass
class GenerationResult:
    """Outcome of a full generation run."""

    files: OutputFiles
    written: List[Path] = field(default_factory=list)
    feature_count: int = 0
    module_count: int = 0


class DeclarationGenerator:
    """Coordinates filter, classifier, grouper, renderer and splitter."""

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        *,
        classifier: FeatureClassifier | None = None,
        renderer: DeclarationRenderer | None = None,
        engines: Optional[Sequence[AnalysisEngine]] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.classifier = classifier or FeatureClassifier(self.config)
        self.renderer = renderer or DeclarationRenderer()
        self._engines = list(engines) if engines is not None else None
        self.logger = get_logger("pipeline")

    def generate(
        self, features: Iterable[AnalyzedFeature], *, single_file: Optional[str] = None
    ) -> OutputFiles:
        """Pure synthesis: features in, ``file name -> text`` out."""
        selected = filter_features(features)
        descriptors = self.classifier.classify_all(selected)
        bucket = group_by_module(descriptors)
        self.logger.debug(
            "Classified %d features into %d modules", len(descriptors), len(bucket)
        )
        rendered = self.renderer.render(bucket)
        if single_file is not None:
            return split_single(rendered, single_file)
        return split_per_file(rendered)

    def run(self, inputs: Sequence[str] | None = None) -> GenerationResult:
        """Analyze ``inputs`` (or the dependency main entries) and write declarations."""
        paths = list(inputs) if inputs else discover_default_inputs(self.config.root)
        if not paths:
            raise AnalysisError(
                "No inputs given and no dependency main entries found in bower.json or package.json"
            )
        self.logger.info("Analyzing %d input(s)", len(paths))
        features = analyze_inputs(paths, self.config, self._engines)
        self.logger.debug("Analysis produced %d features", len(features))

        output = self.config.output
        if output is not None:
            target = self._resolve(output)
            files = self.generate(features, single_file=target.name)
            directory = target.parent
        else:
            files = self.generate(features)
            directory = self._resolve(self.config.out_dir)

        written = write_files(files, directory)
        self.logger.info("Wrote %d declaration file(s) to %s", len(written), directory)
        return GenerationResult(
            files=files,
            written=written,
            feature_count=len(features),
            module_count=sum(
                line.startswith("declare module ") for text in files.values() for line in text.splitlines()
            ),
        )

    def _resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else self.config.root / path


__all__ = ["DeclarationGenerator", "GenerationResult"]
