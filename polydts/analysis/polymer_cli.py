"""Adapter that shells out to ``polymer analyze`` for HTML/JS sources."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

from ..config import DEFAULT_ANALYZER_COMMAND
from ..logging import get_logger
from ..models import AnalyzedFeature
from .base import AnalysisEngine, AnalysisError
from .json_loader import features_from_analysis, parse_analysis

Runner = Callable[..., str]


class PolymerCliEngine(AnalysisEngine):
    """Runs the external analyzer once for every source input and parses its JSON."""

    def __init__(
        self,
        command: Sequence[str] = DEFAULT_ANALYZER_COMMAND,
        *,
        root: Path | None = None,
        timeout: Optional[float] = None,
        runner: Runner | None = None,
    ) -> None:
        self.command = tuple(command)
        self.root = root or Path.cwd()
        self.timeout = timeout
        self._runner = runner or self._default_runner
        self.logger = get_logger("analysis.polymer")

    def supports(self, path: str) -> bool:
        return not path.lower().endswith(".json")

    def analyze(self, inputs: Sequence[str]) -> List[AnalyzedFeature]:
        if not inputs:
            return []
        args = [*self.command, *inputs]
        self.logger.debug("Running %s", " ".join(args))
        try:
            output = self._runner(args, cwd=self.root, timeout=self.timeout)
        except FileNotFoundError as exc:
            raise AnalysisError(
                f"Analyzer command not found: {self.command[0]}. Install polymer-cli or set analyzer.command."
            ) from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise AnalysisError(f"Analyzer failed: {detail}") from exc
        except subprocess.TimeoutExpired as exc:
            raise AnalysisError(f"Analyzer timed out after {exc.timeout}s") from exc
        document = parse_analysis(output, source=" ".join(args))
        return features_from_analysis(document)

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        timeout: Optional[float] = None,
    ) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=True,
            timeout=timeout,
        )
        return completed.stdout


__all__ = ["PolymerCliEngine"]
