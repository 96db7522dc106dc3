"""Base classes for analysis engine adapters."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..models import AnalyzedFeature


class AnalysisError(RuntimeError):
    """Raised when an analysis engine cannot produce feature records."""


class AnalysisEngine(ABC):
    """Contract for adapters that turn input paths into analyzed features."""

    @abstractmethod
    def supports(self, path: str) -> bool:
        """Return True when this engine should handle ``path``."""

    @abstractmethod
    def analyze(self, inputs: Sequence[str]) -> List[AnalyzedFeature]:
        """Analyze every input at once; failures raise AnalysisError."""
