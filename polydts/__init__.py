"""Generate TypeScript declaration files from Polymer component metadata."""

from __future__ import annotations

from .config import GeneratorConfig, load_config
from .pipeline import DeclarationGenerator, GenerationResult

__all__ = ["DeclarationGenerator", "GenerationResult", "GeneratorConfig", "load_config"]
