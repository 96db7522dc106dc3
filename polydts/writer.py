"""Writes generated declaration files to disk."""

from __future__ import annotations

from pathlib import Path
from typing import List, Mapping

from .logging import get_logger

_logger = get_logger("writer")


class OutputError(RuntimeError):
    """Raised when a declaration file cannot be written."""

    def __init__(self, message: str, written: List[Path]) -> None:
        super().__init__(message)
        self.written = written


def write_files(files: Mapping[str, str], directory: Path) -> List[Path]:
    """Write ``name -> text`` under ``directory`` and return the written paths.

    The first failure stops the run; files written before it are left in place.
    """
    written: List[Path] = []
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputError(f"Cannot create output directory {directory}: {exc}", written) from exc

    for name, text in files.items():
        target = directory / name
        try:
            target.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise OutputError(f"Failed to write {target}: {exc}", written) from exc
        _logger.debug("Wrote %s (%d bytes)", target, len(text.encode("utf-8")))
        written.append(target)
    return written


__all__ = ["OutputError", "write_files"]
