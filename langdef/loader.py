"""Utilities for loading .langdef files from disk into SourceFile ASTs."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import Dict, List, Optional

from langdef.ast import SourceFile
from langdef.config import ParserConfig
from langdef.parser import parse

logger = logging.getLogger(__name__)

# Valid file extensions for langdef files
VALID_EXTENSIONS = {".langdef"}


def discover_source_files(root: str | PathLike[str]) -> List[Path]:
    """Discover source files with valid extensions under ``root``."""
    root = Path(root)
    if root.is_file():
        return [root] if root.suffix.lower() in VALID_EXTENSIONS else []

    paths = []
    for ext in VALID_EXTENSIONS:
        paths.extend(path for path in root.rglob(f"*{ext}") if path.is_file())

    return sorted(paths)


def load_file(path: str | PathLike[str], config: Optional[ParserConfig] = None) -> SourceFile:
    """Read and parse a single file; errors carry the file path."""
    source_path = Path(path)
    text = source_path.read_text(encoding="utf-8")
    logger.debug("Parsing %s (%d characters)", source_path, len(text))
    return parse(text, path=str(source_path), config=config)


def load_tree(root: str | PathLike[str], config: Optional[ParserConfig] = None) -> Dict[Path, SourceFile]:
    """
    Parse every source file under ``root``.

    Stops at the first file that fails to parse and raises its error.
    """
    return {path: load_file(path, config) for path in discover_source_files(root)}


__all__ = ["VALID_EXTENSIONS", "discover_source_files", "load_file", "load_tree"]
