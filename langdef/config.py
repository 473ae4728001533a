"""Parser configuration and workspace config file support."""

from __future__ import annotations

import json
import logging
import os
import sys
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from langdef.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_MAX_NESTING_DEPTH = 100
CONFIG_FILE_NAMES = ("langdef.toml", ".langdefrc")
ENV_MAX_NESTING_DEPTH = "LANGDEF_MAX_NESTING_DEPTH"

# Each open list costs two parser frames; the rest of the stack is left for
# the caller and the frames above the list rules
FRAMES_PER_LIST = 2
RECURSION_HEADROOM = 250


@dataclass(frozen=True)
class ParserConfig:
    """Limits applied while parsing."""

    # Number of list literals that may be open at once
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH

    def __post_init__(self) -> None:
        validate_nesting_depth(self.max_nesting_depth)

    def with_overrides(self, *, max_nesting_depth: Optional[int] = None) -> "ParserConfig":
        if max_nesting_depth is None:
            return self
        return replace(self, max_nesting_depth=max_nesting_depth)


def max_nesting_depth_ceiling() -> int:
    """Deepest list nesting the recursive descent parser can take at the current recursion limit."""
    return max(1, (sys.getrecursionlimit() - RECURSION_HEADROOM) // FRAMES_PER_LIST)


def validate_nesting_depth(value: Any, source: str = "max_nesting_depth") -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(
            message=f"max_nesting_depth must be an integer, got {value!r}",
            key=source,
        )
    if value < 1:
        raise ConfigError(
            message=f"max_nesting_depth must be at least 1, got {value}",
            key=source,
        )
    ceiling = max_nesting_depth_ceiling()
    if value > ceiling:
        raise ConfigError(
            message=f"max_nesting_depth must be at most {ceiling}, got {value}",
            key=source,
        )
    return value


def _coerce_int(raw: str, source: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigError(
            message=f"max_nesting_depth must be an integer, got {raw!r}",
            key=source,
        ) from None


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(message=f"Invalid JSON in config file: {exc.msg}", path=str(path)) from exc


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        try:
            return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(message=f"Invalid TOML in config file: {exc}", path=str(path)) from exc


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_FILE_NAMES:
        path = root / candidate
        if path.exists():
            return path
    return None


def parser_config_from_mapping(data: Mapping[str, Any], *, path: Optional[str] = None) -> ParserConfig:
    """Build a config from the ``[parser]`` section of a loaded config file."""
    section = data.get("parser") or {}
    if not isinstance(section, Mapping):
        raise ConfigError(message="The 'parser' section must be a table", path=path, key="parser")
    if "max_nesting_depth" not in section:
        return ParserConfig()
    try:
        depth = validate_nesting_depth(section["max_nesting_depth"], "parser.max_nesting_depth")
    except ConfigError as exc:
        exc.path = path
        raise
    return ParserConfig(max_nesting_depth=depth)


def load_parser_config(
    root: Path,
    explicit: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ParserConfig:
    """
    Resolve the parser configuration for a workspace.

    Precedence, lowest first: built-in defaults, ``langdef.toml`` or
    ``.langdefrc`` in ``root`` (or the ``explicit`` file), then the
    ``LANGDEF_MAX_NESTING_DEPTH`` environment variable.
    """
    environ = os.environ if environ is None else environ
    config_path = locate_config_file(root.resolve(), explicit)

    if config_path is None:
        if explicit is not None:
            raise ConfigError(message="Config file not found", path=str(explicit))
        config = ParserConfig()
    else:
        if config_path.suffix == ".toml":
            data = _read_toml_config(config_path)
        else:
            data = _read_json_config(config_path)
        config = parser_config_from_mapping(data, path=str(config_path))
        logger.debug("Loaded parser config from %s", config_path)

    raw_depth = environ.get(ENV_MAX_NESTING_DEPTH)
    if raw_depth:
        depth = validate_nesting_depth(_coerce_int(raw_depth, ENV_MAX_NESTING_DEPTH), ENV_MAX_NESTING_DEPTH)
        config = config.with_overrides(max_nesting_depth=depth)

    return config


__all__ = [
    "ParserConfig",
    "DEFAULT_MAX_NESTING_DEPTH",
    "ENV_MAX_NESTING_DEPTH",
    "load_parser_config",
    "max_nesting_depth_ceiling",
    "locate_config_file",
    "parser_config_from_mapping",
]
