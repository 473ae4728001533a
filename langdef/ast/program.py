"""File, block and pair level AST nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .literals import Literal
from .source_location import Span


@dataclass(frozen=True)
class Identifier:
    """Block name or pair key; one or more of ``[A-Za-z_]``."""

    name: str
    span: Optional[Span] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Pair:
    """A single ``key: value;`` declaration."""

    key: Identifier
    value: Literal
    span: Optional[Span] = field(default=None, compare=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key.name, "value": self.value.to_dict()}


@dataclass(frozen=True)
class LanguageBlock:
    """
    A ``language <name> { ... }`` block.

    Pairs keep their source order. Repeated keys are kept as written; use
    ``values()`` to see every value bound to a key and ``duplicate_keys()``
    to find repeats.
    """

    name: Identifier
    pairs: Tuple[Pair, ...] = ()
    span: Optional[Span] = field(default=None, compare=False, repr=False)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def keys(self) -> List[str]:
        return [pair.key.name for pair in self.pairs]

    def values(self, key: str) -> List[Literal]:
        return [pair.value for pair in self.pairs if pair.key.name == key]

    def duplicate_keys(self) -> List[str]:
        seen: Dict[str, int] = {}
        for name in self.keys():
            seen[name] = seen.get(name, 0) + 1
        return [name for name, count in seen.items() if count > 1]

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name.name, "pairs": [pair.to_dict() for pair in self.pairs]}


@dataclass(frozen=True)
class SourceFile:
    """Root of a parse: every ``language`` block in source order."""

    blocks: Tuple[LanguageBlock, ...] = ()
    path: str = field(default="", compare=False)
    span: Optional[Span] = field(default=None, compare=False, repr=False)

    def __iter__(self) -> Iterator[LanguageBlock]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def blocks_named(self, name: str) -> List[LanguageBlock]:
        return [block for block in self.blocks if block.name.name == name]

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "blocks": [block.to_dict() for block in self.blocks]}


__all__ = ["Identifier", "Pair", "LanguageBlock", "SourceFile"]
