"""Shared pytest fixtures for the langdef test suite."""

from pathlib import Path
from typing import Callable

import pytest


RUST_SOURCE = '''
language Rust {
    extension: "rs";
    casing: "snake";
    raw: false;
    annoying: 1;
}
'''


@pytest.fixture
def rust_source() -> str:
    """The sample block used throughout the editor tests."""
    return RUST_SOURCE


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[..., Path]:
    """Write a source file under tmp_path and return its path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep the caller's environment from changing parser limits or log level."""
    monkeypatch.delenv("LANGDEF_MAX_NESTING_DEPTH", raising=False)
    monkeypatch.delenv("LANGDEF_LOG_LEVEL", raising=False)
