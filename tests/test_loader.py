"""Tests for discovering and loading source files from disk."""

import pytest

from langdef.config import ParserConfig
from langdef.errors import NestingLimitExceeded, UnexpectedToken
from langdef.loader import discover_source_files, load_file, load_tree


def test_discover_sorted_recursively(write_source, tmp_path):
    write_source("b.langdef", "language B {}")
    write_source("nested/a.langdef", "language A {}")
    write_source("notes.txt", "language N {}")
    write_source("nested/readme.md", "# docs")

    found = discover_source_files(tmp_path)
    assert found == sorted([tmp_path / "b.langdef", tmp_path / "nested" / "a.langdef"])


def test_discover_single_file(write_source):
    path = write_source("only.langdef", "")
    other = write_source("only.txt", "")

    assert discover_source_files(path) == [path]
    assert discover_source_files(other) == []


def test_load_file_records_path(write_source, rust_source):
    path = write_source("rust.langdef", rust_source)

    source_file = load_file(path)
    assert source_file.path == str(path)
    assert [block.name.name for block in source_file] == ["Rust"]


def test_load_file_errors_carry_path(write_source):
    path = write_source("broken.langdef", "language { }")

    with pytest.raises(UnexpectedToken) as exc_info:
        load_file(path)
    assert exc_info.value.path == str(path)
    assert str(exc_info.value).startswith(f"File: {path} | Line 1:10")


def test_load_file_uses_config(write_source):
    path = write_source("deep.langdef", "language D { v: [[1]]; }")

    assert load_file(path, ParserConfig(max_nesting_depth=2)).blocks[0].pairs[0].value.depth() == 2
    with pytest.raises(NestingLimitExceeded):
        load_file(path, ParserConfig(max_nesting_depth=1))


def test_load_tree(write_source, tmp_path, rust_source):
    write_source("rust.langdef", rust_source)
    write_source("go/go.langdef", 'language Go { extension: "go"; }')

    tree = load_tree(tmp_path)
    assert sorted(tree) == [tmp_path / "go" / "go.langdef", tmp_path / "rust.langdef"]
    assert tree[tmp_path / "go" / "go.langdef"].blocks[0].name.name == "Go"


def test_load_tree_stops_at_first_error(write_source, tmp_path):
    write_source("a.langdef", "language A {}")
    write_source("b.langdef", "language B { x }")

    with pytest.raises(UnexpectedToken):
        load_tree(tmp_path)
