"""
Tests for the 'context' subcommand.
"""

import json

from langdef.cli import main


def _context(tmp_path, *argv):
    return main(["--workspace", str(tmp_path), "context", *argv])


def test_context_prints_node_path(write_source, rust_source, tmp_path, capsys):
    path = write_source("rust.langdef", rust_source)

    assert _context(tmp_path, str(path), "3", "16") == 0

    assert capsys.readouterr().out.splitlines() == [
        "source_file (1:1)-(8:1)",
        "language (2:1)-(7:2)",
        "pair (3:5)-(3:21)",
        "string_literal (3:16)-(3:20)",
    ]


def test_context_json(write_source, rust_source, tmp_path, capsys):
    path = write_source("rust.langdef", rust_source)

    assert _context(tmp_path, str(path), "2", "10", "--json") == 0

    data = json.loads(capsys.readouterr().out)
    assert [entry["kind"] for entry in data] == ["source_file", "language", "identifier"]
    assert data[-1]["span"]["start"] == {"offset": 10, "line": 2, "column": 10}
    assert data[-1]["span"]["end"] == {"offset": 14, "line": 2, "column": 14}


def test_context_outside_file(write_source, rust_source, tmp_path, capsys):
    path = write_source("rust.langdef", rust_source)

    assert _context(tmp_path, str(path), "30", "1") == 1
    assert "No syntax node at 30:1" in capsys.readouterr().err


def test_context_parse_error(write_source, tmp_path, capsys):
    path = write_source("bad.langdef", "language A {")

    assert _context(tmp_path, str(path), "1", "1") == 1
    assert "UNEXPECTED_EOF" in capsys.readouterr().err


def test_context_missing_file(tmp_path, capsys):
    assert _context(tmp_path, str(tmp_path / "missing.langdef"), "1", "1") == 2
    assert "File not found" in capsys.readouterr().err


def test_context_invalid_position(write_source, tmp_path, capsys):
    path = write_source("a.langdef", "language A {}")

    assert _context(tmp_path, str(path), "0", "1") == 2

    err = capsys.readouterr().err
    assert "Invalid position 0:1" in err
    assert "numbered from 1" in err
