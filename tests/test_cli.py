"""
Tests for the clean-deps command line interface.
"""

import json
import os
from pathlib import Path

import pytest

from clean_deps.cli import EXIT_FATAL, EXIT_OK, build_parser, main


@pytest.fixture
def mixed_tree(tmp_path):
    for rel in ("src", "node_modules/react", "target/debug"):
        (tmp_path / rel).mkdir(parents=True)
    return tmp_path.resolve()


def test_list_mode_prints_only_matches(mixed_tree, capsys):
    code = main([str(mixed_tree), "--language", "javascript", "--quiet"])

    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert out == f"{mixed_tree / 'node_modules'}\n"
    assert (mixed_tree / "node_modules").exists()


def test_delete_mode_removes_only_selected_language(mixed_tree, capsys):
    code = main([str(mixed_tree), "-l", "rust", "-d", "-q"])

    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert out == f"Removed {mixed_tree / 'target'}\n"
    assert not (mixed_tree / "target").exists()
    assert (mixed_tree / "node_modules").exists()
    assert (mixed_tree / "src").exists()


def test_dotnet_nested_project(tmp_path, capsys):
    for rel in ("MyProj/bin/Debug", "MyProj/obj"):
        (tmp_path / rel).mkdir(parents=True)
    root = tmp_path.resolve()

    code = main([str(root), "-l", "DotNet", "-q"])

    lines = capsys.readouterr().out.splitlines()
    assert code == EXIT_OK
    assert lines == [str(root / "MyProj" / "bin"), str(root / "MyProj" / "obj")]


def test_no_matches_still_succeeds(tmp_path, capsys):
    assert main([str(tmp_path), "-l", "rust", "-q"]) == EXIT_OK
    assert capsys.readouterr().out == ""


def test_defaults_to_current_directory(mixed_tree, monkeypatch, capsys):
    monkeypatch.chdir(mixed_tree)
    assert main(["-l", "rust", "-q"]) == EXIT_OK
    assert capsys.readouterr().out == f"{mixed_tree / 'target'}\n"


def test_summary_goes_to_stderr(mixed_tree, capsys):
    assert main([str(mixed_tree), "-l", "javascript"]) == EXIT_OK

    captured = capsys.readouterr()
    assert captured.out == f"{mixed_tree / 'node_modules'}\n"
    assert "Dry Run Complete" in captured.err


def test_sizes_listing(mixed_tree, capsys):
    (mixed_tree / "node_modules" / "react" / "index.js").write_bytes(b"x" * 2000)

    assert main([str(mixed_tree), "-l", "javascript", "--sizes", "-q"]) == EXIT_OK

    out = capsys.readouterr().out
    assert out == f"   2.0 kB  {mixed_tree / 'node_modules'}\n"


def test_json_output(mixed_tree, capsys):
    assert main([str(mixed_tree), "-l", "rust", "--json"]) == EXIT_OK

    document = json.loads(capsys.readouterr().out)
    assert document["success"] is True
    assert document["dry_run"] is True
    assert document["language"] == "rust"
    assert document["statistics"]["matches_found"] == 1
    assert document["matches"] == [
        {"path": str(mixed_tree / "target"), "status": "listed"}
    ]


def test_strict_flag(tmp_path, capsys):
    (tmp_path / "crate" / "target").mkdir(parents=True)
    (tmp_path / "crate" / "Cargo.toml").write_text("[package]")
    (tmp_path / "misc" / "target").mkdir(parents=True)
    root = tmp_path.resolve()

    assert main([str(root), "-l", "rust", "--strict", "-q"]) == EXIT_OK
    assert capsys.readouterr().out == f"{root / 'crate' / 'target'}\n"


def test_missing_path_is_fatal(tmp_path, capsys):
    missing = tmp_path / "nope"
    code = main([str(missing), "-l", "rust"])

    captured = capsys.readouterr()
    assert code == EXIT_FATAL
    assert captured.out == ""
    assert "does not exist" in captured.err


def test_file_path_is_fatal(tmp_path):
    a_file = tmp_path / "Cargo.toml"
    a_file.write_text("[package]")
    assert main([str(a_file), "-l", "rust"]) == EXIT_FATAL


def test_invalid_language_exits_with_usage_error(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path), "-l", "cobol"])
    assert excinfo.value.code == 2


def test_language_is_required(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path)])
    assert excinfo.value.code == 2


def test_parser_defaults():
    args = build_parser().parse_args(["-l", "rust"])
    assert args.path is None
    assert args.delete is False
    assert args.language == "rust"
    assert args.log_file is None
    assert args.log_level == "WARNING"


def test_unreadable_root_is_fatal(mixed_tree, monkeypatch, capsys):
    original_access = os.access

    def deny_root(path, mode):
        if Path(path) == mixed_tree:
            return False
        return original_access(path, mode)

    monkeypatch.setattr(os, "access", deny_root)
    code = main([str(mixed_tree), "-l", "rust", "-q"])

    captured = capsys.readouterr()
    assert code == EXIT_FATAL
    assert captured.out == ""
    assert "not readable" in captured.err


def test_list_mode_keeps_tabs_in_paths(tmp_path, capsys):
    project = tmp_path / "a\tb"
    (project / "node_modules").mkdir(parents=True)
    root = tmp_path.resolve()

    expected = str(root / "a\tb" / "node_modules")

    assert main([str(root), "-l", "javascript", "-q"]) == EXIT_OK
    assert capsys.readouterr().out == expected + "\n"


def test_unwritable_log_file_is_fatal(mixed_tree, tmp_path, capsys):
    log_file = tmp_path / "missing-dir" / "clean.log"
    code = main([str(mixed_tree), "-l", "rust", "--log-file", str(log_file)])

    captured = capsys.readouterr()
    assert code == EXIT_FATAL
    assert captured.out == ""
    assert "Error:" in captured.err
