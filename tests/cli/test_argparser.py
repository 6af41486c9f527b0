"""Tests for the argument parser."""

from pathlib import Path

import pytest

from addtree.cli.argparser import create_parser, validate_args
from addtree.oracles.pattern_rules import PatternIgnoreRules


@pytest.fixture
def rules():
    return PatternIgnoreRules()


def test_defaults(rules):
    args = create_parser(rules).parse_args(["src"])
    assert args.paths == [Path("src")]
    assert args.format == "tree"
    assert args.output is None
    assert args.admin_dir is None
    assert args.cvsignore is None
    assert args.verbose == 0
    assert not args.no_default_ignores
    assert args.root == Path.cwd()


def test_multiple_paths_and_options(rules, tmp_path):
    args = create_parser(rules).parse_args(
        ["a", "b", "-f", "paths", "-a", "CVS", "-a", ".svn", "-vv", "-r", str(tmp_path), "--no-default-ignores"]
    )
    assert args.paths == [Path("a"), Path("b")]
    assert args.format == "paths"
    assert args.admin_dir == ["CVS", ".svn"]
    assert args.verbose == 2
    assert args.root == tmp_path
    assert args.no_default_ignores


def test_ignore_options_applied_in_order(rules, tmp_path):
    ignore_file = tmp_path / "ignore"
    ignore_file.write_text("*.log\n")
    args = create_parser(rules).parse_args(["src", "-i", "*.tmp", "-e", str(ignore_file), "-i", "!keep.log"])

    assert args.ignore == ["*.tmp", "!keep.log"]
    assert args.exclude == [ignore_file]
    assert rules.exclude("a.tmp")
    assert rules.exclude("debug.log")
    assert not rules.exclude("keep.log")


def test_missing_exclude_file_is_usage_error(rules, capsys):
    with pytest.raises(SystemExit) as exc_info:
        create_parser(rules).parse_args(["src", "-e", "/non/existent/ignore"])
    assert exc_info.value.code == 2
    assert "Rules file not found" in capsys.readouterr().err


def test_paths_required(rules):
    with pytest.raises(SystemExit) as exc_info:
        create_parser(rules).parse_args([])
    assert exc_info.value.code == 2


def test_invalid_format(rules):
    with pytest.raises(SystemExit):
        create_parser(rules).parse_args(["src", "-f", "xml"])


def test_version(rules, capsys):
    with pytest.raises(SystemExit) as exc_info:
        create_parser(rules).parse_args(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("addtree ")


def test_validate_args(rules, tmp_path):
    (tmp_path / "file.txt").touch()
    parser = create_parser(rules)

    validate_args(parser.parse_args([str(tmp_path / "file.txt"), "-r", str(tmp_path)]))

    with pytest.raises(FileNotFoundError, match="Path does not exist"):
        validate_args(parser.parse_args([str(tmp_path / "missing"), "-r", str(tmp_path)]))
    with pytest.raises(FileNotFoundError, match="Root path does not exist"):
        validate_args(parser.parse_args([str(tmp_path / "file.txt"), "-r", str(tmp_path / "nope")]))
    with pytest.raises(NotADirectoryError):
        validate_args(parser.parse_args([str(tmp_path / "file.txt"), "-r", str(tmp_path / "file.txt")]))
