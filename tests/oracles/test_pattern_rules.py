import os
import tempfile

import pytest

from addtree.oracles.pattern_rules import PatternIgnoreRules


@pytest.fixture
def temp_ignore_file():
    with tempfile.NamedTemporaryFile(mode="w", delete=False) as f:
        f.write("# build products\n")
        f.write("*.o\n")
        f.write("!keep.o\n")
        f.write("build/\n")
        f.write("/TODO\n")
    yield f.name
    os.unlink(f.name)


@pytest.mark.parametrize(
    "path,expected",
    [
        ("main.o", True),
        ("src/main.o", True),
        ("keep.o", False),
        ("main.c", False),
        ("build/", True),
        ("build/out.bin", True),
        ("src/build/", True),
        # A file named build is not matched by a directory pattern
        ("build", False),
        ("TODO", True),
        ("docs/TODO", False),
    ],
)
def test_pattern_rules_from_file(temp_ignore_file, path, expected):
    rules = PatternIgnoreRules(temp_ignore_file)
    assert rules.exclude(path) == expected, f"Failed for path: {path}"


def test_empty_rules_exclude_nothing():
    rules = PatternIgnoreRules()
    assert not rules.has_rules()
    assert not rules.exclude("anything.txt")


def test_comment_only_file_has_no_rules():
    with tempfile.NamedTemporaryFile(mode="w", delete=False) as f:
        f.write("# nothing here\n\n")
    try:
        rules = PatternIgnoreRules(f.name)
        assert not rules.has_rules()
    finally:
        os.unlink(f.name)


def test_missing_rules_file():
    with pytest.raises(FileNotFoundError):
        PatternIgnoreRules("/non/existent/ignore/file")


def test_add_rule_order_matters():
    rules = PatternIgnoreRules()
    rules.add_rule("*.log")
    assert rules.exclude("debug.log")
    rules.add_rule("!debug.log")
    assert not rules.exclude("debug.log")
    rules.add_rule("debug.log")
    assert rules.exclude("debug.log")
    assert rules.has_rules()


def test_load_multiple_files(temp_ignore_file):
    with tempfile.NamedTemporaryFile(mode="w", delete=False) as f:
        f.write("*.tmp\n")
    try:
        rules = PatternIgnoreRules([temp_ignore_file, f.name])
        assert rules.exclude("scratch.tmp")
        assert rules.exclude("main.o")
    finally:
        os.unlink(f.name)
