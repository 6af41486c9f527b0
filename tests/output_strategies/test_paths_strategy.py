import pytest

from addtree.add_tree.add_forest import assemble_forest
from addtree.output_strategies import get_output_strategy
from addtree.output_strategies.json_strategy import JSONOutputStrategy
from addtree.output_strategies.paths_strategy import PathsOutputStrategy
from addtree.output_strategies.tree_strategy import TreeOutputStrategy
from addtree.path_entry.memory_path_entry import MemoryPathEntry
from addtree.types import AddFormat


def test_paths_parents_first_and_ignored_pruned():
    tree = MemoryPathEntry.from_paths(["/p/a/b/c.txt", "/p/a/skip/inner.txt", "/p/a/d.o"])
    candidates = [
        tree.find(path)
        for path in ("/p/a", "/p/a/b", "/p/a/b/c.txt", "/p/a/skip", "/p/a/skip/inner.txt", "/p/a/d.o")
    ]
    forest = assemble_forest(candidates, lambda entry: entry.name in ("skip", "d.o"))
    assert PathsOutputStrategy().render(forest) == "/p/a\n/p/a/b\n/p/a/b/c.txt\n"


def test_empty_forest_renders_nothing():
    assert PathsOutputStrategy().render(assemble_forest([])) == ""


@pytest.mark.parametrize(
    "output_format,expected_type",
    [
        ("tree", TreeOutputStrategy),
        ("json", JSONOutputStrategy),
        ("paths", PathsOutputStrategy),
        (AddFormat.JSON, JSONOutputStrategy),
    ],
)
def test_get_output_strategy(output_format, expected_type):
    assert isinstance(get_output_strategy(output_format), expected_type)


def test_get_output_strategy_unknown_format():
    with pytest.raises(ValueError):
        get_output_strategy("xml")
