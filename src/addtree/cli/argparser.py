"""Command-line argument parsing for addtree.

This module defines the command-line interface for addtree,
handling argument parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from addtree import __version__
from addtree.oracles.base_rules import BaseIgnoreRules
from addtree.types import AddFormat


def create_ignore_action(ignore_rules: BaseIgnoreRules) -> Type[argparse.Action]:
    """Create an action class that feeds ignore options into ``ignore_rules``.

    Files (-e/--exclude) and single patterns (-i/--ignore) are applied in the order
    they appear on the command line, so a later ``!pattern`` can re-include what an
    earlier file ignored.

    Args:
        ignore_rules: The rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class IgnoreRulesAction(argparse.Action):
        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return
            if option_string in ("-e", "--exclude"):
                try:
                    ignore_rules.load_rules(values if isinstance(values, (str, os.PathLike)) else Path(str(values)))
                except FileNotFoundError as e:
                    parser.error(str(e))
            else:
                ignore_rules.add_rule(str(values))

            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return IgnoreRulesAction


def create_parser(ignore_rules: BaseIgnoreRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        ignore_rules: The user ignore rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with addtree's options.
    """
    description = """
    addtree: Plan which files and directories a CVS add has to register.

    Given files and directories inside a CVS working copy, addtree works out every
    entry that has to be added: the selected entries with all of their contents, and
    the untracked directories between them and the nearest directory CVS already
    knows. CVS admin directories are never included. Entries matched by ignore rules
    are listed but flagged, and are left out of the path list.

    Nothing is modified and no cvs command is run.
    """

    epilog = """
    Examples:
      # Show the add plan for a new directory
      addtree src/newmodule

      # Print only the paths to add, parents first, for use with xargs
      addtree -f paths src/newmodule | xargs cvs add

      # Additional ignore rules in .gitignore syntax
      addtree -e .addignore -i "*.tmp" -i "!keep.tmp" src

      # JSON plan written to a file
      addtree -f json -o plan.json src
    """

    parser = argparse.ArgumentParser(
        prog="addtree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"addtree {__version__}", help="Show the version and exit"
    )

    IgnoreAction = create_ignore_action(ignore_rules)

    parser.add_argument(
        "paths",
        type=Path,
        nargs="+",
        metavar="PATH",
        help="Files or directories to add.",
    )
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=Path.cwd(),
        metavar="DIR",
        help="Working-copy root that ignore patterns are relative to (default: current directory).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=IgnoreAction,
        help="File of gitignore-style ignore patterns (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=IgnoreAction,
        help=(
            "Individual gitignore-style ignore pattern. Can be specified multiple times; patterns are "
            "processed in the order they appear, mixed with -e/--exclude options."
        ),
    )
    parser.add_argument(
        "--cvsignore",
        type=Path,
        metavar="FILE",
        action="append",
        help="Global CVS ignore file, as ~/.cvsignore (can be specified multiple times).",
    )
    parser.add_argument(
        "--no-default-ignores",
        action="store_true",
        help="Do not apply CVS's built-in ignore list or the file-type ignore list.",
    )
    parser.add_argument(
        "-a",
        "--admin-dir",
        metavar="NAME",
        action="append",
        help="Name of the version-control admin directory (default: CVS). Can be specified multiple times.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[f.value for f in AddFormat],
        default=AddFormat.TREE.value,
        help="Output format (default: tree).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output on stderr (-v for info, -vv for debug).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse checks.

    Raises:
        FileNotFoundError: If a selected path or the root does not exist.
        NotADirectoryError: If the root is not a directory.
    """
    for path in args.paths:
        if not os.path.lexists(path):
            raise FileNotFoundError(f"Path does not exist: {path}")
    if not args.root.exists():
        raise FileNotFoundError(f"Root path does not exist: {args.root}")
    if not args.root.is_dir():
        raise NotADirectoryError(f"Root path is not a directory: {args.root}")
