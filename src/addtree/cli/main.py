"""Command-line interface for addtree.

This module provides the ``addtree`` command, which plans the entries a CVS add has
to register for a set of selected files and directories and prints the plan as a
tree diagram, a JSON document or a plain list of paths.

Exit Codes:
    0: Successful completion, including when there is nothing to add
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # Show what adding a new directory would register
    $ addtree src/newmodule

    # Feed the paths to cvs, parents first
    $ addtree -f paths src/newmodule | xargs cvs add
"""

import logging
import sys
from typing import List, Optional

from addtree.add_tree.add_forest import AddForest
from addtree.cli.argparser import create_parser, validate_args
from addtree.oracles.pattern_rules import PatternIgnoreRules
from addtree.oracles.vcs_oracles import VcsOracles
from addtree.output_strategies import get_output_strategy
from addtree.path_entry.local_path_entry import LocalPathEntry
from addtree.planner import AddPlanner

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr at a level chosen by the number of -v flags."""
    level = LOG_LEVELS[min(verbosity, len(LOG_LEVELS) - 1)]
    logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s", stream=sys.stderr)


def format_summary(forest: AddForest) -> str:
    """Summarize a plan as one line for stderr."""
    return (
        f"Roots: {len(forest.roots)}, Directories: {forest.directory_count}, Files: {forest.file_count}, "
        f"To add: {forest.included_count}, Ignored: {forest.ignored_count}"
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the addtree command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
    """
    try:
        # Populated by -e/-i while the arguments are parsed
        user_rules = PatternIgnoreRules()

        parser = create_parser(user_rules)
        args = parser.parse_args(argv)
        configure_logging(args.verbose)

        validate_args(args)

        oracles = VcsOracles.for_cvs(
            args.root,
            extra_rules=[user_rules] if user_rules.has_rules() else None,
            admin_dirs=args.admin_dir,
            use_default_ignores=not args.no_default_ignores,
            cvsignore_files=args.cvsignore,
        )
        planner = AddPlanner(oracles)
        forest = planner.plan([LocalPathEntry(path) for path in args.paths])

        if not planner.has_work(forest):
            print("Nothing to add.", file=sys.stderr)
            if not forest:
                return

        output = get_output_strategy(args.format).render(forest)
        if args.output:
            with open(args.output, "w") as f:
                f.write(output)
        else:
            sys.stdout.write(output)

        if args.verbose:
            print(format_summary(forest), file=sys.stderr)

    except KeyboardInterrupt:
        sys.exit(130)
    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
