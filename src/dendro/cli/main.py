"""Command-line interface for dendro.

This module wires parsed command-line arguments to the tree builder, renderer
and statistics helpers and prints the result.

Exit Codes:
    0: Successful completion (including a tree that is empty after filtering)
    1: The root path cannot be read, or a runtime error occurred
    2: Command-line syntax error (including an invalid regular expression)
    126: Permission denied with -P fail
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (e.g. when piping to `head`)

Example:
    # Show the tree of a directory, three levels deep
    $ dendro -d 3 /path/to/dir

    # Display version information
    $ dendro --version
"""

import argparse
import logging
import os
import sys

from dendro.cli.argparser import collect_exclude_patterns, create_parser
from dendro.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dendro.file_system_tree.file_system_tree import TreeOptions, build_tree
from dendro.file_system_tree.permission_action import PermissionAction
from dendro.file_system_tree.tree_renderer import RenderOptions, render_tree
from dendro.file_system_tree.tree_stats import TreeStats, get_tree_stats

logger = logging.getLogger(__name__)

TREE_ICON = "🌳"


def format_stats(stats: TreeStats) -> str:
    """Format the counts into a human-readable summary line.

    Args:
        stats: Counts of a built tree.

    Returns:
        A line such as "3 directories, 12 files".
    """
    return f"{stats.directories} directories, {stats.files} files"


def configure_logging(args: argparse.Namespace) -> None:
    """Send library diagnostics to stderr at a level chosen by the arguments."""
    if args.verbose:
        level = logging.DEBUG
    elif args.permission_action == "ignore":
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def is_readable(path: str) -> bool:
    return os.path.exists(path) and os.access(path, os.R_OK)


def main() -> None:
    """Main entry point for the dendro command-line interface.

    Exit codes:
        0: Successful completion
        1: Unreadable root or runtime error
        2: Command-line syntax error
        126: Permission denied with -P fail
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe
    """
    try:
        ignore_rules = GitIgnoreExclusionRules()
        parser = create_parser(ignore_rules)
        args = parser.parse_args()

        configure_logging(args)

        root_path = os.path.abspath(args.path)
        options = TreeOptions(
            max_depth=args.max_depth or None,
            show_hidden=args.all,
            exclude_patterns=collect_exclude_patterns(args),
            exclusion_rules=ignore_rules if ignore_rules.has_rules() else None,
            dirs_only=args.dirs_only,
            permission_action=PermissionAction.RAISE if args.permission_action == "fail" else PermissionAction.IGNORE,
        )

        try:
            tree = build_tree(root_path, options)
        except PermissionError as e:
            print(f"Error: {str(e)}", file=sys.stderr)
            sys.exit(126)

        if tree is None and not is_readable(root_path):
            print(f"Error: Could not read directory {root_path}", file=sys.stderr)
            sys.exit(1)

        print(f"\n{TREE_ICON} Directory Tree: {root_path}\n")
        if tree is None:
            logger.info("Nothing to display for %s", root_path)
        else:
            print(render_tree(tree, RenderOptions(show_icons=args.icons, show_paths=args.show_paths)))

        if args.stats:
            print("\n" + format_stats(get_tree_stats(tree)))
        print()

        sys.stdout.flush()

    except BrokenPipeError:
        # Python flushes stdout again at exit; point it at the null device first
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
