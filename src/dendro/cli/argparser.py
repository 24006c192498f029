"""Command-line argument parsing for dendro.

This module defines the command-line interface for dendro,
handling argument parsing and validation.
"""

import argparse
import re
from pathlib import Path
from typing import Any, List, Optional, Pattern, Sequence, Type, Union

from dendro import __version__
from dendro.exclusion_rules.base_rules import BaseExclusionRules

# Appended to the user's exclusions unless -a/--all is given
DEFAULT_EXCLUDE_PATTERNS = (
    r"^node_modules$",
    r"^\.git$",
    r"^\.DS_Store$",
    r"^dist$",
    r"^build$",
    r"^coverage$",
)


def non_negative_int(value: str) -> int:
    """Argument type for depth limits."""
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: '{value}' is not an integer")
    if depth < 0:
        raise argparse.ArgumentTypeError(f"invalid depth: {depth} is negative")
    return depth


def regex_pattern(value: str) -> Pattern[str]:
    """Argument type compiling a regular expression, so bad patterns are usage errors."""
    try:
        return re.compile(value)
    except re.error as e:
        raise argparse.ArgumentTypeError(f"invalid regular expression '{value}': {e}")


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling gitignore-style exclusion rules.

    This factory function creates an action class that will update the provided
    exclusion rules object as arguments are processed. This preserves the exact
    order of -i/--ignore patterns and --ignore-file files as they appear on the
    command line, which matters for negated patterns.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action to update exclusion rules as arguments are processed."""

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

            if option_string == "--ignore-file":
                exclusion_rules.load_rules(Path(str(values)))  # type: ignore[attr-defined]
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            # Keep the raw values on the namespace as well
            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The gitignore-style rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with dendro's options.
    """
    description = """
    dendro: display a directory tree with file type icons.

    Every entry is labelled with an icon for its type (source code, data, images,
    archives, lock files, ...). Directories are listed before files and both are
    sorted by name. A summary of directory and file counts follows the tree.

    Hidden entries (names starting with '.') and common build artifacts
    (node_modules, .git, .DS_Store, dist, build, coverage) are left out unless
    -a/--all is given.
    """

    epilog = """
    Examples:
      # Show the tree of the current directory
      dendro

      # Limit the tree to the root and two levels below it
      dendro -d 3 /path/to/project

      # Include hidden files and build artifacts
      dendro -a /path/to/project

      # Exclude names matching regular expressions
      dendro -e "^tmp$" -e "\\.log$" /path/to/project

      # Exclude with gitignore-style patterns or files
      dendro -i "*.pyc" -i "cache/" --ignore-file .gitignore /path/to/project

      # Directories only, plain text, with absolute paths
      dendro -D --no-icons -p /path/to/project

      # Report unreadable entries, or stop at the first one
      dendro -P warn /path/to/project
      dendro -P fail /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="dendro",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dendro {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Directory to display (default: the current directory).",
    )
    parser.add_argument(
        "-d",
        "--max-depth",
        type=non_negative_int,
        metavar="N",
        help="Maximum number of levels to display, the root being the first; 0 means no limit (default: no limit).",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Show hidden files and directories, and do not apply the default exclusions.",
    )
    parser.add_argument(
        "-D",
        "--dirs-only",
        action="store_true",
        help="List directories only.",
    )
    parser.add_argument(
        "--no-icons",
        dest="icons",
        action="store_false",
        help="Disable file type icons.",
    )
    parser.add_argument(
        "-p",
        "--show-paths",
        action="store_true",
        help="Show the absolute path of every entry.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=regex_pattern,
        metavar="REGEX",
        action="append",
        default=[],
        help="Exclude entries whose name matches a regular expression (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Exclude entries matching a gitignore-style pattern such as '*.pyc', 'build/' or '!keep.log'. "
            "Can be specified multiple times; patterns apply in the order given, mixed with --ignore-file."
        ),
    )
    parser.add_argument(
        "--ignore-file",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Read gitignore-style patterns from FILE (can be specified multiple times).",
    )
    parser.add_argument(
        "--no-stats",
        dest="stats",
        action="store_false",
        help="Hide the directory and file count summary.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="warn",
        help="How to handle unreadable entries: skip silently, skip with a warning, or stop (default: warn).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every excluded entry and other debugging details to stderr.",
    )

    return parser


def collect_exclude_patterns(args: argparse.Namespace) -> List[Pattern[str]]:
    """Combine the user's -e/--exclude patterns with the default exclusions.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Compiled patterns in the order they are to be tested.
    """
    patterns = list(args.exclude)
    if not args.all:
        patterns.extend(re.compile(pattern) for pattern in DEFAULT_EXCLUDE_PATTERNS)
    return patterns
