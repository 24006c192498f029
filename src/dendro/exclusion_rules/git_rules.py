"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from dendro.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    This class uses the pathspec library to match entry names against patterns the
    same way Git does. The rules support the standard .gitignore syntax:
    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Directory-only patterns (ending in /)
    - Negation patterns (starting with !)
    - Comment lines (starting with #)

    Names are matched one path component at a time, since the tree builder checks
    each entry by its base name. Directories are matched with a trailing slash so
    that directory-only patterns such as ``build/`` apply to them and not to a file
    named ``build``.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("build/")
        >>> rules.exclude("build", is_dir=True)
        True
        >>> rules.exclude("build", is_dir=False)
        False
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("app.log")
        True
        >>> rules.exclude("keep.log")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreExclusionRules with patterns from specified files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.
                Can be a single path-like object or a sequence of path-like objects.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._patterns: List[GitWildMatchPattern] = []
        self.spec = PathSpec(self._patterns)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, name: str, is_dir: bool = False) -> bool:
        """Check if an entry should be excluded based on the loaded .gitignore patterns.

        Args:
            name: Base name of the entry.
            is_dir: Whether the entry is a directory.

        Returns:
            True if the last pattern matching the name is a non-negated one.
        """
        return self.spec.match_file(f"{name}/" if is_dir else name)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and append .gitignore patterns from one or more files.

        Patterns are processed in the order they are added, with later patterns
        potentially overriding earlier ones (negation with !).

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                lines = f.read().splitlines()

            self._extend(PathSpec.from_lines(GitWildMatchPattern, lines).patterns)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern directly.

        Args:
            rule: A single .gitignore pattern (e.g. "*.pyc", "node_modules/", "!important.txt").
        """
        self._extend([GitWildMatchPattern(rule)])

    def has_rules(self) -> bool:
        # Comments and blank lines compile to patterns with include=None
        return any(pattern.include is not None for pattern in self._patterns)

    def _extend(self, patterns: Sequence[GitWildMatchPattern]) -> None:
        self._patterns.extend(patterns)
        self.spec = PathSpec(self._patterns)
