"""Implementation of exclusion rules using regular expressions."""

import re
from typing import List, Optional, Pattern, Sequence, Union

from dendro.exceptions import InvalidPatternError

from .base_rules import BaseExclusionRules

PatternType = Union[str, Pattern[str]]


class RegexExclusionRules(BaseExclusionRules):
    """Exclusion rules matching entry names against regular expressions.

    Each pattern is searched (``re.search``) anywhere in the entry's base name, so
    anchors are needed for whole-name matches: ``^dist$`` excludes ``dist`` but not
    ``distribution``, while ``dist`` excludes both. Patterns are tested in the order
    they were added and the first match excludes the entry.

    Patterns given as strings are compiled immediately, so a malformed pattern is
    reported when the rules are created rather than in the middle of a traversal.

    Attributes:
        patterns (List[Pattern[str]]): The compiled patterns, in insertion order.

    Example:
        >>> rules = RegexExclusionRules([r"^node_modules$", r"\\.log$"])
        >>> rules.exclude("node_modules", is_dir=True)
        True
        >>> rules.exclude("server.log")
        True
        >>> rules.exclude("logger.py")
        False
        >>> RegexExclusionRules(["[unclosed"])
        Traceback (most recent call last):
            ...
        dendro.exceptions.InvalidPatternError: Invalid exclusion pattern '[unclosed': unterminated character set at position 0
    """

    def __init__(self, patterns: Optional[Sequence[PatternType]] = None):
        """Initialize RegexExclusionRules with an optional sequence of patterns.

        Args:
            patterns: Regular expressions as strings or pre-compiled pattern objects.

        Raises:
            InvalidPatternError: If any string pattern is not a valid regular expression.
        """
        self.patterns: List[Pattern[str]] = []
        for pattern in patterns or ():
            self.add_rule(pattern)

    def exclude(self, name: str, is_dir: bool = False) -> bool:
        """Check if a name matches any of the configured patterns.

        Args:
            name: Base name of the entry.
            is_dir: Unused; regular expressions apply to files and directories alike.

        Returns:
            True if any pattern is found in the name.
        """
        return any(pattern.search(name) for pattern in self.patterns)

    def add_rule(self, rule: PatternType) -> None:  # type: ignore[override]
        """Compile and append a single pattern.

        Args:
            rule: A regular expression string or a compiled pattern.

        Raises:
            InvalidPatternError: If the string pattern does not compile.
        """
        if isinstance(rule, str):
            try:
                rule = re.compile(rule)
            except re.error as e:
                raise InvalidPatternError(rule, str(e)) from e
        self.patterns.append(rule)

    def has_rules(self) -> bool:
        return bool(self.patterns)
