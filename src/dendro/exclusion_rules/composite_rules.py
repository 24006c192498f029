"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    A name is excluded if ANY of the constituent rules excludes it. Rules are
    consulted in the order given and evaluation stops at the first match, which is
    how regular-expression patterns and gitignore globs are combined into the single
    predicate used by the tree builder.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from dendro.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> from dendro.exclusion_rules.regex_rules import RegexExclusionRules
        >>> globs = GitIgnoreExclusionRules()
        >>> globs.add_rule("*.pyc")
        >>> composite = CompositeExclusionRules([RegexExclusionRules([r"^dist$"]), globs])
        >>> composite.exclude("dist", is_dir=True)
        True
        >>> composite.exclude("module.pyc")
        True
        >>> composite.exclude("module.py")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine.

        Raises:
            ValueError: If the rules sequence is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, name: str, is_dir: bool = False) -> bool:
        """Check if a name should be excluded by any constituent rule.

        Args:
            name: Base name of the entry.
            is_dir: Whether the entry is a directory.

        Returns:
            True if ANY constituent rule excludes the entry.
        """
        return any(rule.exclude(name, is_dir) for rule in self.rules)

    def has_rules(self) -> bool:
        """Check if any constituent rule has rules configured."""
        return any(rule.has_rules() for rule in self.rules)
