from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    An exclusion rule is a predicate on an entry's base name: the tree builder asks
    every configured rule whether a file or directory should be left out of the
    tree. A directory that is excluded is never listed, so nothing beneath it is
    visited. Individual rule addition is an optional capability that depends on the
    rule type.

    Example:
        >>> from dendro.exclusion_rules.regex_rules import RegexExclusionRules
        >>> rules = RegexExclusionRules([r"^node_modules$"])
        >>> rules.exclude("node_modules", is_dir=True)
        True
        >>> rules.exclude("src", is_dir=True)
        False
        >>>
        >>> from dendro.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule("*.pyc")
        >>> git_rules.exclude("test.pyc")
        True
    """

    @abstractmethod
    def exclude(self, name: str, is_dir: bool = False) -> bool:
        """
        Determine if an entry should be excluded based on the configured rules.

        Args:
            name (str): The base name of the file or directory (not a full path).
            is_dir (bool): Whether the entry is a directory. Rule types whose syntax
                distinguishes directories (e.g. gitignore's trailing slash) use this.

        Returns:
            bool: True if the entry should be excluded, False if it should be included.

        Example:
            >>> class TmpExclusionRules(BaseExclusionRules):
            ...     def exclude(self, name: str, is_dir: bool = False) -> bool:
            ...         return not is_dir and name.endswith(".tmp")
            >>> rules = TmpExclusionRules()
            >>> rules.exclude("scratch.tmp")
            True
            >>> rules.exclude("scratch.tmp", is_dir=True)
            False
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        This method may be overridden by subclasses that support programmatic rule
        addition. Rule types that don't support it use this default implementation.

        Args:
            rule (str): The exclusion rule to add. The format depends on the specific
                implementation (a regular expression, a gitignore pattern like "*.pyc").

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def has_rules(self) -> bool:
        """
        Check whether any rule is configured.

        Returns:
            bool: True by default; subclasses that can be empty override this.
        """
        return True
