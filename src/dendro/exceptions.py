class InvalidPatternError(ValueError):
    """
    Exception raised when an exclusion pattern cannot be compiled.

    This exception is raised while tree options are being constructed, before any
    directory is visited, so a bad pattern never produces a partially built tree.

    Attributes:
        pattern (str): The pattern source that failed to compile.

    Example:
        >>> error = InvalidPatternError("[unclosed", "unterminated character set")
        >>> str(error)
        "Invalid exclusion pattern '[unclosed': unterminated character set"
        >>> error.pattern
        '[unclosed'
    """

    def __init__(self, pattern: str, reason: str) -> None:
        """
        Initialize the exception with the offending pattern.

        Args:
            pattern (str): The pattern that failed to compile.
            reason (str): Why compilation failed, usually the message of the underlying re.error.
        """
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid exclusion pattern '{pattern}': {reason}")
