"""Permission action enum for handling read errors during directory traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when an entry cannot be read during directory traversal.

    Values:
        IGNORE: Log a warning and prune the unreadable entry from the tree (default behavior)
        RAISE: Re-raise the underlying OSError immediately
    """

    IGNORE = "ignore"
    RAISE = "raise"
