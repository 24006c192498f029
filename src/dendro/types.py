from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class NodeType(Enum):
    """Enumeration of the entry kinds a tree node can represent.

    Attributes:
        FILE: Anything that is not a directory (regular files, devices, sockets, ...)
        DIRECTORY: Directory
    """

    FILE = "file"
    DIRECTORY = "directory"
