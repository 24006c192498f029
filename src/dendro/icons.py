"""Icon classification for files and directories.

Icons are resolved from two read-only lookup tables built at import time: an
exact filename table for well-known files and an extension table grouped by
file category. Exact filename matches always take precedence over extensions.

Example:
    >>> get_icon("src", is_dir=True) == ICONS["directory"]
    True
    >>> get_icon("package-lock.json", is_dir=False) == ICONS["lock"]
    True
    >>> get_icon("data.json", is_dir=False) == ICONS["json"]
    True
    >>> get_icon("unknown.xyz", is_dir=False) == ICONS["default"]
    True
"""

import os
from types import MappingProxyType
from typing import Mapping

ICONS: Mapping[str, str] = MappingProxyType(
    {
        "directory": "📁",
        "javascript": "📜",
        "typescript": "📘",
        "python": "🐍",
        "json": "📋",
        "markdown": "📝",
        "text": "📄",
        "image": "🖼️",
        "video": "🎬",
        "audio": "🎵",
        "pdf": "📕",
        "archive": "🗜️",
        "executable": "⚙️",
        "config": "⚙️",
        "css": "🎨",
        "html": "🌐",
        "database": "🗄️",
        "lock": "🔒",
        "git": "📦",
        "default": "📄",
    }
)

# Keys are lower-case and include the leading dot, as returned by os.path.splitext
EXTENSION_ICONS: Mapping[str, str] = MappingProxyType(
    {
        # Code
        ".js": ICONS["javascript"],
        ".jsx": ICONS["javascript"],
        ".mjs": ICONS["javascript"],
        ".cjs": ICONS["javascript"],
        ".ts": ICONS["typescript"],
        ".tsx": ICONS["typescript"],
        ".py": ICONS["python"],
        ".pyi": ICONS["python"],
        ".pyw": ICONS["python"],
        # Data and configuration
        ".json": ICONS["json"],
        ".yaml": ICONS["config"],
        ".yml": ICONS["config"],
        ".xml": ICONS["config"],
        ".toml": ICONS["config"],
        ".ini": ICONS["config"],
        # Markup and documents
        ".md": ICONS["markdown"],
        ".mdx": ICONS["markdown"],
        ".txt": ICONS["text"],
        ".pdf": ICONS["pdf"],
        # Web
        ".html": ICONS["html"],
        ".htm": ICONS["html"],
        ".css": ICONS["css"],
        ".scss": ICONS["css"],
        ".sass": ICONS["css"],
        ".less": ICONS["css"],
        # Images
        ".png": ICONS["image"],
        ".jpg": ICONS["image"],
        ".jpeg": ICONS["image"],
        ".gif": ICONS["image"],
        ".svg": ICONS["image"],
        ".webp": ICONS["image"],
        ".ico": ICONS["image"],
        ".bmp": ICONS["image"],
        # Video
        ".mp4": ICONS["video"],
        ".avi": ICONS["video"],
        ".mov": ICONS["video"],
        ".mkv": ICONS["video"],
        ".webm": ICONS["video"],
        # Audio
        ".mp3": ICONS["audio"],
        ".wav": ICONS["audio"],
        ".ogg": ICONS["audio"],
        ".m4a": ICONS["audio"],
        ".flac": ICONS["audio"],
        # Archives
        ".zip": ICONS["archive"],
        ".tar": ICONS["archive"],
        ".gz": ICONS["archive"],
        ".rar": ICONS["archive"],
        ".7z": ICONS["archive"],
        # Databases
        ".db": ICONS["database"],
        ".sqlite": ICONS["database"],
        ".sql": ICONS["database"],
        # Executables and scripts
        ".exe": ICONS["executable"],
        ".sh": ICONS["executable"],
        ".bat": ICONS["executable"],
        ".cmd": ICONS["executable"],
        # Lock files
        ".lock": ICONS["lock"],
    }
)

# Case-sensitive, matched against the full base name
FILENAME_ICONS: Mapping[str, str] = MappingProxyType(
    {
        ".gitignore": ICONS["git"],
        ".gitattributes": ICONS["git"],
        ".gitmodules": ICONS["git"],
        "package.json": ICONS["json"],
        "package-lock.json": ICONS["lock"],
        "yarn.lock": ICONS["lock"],
        "pnpm-lock.yaml": ICONS["lock"],
        "poetry.lock": ICONS["lock"],
        ".env": ICONS["config"],
        ".env.local": ICONS["config"],
        ".env.development": ICONS["config"],
        ".env.production": ICONS["config"],
        "Dockerfile": ICONS["config"],
        "docker-compose.yml": ICONS["config"],
        "README.md": ICONS["markdown"],
    }
)


def get_icon(name: str, is_dir: bool) -> str:
    """Return the display icon for a file or directory name.

    Args:
        name: Base name of the entry (not a full path).
        is_dir: Whether the entry is a directory. Directories always get the
            directory icon, whatever their name.

    Returns:
        The icon string. Names matching neither table get ``ICONS["default"]``.
    """
    if is_dir:
        return ICONS["directory"]

    if name in FILENAME_ICONS:
        return FILENAME_ICONS[name]

    extension = os.path.splitext(name)[1].lower()
    return EXTENSION_ICONS.get(extension, ICONS["default"])
