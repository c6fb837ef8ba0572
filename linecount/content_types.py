"""Content-category classification for file names.

Categories only drive tree colouring; they never affect counting.
Lookup tables are immutable sets built once at import time.
"""

from __future__ import annotations

import stat
from enum import Enum
from pathlib import Path


class ContentCategory(Enum):
    """Display-only classification of a file's likely purpose."""

    CODE = "code"
    MEDIA = "media"
    EXECUTABLE = "executable"
    TEXT = "text"
    LICENSE = "license"
    MAKEFILE = "makefile"
    NORMAL = "normal"


CODE_EXTENSIONS = frozenset(
    {
        "c", "h", "cpp", "hpp", "cc", "cxx", "hh", "hxx", "cs", "java", "class", "jar", "kt", "kts",
        "js", "jsx", "mjs", "cjs", "ts", "tsx", "py", "pyc", "pyd", "pyo", "rb", "erb",
        "php", "phar", "go", "rs", "rlib", "swift", "dart", "scala", "lua", "r", "pl", "pm", "sql",
        "html", "htm", "xhtml", "xml", "css", "scss", "sass", "json", "yaml", "yml", "toml",
        "env", "ini", "cfg", "md", "rst", "cmake", "mk", "dockerfile", "dockerignore",
        "gitignore", "gitattributes",
    }
)

MEDIA_EXTENSIONS = frozenset(
    {
        "png", "jpg", "jpeg", "gif", "bmp", "tiff", "tif", "webp", "svg", "ico", "heic", "avif",
        "mp3", "wav", "flac", "aac", "ogg", "opus", "m4a", "wma", "aiff", "alac", "amr",
        "mp4", "mkv", "avi", "mov", "wmv", "flv", "webm", "m4v", "mpeg", "mpg", "3gp", "ogv",
    }
)

EXECUTABLE_EXTENSIONS = frozenset(
    {
        "exe", "bat", "cmd", "msi", "run", "out", "bin", "app", "jar", "sh", "bash", "zsh",
        "ps1", "psm1", "psd1",
    }
)

TEXT_EXTENSIONS = frozenset({"txt", "md", "rtf", "csv", "log", "pdf", "doc", "docx", "odt", "tex", "pages"})

ANY_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def extension_of(name: str) -> str:
    """Return lower-cased extension without the dot, or ``""`` when absent.

    Dot-files such as ``.gitignore`` have no extension.
    """
    return Path(name).suffix[1:].lower()


def classify(name: str, mode: int = 0) -> ContentCategory:
    """Return the content category for a file ``name`` with permission ``mode``.

    Extension rules apply only when the name has an extension; the
    executable bit alone never promotes an extension-less name.
    """
    ext = extension_of(name)
    if ext:
        if ext in CODE_EXTENSIONS:
            return ContentCategory.CODE
        if ext in MEDIA_EXTENSIONS:
            return ContentCategory.MEDIA
        if ext in EXECUTABLE_EXTENSIONS or (mode & ANY_EXECUTE_BITS and ext not in TEXT_EXTENSIONS):
            return ContentCategory.EXECUTABLE
        if ext in TEXT_EXTENSIONS:
            return ContentCategory.TEXT

    if name == "LICENSE":
        return ContentCategory.LICENSE
    if name == "Makefile":
        return ContentCategory.MAKEFILE
    return ContentCategory.NORMAL


def is_visible(name: str) -> bool:
    """Return whether ``name`` is shown in rendered trees (not a dot-file)."""
    return not name.startswith(".")


__all__ = [
    "ContentCategory",
    "CODE_EXTENSIONS",
    "MEDIA_EXTENSIONS",
    "EXECUTABLE_EXTENSIONS",
    "TEXT_EXTENSIONS",
    "extension_of",
    "classify",
    "is_visible",
]
