"""Tree colour themes and selection helpers.

Themes are ANSI palettes keyed by content category. ``--no-color`` selects
the plain theme, whose codes are all empty.
"""

from __future__ import annotations

from dataclasses import dataclass

from .content_types import ContentCategory


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the tree renderer and summary box."""

    name: str
    reset: str
    tree_dir: str
    tree_branch: str
    tree_counts: str
    file_code: str
    file_media: str
    file_executable: str
    file_text: str
    file_license: str
    file_makefile: str
    file_normal: str
    summary_border: str

    def file_color(self, category: ContentCategory) -> str:
        """Return the colour for file names of ``category``."""
        return {
            ContentCategory.CODE: self.file_code,
            ContentCategory.MEDIA: self.file_media,
            ContentCategory.EXECUTABLE: self.file_executable,
            ContentCategory.TEXT: self.file_text,
            ContentCategory.LICENSE: self.file_license,
            ContentCategory.MAKEFILE: self.file_makefile,
            ContentCategory.NORMAL: self.file_normal,
        }[category]


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    tree_dir="\033[1;34m",
    tree_branch="",
    tree_counts="",
    file_code="\033[36m",
    file_media="\033[95m",
    file_executable="\033[32m",
    file_text="\033[38;2;217;50;122m",
    file_license="\033[38;2;0;0;255m",
    file_makefile="\033[31m",
    file_normal="",
    summary_border="",
)

MUTED_THEME = UITheme(
    name="muted",
    reset="\033[0m",
    tree_dir="\033[1;38;5;110m",
    tree_branch="\033[2m",
    tree_counts="\033[38;5;109m",
    file_code="\033[38;5;117m",
    file_media="\033[38;5;176m",
    file_executable="\033[38;5;114m",
    file_text="\033[38;5;181m",
    file_license="\033[38;5;75m",
    file_makefile="\033[38;5;174m",
    file_normal="\033[38;5;252m",
    summary_border="\033[2m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    tree_dir="",
    tree_branch="",
    tree_counts="",
    file_code="",
    file_media="",
    file_executable="",
    file_text="",
    file_license="",
    file_makefile="",
    file_normal="",
    summary_border="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    MUTED_THEME.name: MUTED_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "MUTED_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
