"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the listing, gutter, header and help pane.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    header_path: str
    status_error: str
    tree_dir: str
    tree_file_default: str
    tree_symlink: str
    tree_size: str
    line_number: str
    line_filler: str
    help_key: str
    help_text: str
    help_border: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    header_path="\033[1;38;5;81m",
    status_error="\033[38;5;203m",
    tree_dir="\033[1;33m",
    tree_file_default="\033[2;34m",
    tree_symlink="\033[36m",
    tree_size="\033[38;5;109m",
    line_number="\033[2;37m",
    line_filler="\033[2;35m",
    help_key="\033[31m",
    help_text="\033[34m",
    help_border="\033[90m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    header_path="\033[1;38;5;45m",
    status_error="\033[38;5;215m",
    tree_dir="\033[1;38;5;45m",
    tree_file_default="\033[38;5;252m",
    tree_symlink="\033[38;5;117m",
    tree_size="\033[38;5;73m",
    line_number="\033[2;38;5;110m",
    line_filler="\033[2;38;5;24m",
    help_key="\033[38;5;153m",
    help_text="\033[2;38;5;110m",
    help_border="\033[2;38;5;31m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    header_path="",
    status_error="",
    tree_dir="",
    tree_file_default="",
    tree_symlink="",
    tree_size="",
    line_number="",
    line_filler="",
    help_key="",
    help_text="",
    help_border="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
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
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
