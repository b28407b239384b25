"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the prompt, tree rows, and help text. The plain
theme carries empty codes and is used whenever color is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the console."""

    name: str
    reset: str
    prompt: str
    path: str
    tree_dir: str
    tree_file: str
    tree_empty: str
    heading: str
    error: str
    notice: str
    help_heading: str
    help_key: str
    help_dim: str

    def color_for_kind(self, kind: str) -> str:
        """Return the color used for a rendered row of ``kind``."""
        return {
            "dir": self.tree_dir,
            "file": self.tree_file,
            "empty": self.tree_empty,
            "error": self.error,
            "heading": self.heading,
        }.get(kind, "")


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    prompt="\033[1;38;5;81m",
    path="\033[38;5;229m",
    tree_dir="\033[1;34m",
    tree_file="\033[38;5;252m",
    tree_empty="\033[2;38;5;250m",
    heading="\033[1;38;5;81m",
    error="\033[38;5;203m",
    notice="\033[38;5;42m",
    help_heading="\033[1;38;5;81m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    prompt="\033[1;38;5;45m",
    path="\033[38;5;153m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;252m",
    tree_empty="\033[2;38;5;110m",
    heading="\033[1;38;5;45m",
    error="\033[38;5;215m",
    notice="\033[38;5;84m",
    help_heading="\033[1;38;5;45m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    prompt="",
    path="",
    tree_dir="",
    tree_file="",
    tree_empty="",
    heading="",
    error="",
    notice="",
    help_heading="",
    help_key="",
    help_dim="",
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
