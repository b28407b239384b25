"""Start-page content shown when a session begins.

Rendering helpers here are presentation-only and side-effect free.
"""

from __future__ import annotations

from .ui_theme import DEFAULT_THEME, UITheme

START_PAGE_RULE = "-" * 57

START_PAGE_COMMANDS: tuple[tuple[str, str], ...] = (
    ("ls", "List the files and folders in the current directory."),
    ("print", "Show the entire directory structure recursively."),
    ("ignore <file(s)>", "Ignore specified files or folders."),
    ("unignore <file>", "Remove the specified file or folder from the ignore list."),
    ("print ignore", "Show the currently ignored files."),
    ("clear ignore", "Clear the ignore list."),
    ("..", "Go up one directory."),
    ("<drive>:", "Switch to another drive (e.g. D:)."),
    ("Tab", "Complete a folder name and move into it."),
    ("exit", "Exit the program."),
)

START_BROWSING_HINT = "Start browsing your file system. Type a drive letter or directory name."


def render_start_page(theme: UITheme | None = None) -> list[str]:
    """Return start-page lines styled with ``theme``."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    width = max(len(key) for key, _desc in START_PAGE_COMMANDS) + 1
    lines = [
        f"{active_theme.help_dim}{START_PAGE_RULE}{reset}",
        f"{active_theme.help_heading}Welcome to the File System Explorer!{reset}",
        "Here are the available commands:",
        "",
    ]
    for key, description in START_PAGE_COMMANDS:
        lines.append(f"  {active_theme.help_key}{key.ljust(width)}{reset}- {description}")
    lines.extend(
        [
            "",
            f"{active_theme.help_dim}{START_PAGE_RULE}{reset}",
            "Enjoy exploring your file system! Type a command to begin.",
        ]
    )
    return lines


__all__ = [
    "START_BROWSING_HINT",
    "START_PAGE_COMMANDS",
    "START_PAGE_RULE",
    "render_start_page",
]
