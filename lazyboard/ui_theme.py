"""UI theme definitions and selection helpers.

Themes are ANSI palettes for tree rows: arrows, status glyphs and labels.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    default_text: str
    green: str
    yellow: str
    red: str
    cyan: str
    magenta: str
    unstaged_changes: str
    diff_terminal: str

    def paint(self, color: str, text: str) -> str:
        if not color:
            return text
        return f"{color}{text}{self.reset}"

    def paint_256(self, color_index: int, text: str) -> str:
        if not self.reset:
            return text
        return self.paint(f"\033[38;5;{color_index}m", text)


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    default_text="\033[39m",
    green="\033[32m",
    yellow="\033[33m",
    red="\033[31m",
    cyan="\033[36m",
    magenta="\033[35m",
    unstaged_changes="\033[31m",
    diff_terminal="\033[35m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    default_text="\033[38;5;252m",
    green="\033[38;5;84m",
    yellow="\033[38;5;215m",
    red="\033[38;5;203m",
    cyan="\033[38;5;45m",
    magenta="\033[38;5;177m",
    unstaged_changes="\033[38;5;203m",
    diff_terminal="\033[1;38;5;45m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    default_text="",
    green="",
    yellow="",
    red="",
    cyan="",
    magenta="",
    unstaged_changes="",
    diff_terminal="",
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
