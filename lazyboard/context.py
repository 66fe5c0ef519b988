"""Read-only per-redraw state consumed by the layout decisions.

The application assembles one :class:`LayoutContext` per redraw from its
terminal size, config, focus and mode flags, then hands it to
:mod:`lazyboard.arrangement`. Nothing in the layout code reads global state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .config import DEFAULT_GUI_CONFIG, GuiConfig

SIDE_WINDOWS: tuple[str, ...] = ("status", "files", "branches", "commits", "stash")
MAIN_WINDOW = "main"
SECONDARY_WINDOW = "secondary"
EXTRAS_WINDOW = "extras"
STASH_WINDOW = "stash"
COMMAND_LOG_CONTEXT = "commandLog"


class ScreenMode(Enum):
    NORMAL = "normal"
    HALF = "half"
    FULL = "full"


class SearchType(Enum):
    SEARCH = "search"
    FILTER = "filter"


class WindowHistory:
    """Session-scoped record of which windows have been focused.

    Lives for one process run and is never persisted, so a restart resets it.
    The stash panel consults it to decide whether to grow past its one-line
    default.
    """

    def __init__(self) -> None:
        self._visited: set[str] = set()

    def record(self, window: str) -> None:
        self._visited.add(window)

    def has_visited(self, window: str) -> bool:
        return window in self._visited

    def clear(self) -> None:
        self._visited.clear()

    def snapshot(self) -> frozenset[str]:
        return frozenset(self._visited)


@dataclass(frozen=True)
class LayoutContext:
    """Everything the window arrangement needs to know about one redraw."""

    width: int
    height: int
    gui: GuiConfig = DEFAULT_GUI_CONFIG
    current_window: str = "files"
    current_side_window: str = "files"
    current_context_key: str = "files"
    screen_mode: ScreenMode = ScreenMode.NORMAL
    split_main_panel: bool = False
    in_search_prompt: bool = False
    search_type: SearchType = SearchType.SEARCH
    search_prefix: str = "Search: "
    filter_prefix: str = "Filter: "
    show_extras_window: bool = False
    visited_windows: frozenset[str] = field(default_factory=frozenset)
    any_mode_active: bool = False
    in_demo: bool = False

    @property
    def stash_visited(self) -> bool:
        return STASH_WINDOW in self.visited_windows

    @property
    def command_log_focused(self) -> bool:
        return self.current_context_key == COMMAND_LOG_CONTEXT


__all__ = [
    "COMMAND_LOG_CONTEXT",
    "EXTRAS_WINDOW",
    "LayoutContext",
    "MAIN_WINDOW",
    "SECONDARY_WINDOW",
    "SIDE_WINDOWS",
    "STASH_WINDOW",
    "ScreenMode",
    "SearchType",
    "WindowHistory",
]
