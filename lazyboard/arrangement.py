"""Whole-screen window arrangement.

Turns a :class:`~lazyboard.context.LayoutContext` into a box tree and then
into panel rectangles. The decisions here (orientation, main-panel split,
section weights, side-panel regimes, command-log height) are pure functions
of the context so they can be exercised without a running application.
"""

from __future__ import annotations

import logging

from .boxlayout import Box, Dimensions, Direction, arrange_windows, merge_dimension_maps
from .context import (
    EXTRAS_WINDOW,
    MAIN_WINDOW,
    SECONDARY_WINDOW,
    SIDE_WINDOWS,
    STASH_WINDOW,
    LayoutContext,
    ScreenMode,
)
from .info_bar import info_section_box

logger = logging.getLogger(__name__)

PORTRAIT_MAX_WIDTH = 84
PORTRAIT_MIN_HEIGHT = 45
# Two 80-column main panels plus a 40-column side section.
SIDE_BY_SIDE_MIN_WIDTH = 200
SIDE_BY_SIDE_MAX_HEIGHT = 30
SIDE_BY_SIDE_MAIN_WEIGHT = 5
COMFORTABLE_SIDE_HEIGHT = 28
SQUASHED_TALL_HEIGHT = 21
STATUS_PANEL_SIZE = 3
COLLAPSED_STASH_SIZE = 3
EXTRAS_FILL_SIZE = 1000
EXTRAS_SHORT_SCREEN_HEIGHT = 40
FRAME_SIZE = 2
LIMIT_WINDOW = "limit"


def should_use_portrait_mode(context: LayoutContext) -> bool:
    """Return whether the side section stacks above the main section."""
    mode = context.gui.portrait_mode
    if mode == "never":
        return False
    if mode == "always":
        return True
    return context.width <= PORTRAIT_MAX_WIDTH and context.height > PORTRAIT_MIN_HEIGHT


def split_main_panel_side_by_side(context: LayoutContext) -> bool:
    """Return whether ``main`` and ``secondary`` sit next to each other."""
    if not context.split_main_panel:
        return False
    mode = context.gui.main_panel_split_mode
    if mode == "vertical":
        return False
    if mode == "horizontal":
        return True
    return not (context.width < SIDE_BY_SIDE_MIN_WIDTH and context.height > SIDE_BY_SIDE_MAX_HEIGHT)


def mid_section_weights(context: LayoutContext) -> tuple[int, int]:
    """Return ``(side_weight, main_weight)``.

    The configured width ratio ``r`` maps to weights ``1 : int(1/r) - 1``, so
    0.2 gives 1 against 4.
    """
    main_weight = int(1 / context.gui.side_panel_width) - 1
    side_weight = 1

    if split_main_panel_side_by_side(context):
        main_weight = SIDE_BY_SIDE_MAIN_WEIGHT

    if context.current_window == MAIN_WINDOW:
        if context.screen_mode in (ScreenMode.HALF, ScreenMode.FULL):
            side_weight = 0
    elif context.screen_mode is ScreenMode.HALF:
        main_weight = 1
    elif context.screen_mode is ScreenMode.FULL:
        main_weight = 0

    return side_weight, main_weight


def main_section_children(context: LayoutContext) -> list[Box]:
    """Return ``main`` plus ``secondary`` while split, unless ``main`` is full screen."""
    if not context.split_main_panel or (
        context.screen_mode is ScreenMode.FULL and context.current_window == MAIN_WINDOW
    ):
        return [Box(window=MAIN_WINDOW, weight=1)]
    return [
        Box(window=MAIN_WINDOW, weight=1),
        Box(window=SECONDARY_WINDOW, weight=1),
    ]


def extras_window_size(context: LayoutContext) -> int:
    """Height of the command-log panel including its frame."""
    if not context.show_extras_window:
        return 0
    if context.command_log_focused:
        base_size = EXTRAS_FILL_SIZE
    elif context.height < EXTRAS_SHORT_SCREEN_HEIGHT:
        base_size = 1
    else:
        base_size = context.gui.command_log_size
    return base_size + FRAME_SIZE


def default_stash_box(context: LayoutContext) -> Box:
    # One line until the stash has been opened this session.
    if context.stash_visited:
        return Box(window=STASH_WINDOW, weight=1)
    return Box(window=STASH_WINDOW, size=COLLAPSED_STASH_SIZE)


def side_panel_children(context: LayoutContext, width: int, height: int) -> list[Box]:
    """Side panels for a side section resolved to ``width`` x ``height``."""
    current = context.current_side_window

    if context.screen_mode in (ScreenMode.HALF, ScreenMode.FULL):
        return [
            Box(window=window, weight=1) if window == current else Box(window=window, size=0)
            for window in SIDE_WINDOWS
        ]

    if height >= COMFORTABLE_SIDE_HEIGHT:
        accordion = context.gui.expand_focused_side_panel

        def accordion_box(default: Box) -> Box:
            if accordion and default.window == current:
                return Box(window=default.window, weight=2)
            return default

        return [
            Box(window="status", size=STATUS_PANEL_SIZE),
            accordion_box(Box(window="files", weight=1)),
            accordion_box(Box(window="branches", weight=1)),
            accordion_box(Box(window="commits", weight=1)),
            accordion_box(default_stash_box(context)),
        ]

    squashed_height = 3 if height >= SQUASHED_TALL_HEIGHT else 1
    return [
        Box(window=window, weight=1) if window == current else Box(window=window, size=squashed_height)
        for window in SIDE_WINDOWS
    ]


def build_layout_box(context: LayoutContext, information: str, app_status: str) -> Box:
    """Assemble the box tree for one redraw."""
    side_weight, main_weight = mid_section_weights(context)
    side_direction = Direction.COLUMN if should_use_portrait_mode(context) else Direction.ROW
    main_direction = Direction.ROW if split_main_panel_side_by_side(context) else Direction.COLUMN

    logger.debug(
        "arrangement %sx%s: side=%s main=%s side_direction=%s main_direction=%s",
        context.width,
        context.height,
        side_weight,
        main_weight,
        side_direction.value,
        main_direction.value,
    )

    def side_children(width: int, height: int) -> list[Box]:
        return side_panel_children(context, width, height)

    return Box(
        direction=Direction.COLUMN,
        children=[
            Box(
                direction=side_direction,
                weight=1,
                children=[
                    Box(direction=Direction.COLUMN, weight=side_weight, conditional_children=side_children),
                    Box(
                        direction=Direction.COLUMN,
                        weight=main_weight,
                        children=[
                            Box(direction=main_direction, weight=1, children=main_section_children(context)),
                            Box(window=EXTRAS_WINDOW, size=extras_window_size(context)),
                        ],
                    ),
                ],
            ),
            info_section_box(context, information, app_status),
        ],
    )


def get_window_dimensions(context: LayoutContext, information: str = "", app_status: str = "") -> dict[str, Dimensions]:
    """Resolve every panel rectangle for the current terminal size."""
    root = build_layout_box(context, information, app_status)
    windows = arrange_windows(root, 0, 0, context.width, context.height)
    limit = arrange_windows(Box(window=LIMIT_WINDOW), 0, 0, context.width, context.height)
    return merge_dimension_maps(windows, limit)


__all__ = [
    "build_layout_box",
    "default_stash_box",
    "extras_window_size",
    "get_window_dimensions",
    "main_section_children",
    "mid_section_weights",
    "should_use_portrait_mode",
    "side_panel_children",
    "split_main_panel_side_by_side",
]
