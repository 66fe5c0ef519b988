"""Bottom info-line composition.

The bottom line holds at most an app-status message, the options hint and an
information segment. Segments are separated by one-cell spacer boxes, and
flexible spacers push the information segment to the right edge.
"""

from __future__ import annotations

from collections.abc import Iterator

from .ansi import decolorise, display_width
from .boxlayout import Box, Direction
from .context import LayoutContext, SearchType
from .errors import SpacerBudgetExceededError

STATUS_SPACER_PREFIX = "statusSpacer"
STATUS_SPACER_WINDOWS: tuple[str, ...] = tuple(f"{STATUS_SPACER_PREFIX}{i}" for i in range(1, 6))

APP_STATUS_WINDOW = "appStatus"
OPTIONS_WINDOW = "options"
INFORMATION_WINDOW = "information"
SEARCH_PREFIX_WINDOW = "searchPrefix"
SEARCH_WINDOW = "search"


class SpacerPool:
    """Hands out spacer boxes from a fixed set of window names.

    Running out means the bar holds more segments than it was designed for.
    """

    def __init__(self, names: tuple[str, ...] = STATUS_SPACER_WINDOWS) -> None:
        self._names: Iterator[str] = iter(names)

    def _next_name(self) -> str:
        try:
            return next(self._names)
        except StopIteration:
            raise SpacerBudgetExceededError("too many spacer boxes in the info bar") from None

    def spacer(self) -> Box:
        """One-cell padding between segments."""
        return Box(window=self._next_name(), size=1)

    def flexible_spacer(self) -> Box:
        """Padding that soaks up all leftover width."""
        return Box(window=self._next_name(), weight=1)


def _insert_spacers(boxes: list[Box], pool: SpacerPool) -> list[Box]:
    result: list[Box] = []
    for i, box in enumerate(boxes):
        if i > 0:
            result.append(pool.spacer())
        result.append(box)
    return result


def compose_info_bar(
    information: str,
    app_status: str,
    *,
    search_prefix: str | None = None,
    show_bottom_line: bool = True,
    any_mode_active: bool = False,
    in_demo: bool = False,
) -> list[Box]:
    """Return the ordered leaf boxes of the bottom line.

    ``search_prefix`` is the localized prompt label when a search or filter
    prompt is open; the bar then only shows that label and the input box.
    """
    if search_prefix is not None:
        return [
            Box(window=SEARCH_PREFIX_WINDOW, size=display_width(search_prefix)),
            Box(window=SEARCH_WINDOW, weight=1),
        ]

    pool = SpacerPool()
    result: list[Box] = []

    # App status flickers through demo recordings, so it is hidden there.
    if not in_demo and app_status:
        result.append(Box(window=APP_STATUS_WINDOW, size=display_width(app_status)))

    if show_bottom_line:
        result.append(Box(window=OPTIONS_WINDOW, weight=1))

    if (show_bottom_line and not in_demo) or any_mode_active:
        result.append(Box(window=INFORMATION_WINDOW, size=display_width(decolorise(information))))

    if len(result) == 2 and result[0].window == APP_STATUS_WINDOW and result[1].window == INFORMATION_WINDOW:
        result.insert(1, pool.flexible_spacer())
    elif len(result) == 1:
        if result[0].window == INFORMATION_WINDOW:
            result.insert(0, pool.flexible_spacer())
        elif result[0].window == APP_STATUS_WINDOW:
            result[0] = Box(window=APP_STATUS_WINDOW, weight=1)

    return _insert_spacers(result, pool)


def info_section_children(context: LayoutContext, information: str, app_status: str) -> list[Box]:
    """Build bottom-line boxes for the current redraw."""
    search_prefix: str | None = None
    if context.in_search_prompt:
        if context.search_type is SearchType.SEARCH:
            search_prefix = context.search_prefix
        else:
            search_prefix = context.filter_prefix
    return compose_info_bar(
        information,
        app_status,
        search_prefix=search_prefix,
        show_bottom_line=context.gui.show_bottom_line,
        any_mode_active=context.any_mode_active,
        in_demo=context.in_demo,
    )


def show_info_section(context: LayoutContext, app_status: str) -> bool:
    """Whether the bottom line takes a row at all."""
    return bool(
        context.gui.show_bottom_line
        or context.in_search_prompt
        or context.any_mode_active
        or app_status
    )


def info_section_box(context: LayoutContext, information: str, app_status: str) -> Box:
    """Return the bottom-line row box, zero height when hidden."""
    return Box(
        direction=Direction.ROW,
        size=1 if show_info_section(context, app_status) else 0,
        children=info_section_children(context, information, app_status),
    )


__all__ = [
    "APP_STATUS_WINDOW",
    "INFORMATION_WINDOW",
    "OPTIONS_WINDOW",
    "SEARCH_PREFIX_WINDOW",
    "SEARCH_WINDOW",
    "STATUS_SPACER_WINDOWS",
    "SpacerPool",
    "compose_info_bar",
    "info_section_box",
    "info_section_children",
    "show_info_section",
]
