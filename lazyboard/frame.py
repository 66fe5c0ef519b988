"""One redraw: panel rectangles plus the rendered listing rows."""

from __future__ import annotations

from collections.abc import Set
from dataclasses import dataclass

from .arrangement import get_window_dimensions
from .boxlayout import Dimensions
from .context import LayoutContext
from .presentation import IconFor, connectors_for_style, render_commit_file_tree, render_file_tree
from .snapshot import ListingSnapshot
from .ui_theme import UITheme, resolve_theme


@dataclass(frozen=True)
class Frame:
    """Everything the terminal backend needs to paint one redraw."""

    windows: dict[str, Dimensions]
    file_lines: list[str]
    commit_file_lines: list[str]
    snapshot_version: int


def build_frame(
    context: LayoutContext,
    snapshot: ListingSnapshot,
    collapsed_files: Set[str] = frozenset(),
    collapsed_commit_files: Set[str] = frozenset(),
    *,
    information: str = "",
    app_status: str = "",
    diff_name: str = "",
    theme: UITheme | None = None,
    icon_for: IconFor | None = None,
) -> Frame:
    """Compute a frame from one context and one listing snapshot.

    The collapse sets should be immutable snapshots of each listing's session
    collapse state. Icons are only drawn when the config enables them and an
    ``icon_for`` lookup is supplied.
    """
    active_theme = theme or resolve_theme(context.gui.theme)
    connectors = connectors_for_style(context.gui.tree_connectors)
    icons = icon_for if context.gui.show_icons else None
    return Frame(
        windows=get_window_dimensions(context, information, app_status),
        file_lines=render_file_tree(
            snapshot.file_tree,
            collapsed_files,
            theme=active_theme,
            icon_for=icons,
            connectors=connectors,
        ),
        commit_file_lines=render_commit_file_tree(
            snapshot.commit_file_tree,
            collapsed_commit_files,
            snapshot.patch_status_of,
            diff_name=diff_name,
            theme=active_theme,
            icon_for=icons,
            connectors=connectors,
        ),
        snapshot_version=snapshot.version,
    )


__all__ = ["Frame", "build_frame"]
