"""Command-line front door for lazyboard.

Prints the resolved panel layout for a terminal size and UI state, or renders
a file listing read from stdin as a collapsible tree.
"""

from __future__ import annotations

import argparse
import json
import shutil
import sys
from collections.abc import Sequence

from .ansi import clip_ansi_line
from .arrangement import get_window_dimensions
from .config import load_gui_config
from .context import SIDE_WINDOWS, LayoutContext, ScreenMode, SearchType, WindowHistory
from .filetree import (
    build_tree_from_commit_files,
    build_tree_from_files,
    parse_name_status_line,
    parse_porcelain_line,
)
from .log import configure_logging
from .presentation import connectors_for_style, render_commit_file_tree, render_file_tree
from .ui_theme import available_theme_names, resolve_theme


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve dashboard panel layouts and render file listings as trees."
    )
    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument("--layout", action="store_true", help="Print panel rectangles as JSON.")
    action.add_argument("--files", action="store_true", help="Render `git status --porcelain` lines from stdin.")
    action.add_argument(
        "--commit-files",
        action="store_true",
        help="Render `git diff --name-status` lines from stdin.",
    )
    parser.add_argument("--width", type=_positive_int, default=None, help="Terminal width (default: detected).")
    parser.add_argument("--height", type=_positive_int, default=None, help="Terminal height (default: detected).")
    parser.add_argument("--focus", default="files", help="Focused window name.")
    parser.add_argument(
        "--visited",
        action="append",
        default=[],
        metavar="WINDOW",
        help="Window already opened this session (repeatable).",
    )
    parser.add_argument(
        "--screen-mode",
        choices=[mode.value for mode in ScreenMode],
        default=ScreenMode.NORMAL.value,
    )
    parser.add_argument("--split-main", action="store_true", help="Request the secondary main panel.")
    parser.add_argument("--show-extras", action="store_true", help="Show the command-log panel.")
    parser.add_argument("--search", choices=[kind.value for kind in SearchType], default=None)
    parser.add_argument("--information", default="", help="Information segment text.")
    parser.add_argument("--app-status", default="", help="App status segment text.")
    parser.add_argument("--collapse", action="append", default=[], metavar="PATH", help="Collapse a directory.")
    parser.add_argument("--theme", default=None, help=f"UI theme name ({', '.join(available_theme_names())}).")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--max-cols", type=_positive_int, default=None, help="Clip rendered rows to this width.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level written to stderr.")
    return parser


def _layout_context(args: argparse.Namespace) -> LayoutContext:
    term = shutil.get_terminal_size((80, 24))
    focus = args.focus
    history = WindowHistory()
    for window in [*args.visited, focus]:
        history.record(window)
    return LayoutContext(
        width=args.width or term.columns,
        height=args.height or term.lines,
        gui=load_gui_config(),
        current_window=focus,
        current_side_window=focus if focus in SIDE_WINDOWS else "files",
        current_context_key=focus,
        screen_mode=ScreenMode(args.screen_mode),
        split_main_panel=args.split_main,
        in_search_prompt=args.search is not None,
        search_type=SearchType(args.search or SearchType.SEARCH.value),
        show_extras_window=args.show_extras,
        visited_windows=history.snapshot(),
    )


def render_layout(context: LayoutContext, information: str = "", app_status: str = "") -> str:
    windows = get_window_dimensions(context, information, app_status)
    payload = {name: list(windows[name].as_tuple()) for name in sorted(windows)}
    return json.dumps(payload, indent=2) + "\n"


def render_listing(lines: Sequence[str], args: argparse.Namespace) -> str:
    gui = load_gui_config()
    theme = resolve_theme(args.theme or gui.theme, no_color=args.no_color)
    connectors = connectors_for_style(gui.tree_connectors)
    collapsed = frozenset(args.collapse)
    if args.files:
        files = [file for file in map(parse_porcelain_line, lines) if file is not None]
        rows = render_file_tree(build_tree_from_files(files), collapsed, theme=theme, connectors=connectors)
    else:
        commit_files = [file for file in map(parse_name_status_line, lines) if file is not None]
        rows = render_commit_file_tree(
            build_tree_from_commit_files(commit_files),
            collapsed,
            theme=theme,
            connectors=connectors,
        )
    if args.max_cols is not None:
        rows = [clip_ansi_line(row, args.max_cols) for row in rows]
    return "".join(f"{row}\n" for row in rows)


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and print a layout or a rendered listing."""
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.layout:
        sys.stdout.write(render_layout(_layout_context(args), args.information, args.app_status))
        return

    sys.stdout.write(render_listing(sys.stdin.read().splitlines(), args))


if __name__ == "__main__":
    main()
