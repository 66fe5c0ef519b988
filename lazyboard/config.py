"""Persistent JSON config helpers.

Stores the GUI layout preferences read on every redraw: orientation policy,
side-panel width ratio, main-panel split mode, accordion expansion, bottom
line visibility, command-log size, icons, theme and tree connector style.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "lazyboard"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

PORTRAIT_MODES = ("never", "always", "auto")
MAIN_PANEL_SPLIT_MODES = ("vertical", "horizontal", "auto")
TREE_CONNECTOR_STYLES = ("lines", "blank")


@dataclass(frozen=True)
class GuiConfig:
    """Layout-relevant user preferences."""

    portrait_mode: str = "auto"
    side_panel_width: float = 0.3333
    main_panel_split_mode: str = "auto"
    expand_focused_side_panel: bool = False
    show_bottom_line: bool = True
    command_log_size: int = 8
    show_icons: bool = False
    theme: str = "default"
    tree_connectors: str = "lines"


DEFAULT_GUI_CONFIG = GuiConfig()


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except Exception as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is logged and otherwise ignored to keep
    runtime behavior non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def _choice(data: dict[str, object], key: str, choices: tuple[str, ...], default: str) -> str:
    value = data.get(key, default)
    if isinstance(value, str) and value.strip().lower() in choices:
        return value.strip().lower()
    logger.warning("config %s=%r is not one of %s; using %r", key, value, choices, default)
    return default


def _flag(data: dict[str, object], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if isinstance(value, bool):
        return value
    logger.warning("config %s=%r is not a boolean; using %r", key, value, default)
    return default


def _ratio(data: dict[str, object], key: str, default: float) -> float:
    """Read a ratio constrained to the open interval (0, 1)."""
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0 < value < 1:
        logger.warning("config %s=%r is not a ratio in (0, 1); using %r", key, value, default)
        return default
    return float(value)


def _nonnegative_int(data: dict[str, object], key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        logger.warning("config %s=%r is not a non-negative integer; using %r", key, value, default)
        return default
    return value


def gui_config_from_dict(data: dict[str, object]) -> GuiConfig:
    """Coerce a raw config mapping into a :class:`GuiConfig`.

    Missing keys take their defaults silently; present but invalid values take
    their defaults with a warning. Unknown portrait modes behave as ``auto``.
    """
    default = DEFAULT_GUI_CONFIG
    return GuiConfig(
        portrait_mode=_choice(data, "portrait_mode", PORTRAIT_MODES, default.portrait_mode),
        side_panel_width=_ratio(data, "side_panel_width", default.side_panel_width),
        main_panel_split_mode=_choice(
            data, "main_panel_split_mode", MAIN_PANEL_SPLIT_MODES, default.main_panel_split_mode
        ),
        expand_focused_side_panel=_flag(data, "expand_focused_side_panel", default.expand_focused_side_panel),
        show_bottom_line=_flag(data, "show_bottom_line", default.show_bottom_line),
        command_log_size=_nonnegative_int(data, "command_log_size", default.command_log_size),
        show_icons=_flag(data, "show_icons", default.show_icons),
        theme=str(data.get("theme", default.theme)),
        tree_connectors=_choice(data, "tree_connectors", TREE_CONNECTOR_STYLES, default.tree_connectors),
    )


def load_gui_config() -> GuiConfig:
    """Load persisted GUI preferences."""
    return gui_config_from_dict(load_config())


def save_gui_config(gui: GuiConfig) -> None:
    """Persist GUI preferences, keeping unrelated keys already in the file."""
    config = load_config()
    config.update(asdict(gui))
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_GUI_CONFIG",
    "GuiConfig",
    "gui_config_from_dict",
    "load_config",
    "load_gui_config",
    "save_config",
    "save_gui_config",
]
