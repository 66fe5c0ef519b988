"""Layout mode decision tests.

Orientation, main-panel split, section weights, side-panel regimes and the
command-log height are each pure functions of a ``LayoutContext``.
"""

from __future__ import annotations

import unittest
from dataclasses import replace

from lazyboard.arrangement import (
    default_stash_box,
    extras_window_size,
    main_section_children,
    mid_section_weights,
    should_use_portrait_mode,
    side_panel_children,
    split_main_panel_side_by_side,
)
from lazyboard.config import GuiConfig
from lazyboard.context import LayoutContext, ScreenMode


def _ctx(width: int = 120, height: int = 40, **kwargs) -> LayoutContext:
    return LayoutContext(width=width, height=height, **kwargs)


def _by_window(boxes):
    return {box.window: box for box in boxes}


class PortraitModeTests(unittest.TestCase):
    def test_auto_boundaries_are_strict_on_both_axes(self) -> None:
        self.assertTrue(should_use_portrait_mode(_ctx(84, 46)))
        self.assertFalse(should_use_portrait_mode(_ctx(85, 46)))
        self.assertFalse(should_use_portrait_mode(_ctx(84, 45)))

    def test_never_and_always_ignore_size(self) -> None:
        self.assertFalse(should_use_portrait_mode(_ctx(60, 100, gui=GuiConfig(portrait_mode="never"))))
        self.assertTrue(should_use_portrait_mode(_ctx(300, 20, gui=GuiConfig(portrait_mode="always"))))


class MainPanelSplitTests(unittest.TestCase):
    def test_not_side_by_side_without_secondary_panel(self) -> None:
        self.assertFalse(split_main_panel_side_by_side(_ctx(400, 20)))

    def test_auto_thresholds(self) -> None:
        self.assertFalse(split_main_panel_side_by_side(_ctx(199, 31, split_main_panel=True)))
        self.assertTrue(split_main_panel_side_by_side(_ctx(200, 31, split_main_panel=True)))
        self.assertTrue(split_main_panel_side_by_side(_ctx(100, 30, split_main_panel=True)))

    def test_explicit_modes_win_over_size(self) -> None:
        vertical = GuiConfig(main_panel_split_mode="vertical")
        horizontal = GuiConfig(main_panel_split_mode="horizontal")
        self.assertFalse(split_main_panel_side_by_side(_ctx(400, 10, gui=vertical, split_main_panel=True)))
        self.assertTrue(split_main_panel_side_by_side(_ctx(80, 80, gui=horizontal, split_main_panel=True)))

    def test_full_screen_main_hides_secondary(self) -> None:
        ctx = _ctx(split_main_panel=True, current_window="main", screen_mode=ScreenMode.FULL)
        self.assertEqual([box.window for box in main_section_children(ctx)], ["main"])
        ctx = replace(ctx, screen_mode=ScreenMode.HALF)
        self.assertEqual([box.window for box in main_section_children(ctx)], ["main", "secondary"])


class SectionWeightTests(unittest.TestCase):
    def test_ratio_maps_to_weights(self) -> None:
        self.assertEqual(mid_section_weights(_ctx(gui=GuiConfig(side_panel_width=0.2))), (1, 4))

    def test_side_by_side_main_panels_use_weight_five(self) -> None:
        ctx = _ctx(240, 30, gui=GuiConfig(side_panel_width=0.2), split_main_panel=True)
        self.assertEqual(mid_section_weights(ctx), (1, 5))

    def test_focused_main_in_half_or_full_hides_side_section(self) -> None:
        for mode in (ScreenMode.HALF, ScreenMode.FULL):
            ctx = _ctx(gui=GuiConfig(side_panel_width=0.2), current_window="main", screen_mode=mode)
            self.assertEqual(mid_section_weights(ctx), (0, 4))

    def test_focused_side_panel_in_half_and_full(self) -> None:
        gui = GuiConfig(side_panel_width=0.2)
        self.assertEqual(mid_section_weights(_ctx(gui=gui, screen_mode=ScreenMode.HALF)), (1, 1))
        self.assertEqual(mid_section_weights(_ctx(gui=gui, screen_mode=ScreenMode.FULL)), (1, 0))


class SidePanelChildrenTests(unittest.TestCase):
    def test_half_and_full_keep_every_panel_but_size_only_the_focused_one(self) -> None:
        for mode in (ScreenMode.HALF, ScreenMode.FULL):
            ctx = _ctx(screen_mode=mode, current_side_window="branches")
            boxes = side_panel_children(ctx, 40, 39)
            self.assertEqual([box.window for box in boxes], ["status", "files", "branches", "commits", "stash"])
            for box in boxes:
                if box.window == "branches":
                    self.assertEqual((box.weight, box.size), (1, None))
                else:
                    self.assertEqual(box.size, 0)

    def test_comfortable_layout(self) -> None:
        boxes = _by_window(side_panel_children(_ctx(), 40, 28))
        self.assertEqual(boxes["status"].size, 3)
        self.assertEqual(boxes["files"].weight, 1)
        self.assertEqual(boxes["branches"].weight, 1)
        self.assertEqual(boxes["commits"].weight, 1)
        self.assertEqual(boxes["stash"].size, 3)

    def test_accordion_doubles_the_focused_panel(self) -> None:
        ctx = _ctx(gui=GuiConfig(expand_focused_side_panel=True), current_side_window="commits")
        boxes = _by_window(side_panel_children(ctx, 40, 30))
        self.assertEqual(boxes["commits"].weight, 2)
        self.assertEqual(boxes["files"].weight, 1)

    def test_stash_grows_once_visited(self) -> None:
        ctx = _ctx(visited_windows=frozenset({"stash"}))
        stash = default_stash_box(ctx)
        self.assertEqual((stash.weight, stash.size), (1, None))
        self.assertEqual(default_stash_box(_ctx()).size, 3)

    def test_accordion_applies_to_a_visited_stash(self) -> None:
        ctx = _ctx(
            gui=GuiConfig(expand_focused_side_panel=True),
            current_side_window="stash",
            visited_windows=frozenset({"stash"}),
        )
        self.assertEqual(_by_window(side_panel_children(ctx, 40, 30))["stash"].weight, 2)

    def test_squashed_layout_sizes(self) -> None:
        tall = _by_window(side_panel_children(_ctx(), 40, 21))
        short = _by_window(side_panel_children(_ctx(), 40, 20))
        self.assertEqual(tall["files"].weight, 1)
        self.assertEqual(tall["status"].size, 3)
        self.assertEqual(tall["stash"].size, 3)
        self.assertEqual(short["status"].size, 1)
        self.assertEqual(short["commits"].size, 1)


class ExtrasWindowSizeTests(unittest.TestCase):
    def test_hidden_extras_take_no_space(self) -> None:
        self.assertEqual(extras_window_size(_ctx()), 0)

    def test_focused_command_log_fills_remaining_space(self) -> None:
        ctx = _ctx(show_extras_window=True, current_context_key="commandLog")
        self.assertEqual(extras_window_size(ctx), 1002)

    def test_short_screen_uses_one_line(self) -> None:
        self.assertEqual(extras_window_size(_ctx(height=39, show_extras_window=True)), 3)

    def test_configured_size_on_tall_screen(self) -> None:
        ctx = _ctx(height=40, show_extras_window=True, gui=GuiConfig(command_log_size=8))
        self.assertEqual(extras_window_size(ctx), 10)


if __name__ == "__main__":
    unittest.main()
