"""Nested box layout: describe panels as a tree, resolve them to rectangles.

A :class:`Box` is either a leaf bound to a panel name or a split that
partitions its extent among ordered children. ``Direction.ROW`` places
children left-to-right (width is shared), ``Direction.COLUMN`` stacks them
top-to-bottom (height is shared). Fixed ``size`` children are served first;
the remaining cells are divided by ``weight``.

:func:`arrange_windows` is a pure function of its inputs: boxes are built
fresh for every redraw and conditional children are re-evaluated on every
call.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from .errors import MalformedBoxError

logger = logging.getLogger(__name__)


class Direction(Enum):
    ROW = "row"
    COLUMN = "column"


@dataclass(frozen=True)
class Dimensions:
    """Half-open cell rectangle: ``x0 <= x < x1`` and ``y0 <= y < y1``."""

    x0: int
    y0: int
    x1: int
    y1: int

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    @property
    def height(self) -> int:
        return self.y1 - self.y0

    @property
    def is_empty(self) -> bool:
        """Zero-area regions are present in the map but must not be drawn."""
        return self.width == 0 or self.height == 0

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.x0, self.y0, self.x1, self.y1)


ConditionalChildren = Callable[[int, int], Sequence["Box"]]


@dataclass(frozen=True)
class Box:
    """One node of a layout tree.

    Leaves set ``window``. Splits set ``children`` or ``conditional_children``
    (a function of the split's resolved ``(width, height)``). ``size=None``
    means the box is sized by ``weight``; ``size=0`` is a real fixed size and
    produces a zero-extent rectangle.
    """

    direction: Direction = Direction.COLUMN
    weight: int = 0
    size: int | None = None
    window: str | None = None
    children: Sequence[Box] | None = None
    conditional_children: ConditionalChildren | None = None

    @property
    def is_leaf(self) -> bool:
        return self.window is not None

    @property
    def is_static(self) -> bool:
        return self.size is not None


def _validate(box: Box, *, is_root: bool) -> None:
    has_children = box.children is not None or box.conditional_children is not None
    if box.children is not None and box.conditional_children is not None:
        raise MalformedBoxError(f"box has both static and conditional children: {box!r}")
    if box.window is not None and has_children:
        raise MalformedBoxError(f"leaf box {box.window!r} also has children")
    if box.window is None and not has_children and not is_root:
        raise MalformedBoxError(f"box is neither a leaf nor a split: {box!r}")
    if box.weight < 0:
        raise MalformedBoxError(f"negative weight {box.weight} on {box!r}")
    if box.size is not None and box.size < 0:
        raise MalformedBoxError(f"negative size {box.size} on {box!r}")


def normalize_weights(weights: Sequence[int]) -> list[int]:
    """Remove the common factor of positive weights, e.g. 2, 4, 4 -> 1, 2, 2."""
    divisor = 0
    for weight in weights:
        if weight > 0:
            divisor = math.gcd(divisor, weight)
    if divisor <= 1:
        return list(weights)
    return [weight // divisor for weight in weights]


def calc_sizes(boxes: Sequence[Box], available: int) -> list[int]:
    """Split ``available`` cells among ``boxes``.

    Fixed sizes are granted in order and clamped to what is left. The rest is
    shared by normalized weight; remainder cells go one per weight unit to the
    earliest weighted boxes, so weighted boxes always sum to the leftover
    exactly.
    """
    available = max(0, available)
    weights = normalize_weights([0 if box.is_static else box.weight for box in boxes])
    sizes = [0] * len(boxes)

    remaining = available
    for i, box in enumerate(boxes):
        if box.is_static:
            sizes[i] = min(remaining, box.size)
            remaining -= sizes[i]

    total_weight = sum(weights)
    if total_weight == 0:
        if len(boxes) == 1 and not boxes[0].is_static:
            sizes[0] = remaining
        return sizes

    unit, extra = divmod(remaining, total_weight)
    for i, weight in enumerate(weights):
        sizes[i] += unit * weight

    budget = list(weights)
    while extra > 0:
        for i, weight in enumerate(budget):
            if weight <= 0:
                continue
            sizes[i] += 1
            budget[i] -= 1
            extra -= 1
            if extra == 0:
                break
    return sizes


def _children_for(box: Box, width: int, height: int) -> Sequence[Box]:
    if box.conditional_children is not None:
        return box.conditional_children(width, height)
    return box.children or ()


def merge_dimension_maps(*maps: dict[str, Dimensions]) -> dict[str, Dimensions]:
    """Merge panel maps; a repeated panel name is a caller bug and the later entry wins."""
    result: dict[str, Dimensions] = {}
    for current in maps:
        for name, dimensions in current.items():
            if name in result:
                logger.warning("panel %r placed twice; keeping the later rectangle", name)
            result[name] = dimensions
    return result


def _arrange(box: Box, x0: int, y0: int, width: int, height: int, is_root: bool) -> dict[str, Dimensions]:
    _validate(box, is_root=is_root)
    width = max(0, width)
    height = max(0, height)

    if box.window is not None:
        if not box.window:
            return {}
        return {box.window: Dimensions(x0, y0, x0 + width, y0 + height)}

    children = list(_children_for(box, width, height))
    if not children:
        return {}

    horizontal = box.direction is Direction.ROW
    sizes = calc_sizes(children, width if horizontal else height)

    results: list[dict[str, Dimensions]] = []
    offset = 0
    for child, child_size in zip(children, sizes):
        if horizontal:
            results.append(_arrange(child, x0 + offset, y0, child_size, height, False))
        else:
            results.append(_arrange(child, x0, y0 + offset, width, child_size, False))
        offset += child_size
    return merge_dimension_maps(*results)


def arrange_windows(root: Box, x0: int, y0: int, width: int, height: int) -> dict[str, Dimensions]:
    """Resolve ``root`` into a mapping of panel name to rectangle.

    Every reachable panel appears in the result, including hidden ones with a
    zero-area rectangle. Raises :class:`MalformedBoxError` for boxes that are
    neither leaves nor splits.
    """
    return _arrange(root, x0, y0, width, height, True)


__all__ = [
    "Box",
    "ConditionalChildren",
    "Dimensions",
    "Direction",
    "arrange_windows",
    "calc_sizes",
    "merge_dimension_maps",
    "normalize_weights",
]
