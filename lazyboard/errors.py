"""Programming-fault exceptions raised by the layout core.

These signal a broken invariant in the caller, not a user-facing condition.
Nothing inside ``lazyboard`` catches them.
"""

from __future__ import annotations


class LayoutFault(AssertionError):
    """Base class for layout invariant violations."""


class MalformedBoxError(LayoutFault):
    """A box is neither a leaf nor a split, or carries invalid sizing."""


class SpacerBudgetExceededError(LayoutFault):
    """The info bar asked for more spacer boxes than it was designed to hold."""


__all__ = [
    "LayoutFault",
    "MalformedBoxError",
    "SpacerBudgetExceededError",
]
