"""Public package surface for lazyboard.

Exports ``main`` for programmatic CLI invocation.
Layout lives in ``boxlayout``/``arrangement``/``info_bar``; listing trees
live in ``filetree`` and ``presentation``.
"""

from __future__ import annotations

__version__ = "0.1.0"


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
