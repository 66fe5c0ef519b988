"""Module entrypoint for ``python -m lazyboard``.

All argument parsing happens in ``lazyboard.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
