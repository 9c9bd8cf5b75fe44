"""Module entrypoint for ``python -m lazycd``.

All argument parsing and runtime setup happen in ``lazycd.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
