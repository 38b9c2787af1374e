"""Module entrypoint for ``python -m showfileinfo``.

This keeps module-mode execution behavior identical to the console script.
All argument handling happens in ``showfileinfo.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
