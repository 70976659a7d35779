"""Module entrypoint for ``python -m treegrow``.

All argument parsing and runtime setup happen in ``treegrow.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
