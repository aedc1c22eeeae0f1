"""Module entrypoint for ``python -m fstree``."""

from .cli import main


if __name__ == "__main__":
    main()
