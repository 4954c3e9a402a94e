"""Module entrypoint for ``python -m dirpanes``."""

from .cli import main


if __name__ == "__main__":
    main()
