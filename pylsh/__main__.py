"""Module entrypoint for ``python -m pylsh``."""

from .cli import main


if __name__ == "__main__":
    main()
