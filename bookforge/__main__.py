"""Module entrypoint for running bookforge as ``python -m bookforge``."""

from __future__ import annotations

from bookforge.cli import main


if __name__ == "__main__":
    main()
