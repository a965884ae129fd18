"""Allows running clean-deps with ``python -m clean_deps``."""

from clean_deps.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
