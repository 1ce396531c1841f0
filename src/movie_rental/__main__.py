"""Module entry point for python -m movie_rental."""

from __future__ import annotations

from movie_rental.app import main


if __name__ == "__main__":
    raise SystemExit(main())
