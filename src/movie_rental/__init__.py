"""Console movie rental manager."""

from movie_rental.version import __version__

__all__ = ["__version__"]
