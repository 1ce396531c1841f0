"""In-memory movie catalog."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from movie_rental.domain.models import Movie, MovieKind
from movie_rental.logging_config import get_logger
from movie_rental.services.errors import IndexOutOfRangeError

STATUS_RENTED = "Rented"
STATUS_AVAILABLE = "Available"


class MovieCatalog:
    """Ordered collection of movies, addressed by catalog index."""

    def __init__(self, movies: Optional[Iterable[Movie]] = None) -> None:
        self._movies: List[Movie] = list(movies or [])
        self._logger = get_logger(self.__class__.__name__)

    def __len__(self) -> int:
        return len(self._movies)

    def __iter__(self) -> Iterator[Movie]:
        return iter(self._movies)

    def add_movie(self, title: str, kind: MovieKind) -> Movie:
        movie = Movie(title=title, kind=kind)
        self._movies.append(movie)
        self._logger.info("Added %s movie '%s'", kind.value, title)
        return movie

    def list_available(self) -> List[Movie]:
        return [movie for movie in self._movies if not movie.is_rented]

    def list_available_indexed(self) -> Iterator[tuple[int, Movie]]:
        """Yield ``(catalog_index, movie)`` for every movie not rented."""
        for index, movie in enumerate(self._movies):
            if not movie.is_rented:
                yield index, movie

    def list_all(self) -> Iterator[tuple[str, str]]:
        """Lazily yield ``(title, status_label)`` for the whole catalog."""
        return (
            (movie.title, STATUS_RENTED if movie.is_rented else STATUS_AVAILABLE)
            for movie in self._movies
        )

    def get_by_index(self, index: int) -> Movie:
        if index < 0 or index >= len(self._movies):
            raise IndexOutOfRangeError(index, len(self._movies))
        return self._movies[index]
