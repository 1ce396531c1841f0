"""Domain models for MovieRental."""

from movie_rental.domain.models import (
    HistoryEvent,
    Movie,
    MovieKind,
    RentalStatus,
)

__all__ = [
    "HistoryEvent",
    "Movie",
    "MovieKind",
    "RentalStatus",
]
