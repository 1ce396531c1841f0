"""Rental fee calculations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from movie_rental.config import (
    DIGITAL_BASE_FEE,
    GRACE_PERIOD_DAYS,
    LATE_FEE_PER_DAY,
    PHYSICAL_BASE_FEE,
)
from movie_rental.services.errors import InvalidKindError

if TYPE_CHECKING:
    from movie_rental.domain.models import Movie, MovieKind

# Keyed by MovieKind value; MovieKind is a str enum so members hash the same.
BASE_FEES = {
    "digital": DIGITAL_BASE_FEE,
    "physical": PHYSICAL_BASE_FEE,
}


def base_fee(kind: MovieKind | str) -> float:
    """Return the flat rental fee for a movie kind."""
    try:
        return BASE_FEES[kind]
    except KeyError as exc:
        raise InvalidKindError(str(kind)) from exc


def late_fee(days_rented: int) -> float:
    if days_rented <= GRACE_PERIOD_DAYS:
        return 0.0
    return (days_rented - GRACE_PERIOD_DAYS) * LATE_FEE_PER_DAY


def total_fee(kind: MovieKind | str, days_rented: int) -> float:
    """Return the base fee plus the late surcharge past the grace period."""
    return base_fee(kind) + late_fee(days_rented)


def total_fees(movies: Iterable[Movie]) -> float:
    """Sum the current fee of every movie in ``movies``."""
    return sum((total_fee(movie.kind, movie.days_rented) for movie in movies), 0.0)
