"""Demo catalog and customers loaded at startup."""

from __future__ import annotations

from movie_rental.domain.models import MovieKind
from movie_rental.logging_config import get_logger
from movie_rental.services.rental_service import RentalService

DEMO_MOVIES: tuple[tuple[str, MovieKind], ...] = (
    ("Inception", MovieKind.DIGITAL),
    ("Dark Knight", MovieKind.PHYSICAL),
    ("Interstellar", MovieKind.DIGITAL),
    ("Tenet", MovieKind.PHYSICAL),
    ("Oppenheimer", MovieKind.DIGITAL),
    ("Spideman", MovieKind.PHYSICAL),
    ("Avengers Infinity war", MovieKind.DIGITAL),
    ("Harry Potter and The Half blood Prince", MovieKind.PHYSICAL),
    ("Spiderman No Way Home", MovieKind.DIGITAL),
    ("Superman 1978", MovieKind.PHYSICAL),
    ("Transformers one", MovieKind.DIGITAL),
    ("The Social Network", MovieKind.PHYSICAL),
)

DEMO_CUSTOMERS: tuple[str, ...] = ("Alice", "Bob", "Charlie", "Jack", "Kim")


def seed_demo_data(service: RentalService) -> None:
    """Fill an empty catalog and registry with the demo set."""
    logger = get_logger(__name__)
    for title, kind in DEMO_MOVIES:
        service.catalog.add_movie(title, kind)
    for name in DEMO_CUSTOMERS:
        service.customers.register(name)
    logger.info(
        "Seeded %s movies and %s customers",
        len(DEMO_MOVIES),
        len(DEMO_CUSTOMERS),
    )
