"""Rental service for business rules."""

from __future__ import annotations

from typing import Optional

from movie_rental.domain.models import HistoryEvent, Movie, MovieKind
from movie_rental.logging_config import get_logger
from movie_rental.repositories import CustomerRegistry, MovieCatalog, RentalLedger
from movie_rental.services.errors import (
    CustomerNotFoundError,
    IndexOutOfRangeError,
    InvalidKindError,
    ServiceError,
    ValidationError,
)
from movie_rental.services.fee_service import total_fees

KIND_SELECTORS = {
    "d": MovieKind.DIGITAL,
    "p": MovieKind.PHYSICAL,
}


def parse_kind(selector: str) -> MovieKind:
    """Map the ``d``/``p`` selector (any case) to a movie kind."""
    try:
        return KIND_SELECTORS[selector.strip().lower()]
    except KeyError as exc:
        raise InvalidKindError(selector) from exc


class RentalService:
    """Service for rental business rules."""

    def __init__(
        self,
        catalog: Optional[MovieCatalog] = None,
        customers: Optional[CustomerRegistry] = None,
        ledger: Optional[RentalLedger] = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else MovieCatalog()
        self.customers = customers if customers is not None else CustomerRegistry()
        self.ledger = ledger if ledger is not None else RentalLedger()
        self._logger = get_logger(self.__class__.__name__)

    def add_customer(self, name: str) -> bool:
        return self.customers.register(name)

    def add_movie(self, title: str, kind_selector: str) -> Movie:
        title = title.strip()
        if not title:
            raise ValidationError("Movie title cannot be empty.")
        kind = parse_kind(kind_selector)
        return self.catalog.add_movie(title, kind)

    def require_customer(self, name: str) -> str:
        name = name.strip()
        if not self.customers.exists(name):
            self._logger.info("Unknown customer '%s'", name)
            raise CustomerNotFoundError(name)
        return name

    def rent_movie(self, customer: str, index: int) -> Movie:
        """Rent the movie at ``index`` in the full catalog to ``customer``.

        The index is not restricted to the available listing; pointing at a
        rented movie surfaces ``AlreadyRentedError`` from the movie itself.
        """
        customer = self.require_customer(customer)
        try:
            movie = self.catalog.get_by_index(index)
            movie.rent()
        except ServiceError as exc:
            self._logger.info("Rent rejected for %s: %s", customer, exc)
            raise
        self.ledger.record_rental(customer, movie)
        return movie

    def active_rentals(self, customer: str) -> list[Movie]:
        return self.ledger.active_rentals_for(customer.strip())

    def outstanding_fees(self, customer: str) -> float:
        return total_fees(self.active_rentals(customer))

    def held_rental(self, customer: str, index: int) -> Movie:
        """Return the customer's ``index``-th active rental without changing it."""
        customer = self.require_customer(customer)
        held = self.ledger.active_rentals_for(customer)
        if index < 0 or index >= len(held):
            self._logger.info(
                "Return rejected for %s: index %s of %s", customer, index, len(held)
            )
            raise IndexOutOfRangeError(index, len(held))
        return held[index]

    def return_movie(self, customer: str, index: int, days: int) -> float:
        """Return the customer's ``index``-th active rental after ``days``."""
        customer = self.require_customer(customer)
        movie = self.held_rental(customer, index)
        if days < 0:
            raise ValidationError("Days rented cannot be negative.")
        movie.mark_days(days)
        fee = movie.return_item()
        self.ledger.record_return(customer, movie)
        self._logger.info(
            "%s returned '%s' after %s day(s), fee %.2f", customer, movie.title, days, fee
        )
        return fee

    def sorted_history(self) -> list[HistoryEvent]:
        return self.ledger.sorted_history()
