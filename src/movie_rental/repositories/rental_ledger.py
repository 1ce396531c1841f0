"""Active rentals per customer and the rental history log."""

from __future__ import annotations

from typing import Dict, List

from movie_rental.domain.models import HistoryEvent, Movie
from movie_rental.logging_config import get_logger
from movie_rental.services.errors import NotFoundInLedgerError


class RentalLedger:
    """Tracks which customer holds which movie.

    The ledger keeps references to the catalog's own ``Movie`` objects, so
    removal matches by identity rather than by title: two copies of the same
    title are different rentals.
    """

    def __init__(self) -> None:
        self._rentals: Dict[str, List[Movie]] = {}
        self._history: List[HistoryEvent] = []
        self._logger = get_logger(self.__class__.__name__)

    def record_rental(self, customer: str, movie: Movie) -> HistoryEvent:
        self._rentals.setdefault(customer, []).append(movie)
        return self._append_event(f"{customer} rented {movie.title}")

    def record_return(self, customer: str, movie: Movie) -> HistoryEvent:
        held = self._rentals.get(customer, [])
        for position, candidate in enumerate(held):
            if candidate is movie:
                del held[position]
                break
        else:
            raise NotFoundInLedgerError(customer, movie.title)
        return self._append_event(f"{customer} returned {movie.title}")

    def active_rentals_for(self, customer: str) -> List[Movie]:
        return list(self._rentals.get(customer, []))

    def history(self) -> List[HistoryEvent]:
        return list(self._history)

    def sorted_history(self) -> List[HistoryEvent]:
        return sorted(self._history, key=lambda event: event.description)

    def _append_event(self, description: str) -> HistoryEvent:
        event = HistoryEvent(description)
        self._history.append(event)
        self._logger.info("History: %s", description)
        return event
