"""Domain dataclasses and enums."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from movie_rental.services.errors import (
    AlreadyRentedError,
    NotRentedError,
    ValidationError,
)
from movie_rental.services.fee_service import total_fee


class MovieKind(str, Enum):
    DIGITAL = "digital"
    PHYSICAL = "physical"


class RentalStatus(str, Enum):
    AVAILABLE = "available"
    RENTED = "rented"


@dataclass(slots=True)
class Movie:
    """A catalog entry and its rental state.

    ``days_rented`` stays at 0 whenever the movie is not rented.
    """

    title: str
    kind: MovieKind
    is_rented: bool = False
    days_rented: int = 0

    @property
    def status(self) -> RentalStatus:
        return RentalStatus.RENTED if self.is_rented else RentalStatus.AVAILABLE

    def rent(self) -> None:
        if self.is_rented:
            raise AlreadyRentedError(self.title)
        self.is_rented = True
        self.days_rented = 0

    def mark_days(self, days: int) -> None:
        """Set the elapsed rental days ahead of a return."""
        if days < 0:
            raise ValidationError("Days rented cannot be negative.")
        self.days_rented = days

    def current_fee(self) -> float:
        return total_fee(self.kind, self.days_rented)

    def return_item(self) -> float:
        """Return the movie and give back the fee owed for it."""
        if not self.is_rented:
            raise NotRentedError(self.title)
        fee = self.current_fee()
        self.is_rented = False
        self.days_rented = 0
        return fee


@dataclass(frozen=True, slots=True)
class HistoryEvent:
    description: str

    def __str__(self) -> str:
        return self.description
