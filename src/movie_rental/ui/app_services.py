"""Service container for the console layer."""

from __future__ import annotations

from dataclasses import dataclass

from movie_rental.config import AppConfig
from movie_rental.repositories import CustomerRegistry, MovieCatalog, RentalLedger
from movie_rental.services.rental_service import RentalService


@dataclass(frozen=True)
class AppServices:
    """Shared repositories and services for dependency injection."""

    config: AppConfig
    catalog: MovieCatalog
    customers: CustomerRegistry
    ledger: RentalLedger
    rental_service: RentalService

    @classmethod
    def create(cls, config: AppConfig) -> "AppServices":
        catalog = MovieCatalog()
        customers = CustomerRegistry()
        ledger = RentalLedger()
        return cls(
            config=config,
            catalog=catalog,
            customers=customers,
            ledger=ledger,
            rental_service=RentalService(catalog, customers, ledger),
        )
