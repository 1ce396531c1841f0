"""In-memory repositories for catalog, customers and rentals."""

from movie_rental.repositories.customer_registry import CustomerRegistry
from movie_rental.repositories.movie_catalog import MovieCatalog
from movie_rental.repositories.rental_ledger import RentalLedger

__all__ = [
    "CustomerRegistry",
    "MovieCatalog",
    "RentalLedger",
]
