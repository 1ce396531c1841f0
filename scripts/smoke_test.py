"""Smoke test for core rental flows."""

from __future__ import annotations

from pathlib import Path
import sys

ROOT_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT_DIR / "src"))

from movie_rental.config import AppConfig  # noqa: E402
from movie_rental.domain.models import MovieKind, RentalStatus  # noqa: E402
from movie_rental.seed import DEMO_CUSTOMERS, DEMO_MOVIES  # noqa: E402
from movie_rental.services.errors import (  # noqa: E402
    AlreadyRentedError,
    CustomerNotFoundError,
    IndexOutOfRangeError,
)
from movie_rental.app import build_services  # noqa: E402
from movie_rental.ui.console import EXIT_OK, ConsoleApp  # noqa: E402


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise RuntimeError(message)


def _service_flows() -> None:
    services = build_services(AppConfig())
    rental_service = services.rental_service
    _check(len(services.catalog) == len(DEMO_MOVIES), "Demo catalog incomplete.")
    _check(len(services.customers) == len(DEMO_CUSTOMERS), "Demo customers missing.")

    movie = rental_service.rent_movie("Alice", 0)
    _check(movie.status == RentalStatus.RENTED, "Movie was not rented.")
    try:
        rental_service.rent_movie("Bob", 0)
    except AlreadyRentedError:
        pass
    else:
        raise RuntimeError("Duplicate rental accepted.")

    for customer, index, expected in (
        ("Ghost", 1, CustomerNotFoundError),
        ("Bob", len(DEMO_MOVIES), IndexOutOfRangeError),
    ):
        try:
            rental_service.rent_movie(customer, index)
        except expected:
            pass
        else:
            raise RuntimeError(f"{expected.__name__} not raised.")

    fee = rental_service.return_movie("Alice", 0, 5)
    _check(fee == 9.0, f"Unexpected fee: {fee}")

    added = rental_service.add_movie("Heat", "P")
    _check(added.kind == MovieKind.PHYSICAL, "Wrong movie kind.")
    rental_service.rent_movie("Kim", len(services.catalog) - 1)
    fee = rental_service.return_movie("Kim", 0, 0)
    _check(fee == 10.0, f"Unexpected fee: {fee}")

    history = [event.description for event in rental_service.sorted_history()]
    _check(
        history
        == [
            "Alice rented Inception",
            "Alice returned Inception",
            "Kim rented Heat",
            "Kim returned Heat",
        ],
        f"Unexpected history: {history}",
    )


def _console_session() -> None:
    services = build_services(AppConfig(seed_demo_data=False))
    answers = iter(["2", "X", "d", "1", "A", "3", "A", "0", "4", "A", "0", "5", "6", "7"])
    output: list[str] = []
    exit_code = ConsoleApp(
        services,
        input_func=lambda prompt: next(answers),
        output_func=output.append,
    ).run()
    _check(exit_code == EXIT_OK, "Session did not end normally.")
    _check("'X' has been returned. Total fee: RM 9.00" in output, "Fee not shown.")


def main() -> None:
    _service_flows()
    _console_session()
    print("OK")


if __name__ == "__main__":
    main()
