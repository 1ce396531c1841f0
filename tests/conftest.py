"""
Pytest configuration and shared fixtures.
"""

from typing import Callable, Iterable, List

import pytest

from movie_rental.config import AppConfig
from movie_rental.domain.models import Movie, MovieKind
from movie_rental.seed import seed_demo_data
from movie_rental.services.rental_service import RentalService
from movie_rental.ui.app_services import AppServices
from movie_rental.ui.console import ConsoleApp


def scripted_input(lines: Iterable[str]) -> Callable[[str], str]:
    """Build an input function that replays ``lines`` then hits end of input."""
    pending = iter(lines)

    def _input(prompt: str) -> str:
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    return _input


@pytest.fixture
def service():
    """A rental service with an empty catalog and registry."""
    return RentalService()


@pytest.fixture
def seeded_service():
    """A rental service loaded with the demo catalog and customers."""
    rental_service = RentalService()
    seed_demo_data(rental_service)
    return rental_service


@pytest.fixture
def digital_movie():
    return Movie(title="Inception", kind=MovieKind.DIGITAL)


@pytest.fixture
def physical_movie():
    return Movie(title="Tenet", kind=MovieKind.PHYSICAL)


@pytest.fixture
def app_services():
    """Empty service container for console tests."""
    return AppServices.create(AppConfig(seed_demo_data=False))


@pytest.fixture
def run_console(app_services):
    """Run a console session over scripted input and collect its output."""

    def _run(lines: Iterable[str]):
        output: List[str] = []
        app = ConsoleApp(
            app_services,
            input_func=scripted_input(lines),
            output_func=output.append,
        )
        exit_code = app.run()
        return exit_code, output

    return _run
