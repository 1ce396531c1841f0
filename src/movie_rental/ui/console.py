"""Menu-driven console front end."""

from __future__ import annotations

from typing import Callable, Optional

from movie_rental.logging_config import get_logger
from movie_rental.services.errors import (
    InvalidMenuChoiceError,
    ServiceError,
    ValidationError,
)
from movie_rental.services.rental_service import RentalService
from movie_rental.ui import strings
from movie_rental.ui.app_services import AppServices

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]

EXIT_OK = 0
EXIT_INPUT_CLOSED = 1


def _read_int(input_func: InputFunc, prompt: str) -> int:
    raw = input_func(prompt).strip()
    try:
        return int(raw)
    except ValueError as exc:
        raise ValidationError(strings.MSG_NOT_A_NUMBER) from exc


class ConsoleApp:
    """Reads menu selections and dispatches them to the rental service.

    Every ``ServiceError`` raised by an action is reported as a single line
    and the loop carries on. Only a closed or interrupted input stream ends
    the session early.
    """

    def __init__(
        self,
        services: AppServices,
        input_func: Optional[InputFunc] = None,
        output_func: Optional[OutputFunc] = None,
    ) -> None:
        self._services = services
        self._input = input_func or input
        self._output = output_func or print
        self._running = False
        self._logger = get_logger(self.__class__.__name__)
        self._actions: dict[int, Callable[[], None]] = {
            1: self.add_customer,
            2: self.add_movie,
            3: self.rent_movie,
            4: self.return_movie,
            5: self.show_all_movies,
            6: self.show_history,
            7: self.exit,
        }

    @property
    def rental_service(self) -> RentalService:
        return self._services.rental_service

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> int:
        self._running = True
        self._logger.info("Console session started")
        while self._running:
            self._print_menu()
            try:
                choice = self._input(strings.PROMPT_CHOICE)
                self.handle_choice(choice)
            except ServiceError as exc:
                self._logger.info("Action failed: %s", exc)
                self._output(strings.MSG_ERROR.format(message=exc))
            except (EOFError, KeyboardInterrupt):
                self._logger.warning("Input stream closed; ending session")
                self._output(strings.MSG_INPUT_CLOSED)
                self._running = False
                return EXIT_INPUT_CLOSED
        self._logger.info("Console session ended")
        return EXIT_OK

    def handle_choice(self, choice: str) -> None:
        raw = choice.strip()
        try:
            action = self._actions[int(raw)]
        except (ValueError, KeyError) as exc:
            raise InvalidMenuChoiceError(raw) from exc
        action()

    def _print_menu(self) -> None:
        self._output("")
        self._output(strings.MENU_TITLE)
        for option in strings.MENU_OPTIONS:
            self._output(option)

    def add_customer(self) -> None:
        self._output(strings.HEADER_NEW_CUSTOMER)
        name = self._input(strings.PROMPT_CUSTOMER_NAME).strip()
        if self.rental_service.add_customer(name):
            self._output(strings.MSG_CUSTOMER_ADDED.format(name=name))
        else:
            self._output(strings.MSG_CUSTOMER_EXISTS.format(name=name))

    def add_movie(self) -> None:
        self._output(strings.HEADER_NEW_MOVIE)
        title = self._input(strings.PROMPT_MOVIE_TITLE)
        selector = self._input(strings.PROMPT_MOVIE_KIND)
        movie = self.rental_service.add_movie(title, selector)
        self._output(
            strings.MSG_MOVIE_ADDED.format(
                kind=strings.movie_kind_label(movie.kind), title=movie.title
            )
        )

    def rent_movie(self) -> None:
        self._output(strings.HEADER_RENT)
        customer = self.rental_service.require_customer(
            self._input(strings.PROMPT_CUSTOMER_NAME)
        )
        available = list(self.rental_service.catalog.list_available_indexed())
        if not available:
            self._output(strings.MSG_NO_AVAILABLE)
            return
        self._output(strings.LABEL_AVAILABLE_MOVIES)
        for index, movie in available:
            self._output(f"{index}. {movie.title}")
        index = _read_int(self._input, strings.PROMPT_RENT_INDEX)
        movie = self.rental_service.rent_movie(customer, index)
        self._output(strings.MSG_RENTED.format(title=movie.title, customer=customer))

    def return_movie(self) -> None:
        self._output(strings.HEADER_RETURN)
        customer = self.rental_service.require_customer(
            self._input(strings.PROMPT_CUSTOMER_NAME)
        )
        held = self.rental_service.active_rentals(customer)
        if not held:
            self._output(strings.MSG_NO_RENTALS)
            return
        self._output(strings.LABEL_RENTED_MOVIES)
        for index, movie in enumerate(held):
            self._output(f"{index}. {movie.title}")
        self._output(
            strings.MSG_OUTSTANDING.format(
                fee=strings.format_fee(self.rental_service.outstanding_fees(customer))
            )
        )
        index = _read_int(self._input, strings.PROMPT_RETURN_INDEX)
        movie = self.rental_service.held_rental(customer, index)
        days = _read_int(self._input, strings.PROMPT_DAYS)
        fee = self.rental_service.return_movie(customer, index, days)
        self._output(
            strings.MSG_RETURNED.format(title=movie.title, fee=strings.format_fee(fee))
        )

    def show_all_movies(self) -> None:
        self._output(strings.HEADER_ALL_MOVIES)
        for title, status in self.rental_service.catalog.list_all():
            self._output(f"{title} ({status})")

    def show_history(self) -> None:
        self._output(strings.HEADER_HISTORY)
        events = self.rental_service.sorted_history()
        if not events:
            self._output(strings.MSG_NO_HISTORY)
            return
        for event in events:
            self._output(event.description)

    def exit(self) -> None:
        self._running = False
        self._output(strings.MSG_FAREWELL)
