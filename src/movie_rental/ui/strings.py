"""Centralized console strings for consistent communication."""

from __future__ import annotations

from movie_rental.config import CURRENCY_LABEL
from movie_rental.domain.models import MovieKind
from movie_rental.version import __app_name__

APP_NAME = __app_name__

MENU_TITLE = f"--- {APP_NAME} ---"
MENU_OPTIONS = (
    "1. Add a new customer",
    "2. Add a new movie",
    "3. Rent a movie",
    "4. Return a movie",
    "5. Show all movies",
    "6. Show rental history",
    "7. Exit",
)
PROMPT_CHOICE = "Choose: "

HEADER_NEW_CUSTOMER = "--- Welcome New Customer ---"
HEADER_NEW_MOVIE = "--- Add a Movie ---"
HEADER_RENT = "--- Rent a Movie ---"
HEADER_RETURN = "--- Return a Movie ---"
HEADER_ALL_MOVIES = "--- All Movies ---"
HEADER_HISTORY = "--- Rental History (Sorted) ---"

PROMPT_CUSTOMER_NAME = "Customer name: "
PROMPT_MOVIE_TITLE = "Movie title: "
PROMPT_MOVIE_KIND = "Is it digital or physical? (d/p): "
PROMPT_RENT_INDEX = "Enter movie index to rent: "
PROMPT_RETURN_INDEX = "Enter movie index to return: "
PROMPT_DAYS = "Days rented: "

LABEL_AVAILABLE_MOVIES = "Available movies:"
LABEL_RENTED_MOVIES = "Rented movies:"

MSG_CUSTOMER_ADDED = "Customer '{name}' added successfully."
MSG_CUSTOMER_EXISTS = "Customer '{name}' already exists."
MSG_MOVIE_ADDED = "{kind} movie '{title}' added."
MSG_RENTED = "'{title}' has been rented to {customer}."
MSG_RETURNED = "'{title}' has been returned. Total fee: {fee}"
MSG_OUTSTANDING = "Currently owed for these rentals: {fee}"
MSG_NO_AVAILABLE = "No movies are available right now."
MSG_NO_RENTALS = "No movies rented by this customer."
MSG_NO_HISTORY = "No rentals recorded yet."
MSG_NOT_A_NUMBER = "Please enter a whole number."
MSG_ERROR = "Error: {message}"
MSG_FAREWELL = f"Thank you for using the {APP_NAME}. Exiting!"
MSG_INPUT_CLOSED = "Input closed. Exiting."


def movie_kind_label(kind: MovieKind | str) -> str:
    if isinstance(kind, MovieKind):
        normalized = kind.value
    else:
        normalized = str(kind)
    if normalized == MovieKind.PHYSICAL.value:
        return "Physical"
    return "Digital"


def format_fee(amount: float) -> str:
    return f"{CURRENCY_LABEL} {amount:.2f}"
