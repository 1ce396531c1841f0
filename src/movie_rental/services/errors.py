"""Custom service layer errors."""

from __future__ import annotations


class ServiceError(Exception):
    """Base error for service-layer failures."""


class ValidationError(ServiceError):
    """Raised when a business rule validation fails."""


class NotFoundError(ServiceError):
    """Raised when an entity is not found."""


class AlreadyRentedError(ValidationError):
    """Raised when renting a movie that is already out."""

    def __init__(self, title: str) -> None:
        super().__init__(f"'{title}' is already rented.")
        self.title = title


class NotRentedError(ValidationError):
    """Raised when returning a movie that was not rented."""

    def __init__(self, title: str) -> None:
        super().__init__(f"'{title}' was not rented.")
        self.title = title


class InvalidKindError(ValidationError):
    """Raised for an unrecognized movie type selector."""

    def __init__(self, selector: str) -> None:
        super().__init__(
            f"Unknown movie type '{selector}'. Use 'd' for digital or 'p' for physical."
        )
        self.selector = selector


class InvalidMenuChoiceError(ValidationError):
    """Raised for a menu selection outside the offered options."""

    def __init__(self, choice: str) -> None:
        super().__init__(f"Invalid choice '{choice}'.")
        self.choice = choice


class IndexOutOfRangeError(ValidationError, IndexError):
    """Raised when a selection index falls outside a listing."""

    def __init__(self, index: int, size: int) -> None:
        if size == 0:
            message = f"Index {index} is out of range (no entries)."
        else:
            message = f"Index {index} is out of range (0-{size - 1})."
        super().__init__(message)
        self.index = index
        self.size = size


class CustomerNotFoundError(NotFoundError):
    """Raised when a customer name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Customer '{name}' not found.")
        self.name = name


class NotFoundInLedgerError(NotFoundError):
    """Raised when a movie is not among a customer's active rentals."""

    def __init__(self, customer: str, title: str) -> None:
        super().__init__(f"'{title}' is not rented by {customer}.")
        self.customer = customer
        self.title = title
