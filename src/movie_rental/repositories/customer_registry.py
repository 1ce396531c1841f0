"""In-memory customer registry."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Set

from movie_rental.logging_config import get_logger
from movie_rental.services.errors import ValidationError


def normalize_name(name: str) -> str:
    normalized = name.strip()
    if not normalized:
        raise ValidationError("Customer name cannot be empty.")
    return normalized


class CustomerRegistry:
    """Set of known customer names."""

    def __init__(self, names: Optional[Iterable[str]] = None) -> None:
        self._names: Set[str] = {normalize_name(name) for name in names or []}
        self._logger = get_logger(self.__class__.__name__)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.exists(name)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def register(self, name: str) -> bool:
        """Add ``name``; return False when it was already registered."""
        name = normalize_name(name)
        if name in self._names:
            self._logger.info("Customer '%s' already registered", name)
            return False
        self._names.add(name)
        self._logger.info("Registered customer '%s'", name)
        return True

    def exists(self, name: str) -> bool:
        return name.strip() in self._names
