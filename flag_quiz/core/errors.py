"""Exceptions raised while preparing or running a flag quiz."""

from __future__ import annotations


class FlagQuizError(Exception):
    """Base class for quiz setup failures."""


class LoadError(FlagQuizError):
    """Raised when the country listing cannot be read or is malformed."""


class InsufficientCatalogError(FlagQuizError):
    """Raised when a quiz asks for more rounds or choices than the catalog holds."""

    def __init__(self, requested: int, available: int, what: str = "countries") -> None:
        super().__init__(
            f"Requested {requested} {what} but the catalog only supports {available}."
        )
        self.requested = requested
        self.available = available


class DivisionUndefined(FlagQuizError, ZeroDivisionError):
    """Raised when accuracy is requested before any guess was made."""
