"""
Domain Exceptions

Raised by value objects and entities when an invariant would be broken.
The application layer converts these into InvalidInputError.
"""


class DomainError(Exception):
    """Base class for portfolio domain rule violations."""


class InvalidValueError(DomainError):
    """Malformed amount, percentage, symbol or entity field."""


class CurrencyMismatchError(DomainError):
    """Money arithmetic or comparison across two currencies."""

    def __init__(self, message: str = "Cannot combine amounts in different currencies"):
        super().__init__(message)
