"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP boundary and the CLI can catch them uniformly and turn them
into client errors.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """One or more business rules were violated.

    Carries every violated rule, not just the first one, so a single
    request produces a single error listing all problems.
    """

    def __init__(self, message: str | list[str]) -> None:
        self.errors = [message] if isinstance(message, str) else list(message)
        super().__init__(", ".join(self.errors))


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InsufficientStockError(DomainException):
    """A stock adjustment would drive a product's stock below zero."""


class InvalidStatusError(DomainException):
    """An order status value is not one of the recognised statuses."""


class InvalidTransitionError(DomainException):
    """The order's current status does not allow the requested operation."""
