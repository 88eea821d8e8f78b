"""Domain-level exceptions.

All rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidArgumentError(DomainException, ValueError):
    """A caller supplied an argument the ledger cannot accept."""


class DuplicateProductError(InvalidArgumentError):
    """A product with the given id is already registered."""


class ProductNotFoundError(InvalidArgumentError):
    """No product with the given id is registered."""
