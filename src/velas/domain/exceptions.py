"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class DuplicateCategoryError(ValidationError):
    """A category price already exists under the same name (case-insensitive)."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class NegativeBalanceError(DomainException):
    """A jar-credit adjustment would leave a customer with a negative balance."""


class ConcurrencyConflictError(DomainException):
    """A concurrent write won the race; the caller may retry the operation."""
