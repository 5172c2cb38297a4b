"""Domain-level exceptions.

All invariant violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException, ValueError):
    """An argument or invariant was invalid."""


class OutOfRangeError(ValidationError):
    """A numeric argument fell outside its allowed range."""


class MissingArgumentError(ValidationError, TypeError):
    """A required object or sequence argument was None."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CorruptAggregateError(DomainException):
    """Persisted state violates an aggregate invariant."""
