"""Domain-level exceptions.

Every rejected operation raises a subclass of DomainException before any
state is touched, so the CLI layer can catch them uniformly and the caller
can correct the input and resubmit.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was malformed or out of range."""


class NotFoundError(DomainException):
    """A referenced product does not exist."""
