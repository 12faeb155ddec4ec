"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class EmptyCartError(DomainException):
    """Checkout was attempted on a cart with no items."""


class AuthenticationError(DomainException):
    """Credentials did not match an active account."""


class AuthorizationError(DomainException):
    """The acting user may not perform this operation."""


class RepositoryError(DomainException):
    """The backing store could not be read or written."""


class CheckoutFailedError(DomainException):
    """The order could not be persisted; the cart was left untouched."""
