"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the interactive session can catch them uniformly and print a
user-friendly message instead of aborting.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class UnknownMenuItemError(DomainException):
    """A requested menu item is not part of the catalog."""


class EmptyOrderError(DomainException):
    """Payment was requested for an order without items."""
