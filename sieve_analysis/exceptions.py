"""
Errors raised by the sieve stack.

Every error is raised at the point of violation, before any mutation, so a
failed call leaves the stack exactly as it was.
"""


class SieveAnalysisError(Exception):
    """Base class for all sieve analysis errors."""


class ValidationError(SieveAnalysisError, ValueError):
    """A sieve size or units system is not acceptable."""


class DuplicateSizeError(ValidationError):
    """A sieve of this size (or a second pan) is already in the stack."""


class EmptyStackError(SieveAnalysisError):
    """The stack holds no sieves at all. Only reachable if its entries were tampered with."""


class NotFoundError(SieveAnalysisError, LookupError):
    """No sieve of the requested size is in the stack."""


class ProtectedEntryError(SieveAnalysisError):
    """The pan can't be removed, every stack ends in exactly one pan."""


class MissingSampleDataError(SieveAnalysisError, ValueError):
    """Percent passing needs a non-zero dry mass and at least one sieve."""
