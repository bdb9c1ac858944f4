"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and translate them into
user-friendly messages and status codes.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or input constraint was violated.

    ``errors`` optionally carries one entry per offending field so callers
    can report every violation at once.
    """

    def __init__(self, message: str, errors: list[dict] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class EntityNotFoundError(DomainException):
    """A requested entity does not exist (or is not visible to the caller)."""


class AuthenticationError(DomainException):
    """The caller could not be identified."""


class PermissionDeniedError(DomainException):
    """The caller is identified but lacks the required role."""


class ConflictError(DomainException):
    """The entity being created already exists."""
