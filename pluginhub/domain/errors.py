"""Domain error hierarchy for clean exception handling."""
from __future__ import annotations


class DomainError(Exception):
    """Base for all domain errors."""


class InvalidIdentifierError(DomainError):
    """Combined plugin id is malformed."""


class NotFoundError(DomainError):
    """Resource not found."""


class UnauthorizedError(DomainError):
    """Registry entry missing or the caller may not use it."""


class VersionNotFoundError(DomainError):
    """No usable version could be resolved for an app."""
