"""Error hierarchy for Aura.

Error layers:
- AuraError: Base class for all Aura errors
- DomainError: Invalid input, missing resources, malformed images (4xx responses)
- InfrastructureError: Registry/runtime and storage failures (503 responses)

These errors are mapped to HTTP responses by aura.application.api.errors.
"""

import copy
from typing import Self


class AuraError(Exception):
    """Base class for all Aura errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)

    def wrap(self, context: str) -> Self:
        """Return a copy of this error with its message prefixed by context."""
        wrapped = copy.copy(self)
        wrapped.message = f"{context}: {self.message}"
        wrapped.args = (wrapped.message,)
        return wrapped


# =============================================================================
# Domain Errors (business logic violations - typically 4xx)
# =============================================================================


class DomainError(AuraError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """App or release not found."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class InvalidFormatError(DomainError):
    """Malformed image reference."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="INVALID_FORMAT")


class ArchiveError(DomainError):
    """Archive extracted from an image has an unexpected shape."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="ARCHIVE_ERROR")


# =============================================================================
# Infrastructure Errors (system-level failures - typically 503)
# =============================================================================


class InfrastructureError(AuraError):
    """Base class for infrastructure/system errors."""


class TransientIOError(InfrastructureError):
    """Container registry/runtime call failed (pull, inspect, create, download)."""


class StorageError(InfrastructureError):
    """Database transaction, lock, lookup, insert or commit failed."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
