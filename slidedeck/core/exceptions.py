"""
Custom exception classes for slidedeck.

Only storage failures at directory level and explicit lookups raise;
everyday malformed slide files are handled without exceptions.
"""

from typing import Any


class SlideDeckError(Exception):
    """Base exception class for all slidedeck exceptions."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize slidedeck exception.

        Args:
            message: Human-readable error message
            details: Additional error details
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class StorageError(SlideDeckError):
    """Raised when a storage operation fails."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message=f"Storage error: {message}", details=details)


class StorageReadError(StorageError):
    """Raised when a single file cannot be read."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        message = f"cannot read {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message, details={"path": path})
        self.path = path


class FrontMatterError(SlideDeckError):
    """Raised when front matter fields cannot be written as header lines."""


class ResourceNotFoundError(SlideDeckError):
    """Raised when requested resource doesn't exist."""

    def __init__(self, resource: str, identifier: str | None = None) -> None:
        message = f"{resource} not found"
        if identifier:
            message += f": {identifier}"
        super().__init__(message=message)


class ResourceConflictError(SlideDeckError):
    """Raised when resource operation conflicts with current state."""


class ValidationError(SlideDeckError):
    """Raised when input validation fails."""
