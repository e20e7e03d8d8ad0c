"""
Custom exceptions for the NFT Registry API.

Recoverable failures of registry operations are ``OperationError`` subclasses,
one per result variant. Broken internal invariants derive from
``RegistryInvariantError`` and are never turned into user-facing results.
"""

from typing import Any


class OperationError(Exception):
    """Base exception for all registry operation failures."""

    def __init__(
        self,
        error: str,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        self.error = error
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to response dictionary."""
        response = {
            "error": self.error,
            "message": self.message,
        }
        if self.details:
            response["details"] = self.details
        return response


class NotAuthorized(OperationError):
    """403 - Caller is not the current controller."""

    def __init__(self, message: str = "Caller is not the registry controller"):
        super().__init__(
            error="not_authorized",
            message=message,
            status_code=403,
        )


class NonExistentItem(OperationError):
    """404 - No record is registered under the identifier."""

    def __init__(self, identifier: str, message: str | None = None):
        super().__init__(
            error="non_existent_item",
            message=message or f"No record registered for '{identifier}'",
            status_code=404,
            details={"identifier": identifier},
        )


class BadParameters(OperationError):
    """400 - Record failed field validation or could not be decoded."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            error="bad_parameters",
            message=message,
            status_code=400,
            details=details,
        )


class Unknown(OperationError):
    """500 - Failure whose cause lies outside the registry core."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            error="unknown",
            message=message,
            status_code=500,
            details=details,
        )


class UnauthorizedException(OperationError):
    """401 - Missing or invalid bearer token."""

    def __init__(self, message: str = "Valid token required"):
        super().__init__(
            error="unauthorized",
            message=message,
            status_code=401,
        )


class StorageException(Unknown):
    """500 - Snapshot storage backend error."""


class RegistryInvariantError(RuntimeError):
    """An internal invariant was violated by the hosting environment."""


class ControllerNotInitializedError(RegistryInvariantError):
    """Controller state was read before the service was initialized."""


class ControllerAlreadyInitializedError(RegistryInvariantError):
    """initialize() was called on a service that already has a controller."""


class SnapshotInvariantError(RegistryInvariantError):
    """A snapshot was imported into a registry that is not empty."""
