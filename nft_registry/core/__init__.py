"""Core exceptions for the NFT Registry API."""

from nft_registry.core.exceptions import (
    OperationError,
    NotAuthorized,
    NonExistentItem,
    BadParameters,
    Unknown,
    UnauthorizedException,
    StorageException,
    RegistryInvariantError,
    ControllerNotInitializedError,
    ControllerAlreadyInitializedError,
    SnapshotInvariantError,
)

__all__ = [
    "OperationError",
    "NotAuthorized",
    "NonExistentItem",
    "BadParameters",
    "Unknown",
    "UnauthorizedException",
    "StorageException",
    "RegistryInvariantError",
    "ControllerNotInitializedError",
    "ControllerAlreadyInitializedError",
    "SnapshotInvariantError",
]
