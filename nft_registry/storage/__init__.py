"""
Snapshot storage layer for the NFT Registry API.
Supports multiple backends: Local filesystem, S3/MinIO, Azure Blob.
"""

from nft_registry.storage.base import StorageBackend
from nft_registry.storage.local import LocalStorageBackend
from nft_registry.storage.factory import get_storage_backend
from nft_registry.storage.snapshot import SnapshotStore

__all__ = [
    "StorageBackend",
    "LocalStorageBackend",
    "SnapshotStore",
    "get_storage_backend",
]
