"""
Storage backend factory.
Provides configuration-driven backend selection.
"""

from functools import lru_cache

from nft_registry.config import get_settings
from nft_registry.storage.base import StorageBackend

settings = get_settings()


@lru_cache
def get_storage_backend() -> StorageBackend:
    """
    Get the configured storage backend.

    Uses LRU cache to ensure only one instance is created. Cloud backends
    are imported lazily so their SDKs are only needed when selected.

    Raises:
        ValueError: If unknown storage backend is configured
    """
    backend = settings.STORAGE_BACKEND.lower()

    if backend == "local":
        from nft_registry.storage.local import LocalStorageBackend

        return LocalStorageBackend()
    elif backend == "s3":
        from nft_registry.storage.s3 import S3StorageBackend

        return S3StorageBackend()
    elif backend == "azure":
        from nft_registry.storage.azure import AzureStorageBackend

        return AzureStorageBackend()
    else:
        raise ValueError(f"Unknown storage backend: {backend}")
