"""
Abstract storage backend interface.
Defines the contract for all snapshot storage implementations.
"""

from abc import ABC, abstractmethod


class StorageBackend(ABC):
    """
    Abstract base class for storage backends.

    All storage implementations (Local, S3, Azure) must implement
    these methods to ensure consistent behavior across backends.
    """

    @abstractmethod
    async def upload_bytes(self, data: bytes, path: str, content_type: str) -> str:
        """
        Upload raw bytes to storage, replacing any existing object.

        Args:
            data: Raw bytes
            path: Destination path in storage (e.g., "snapshots/nft.json")
            content_type: MIME type of the content

        Returns:
            The storage path where the data was saved

        Raises:
            StorageException: If upload fails
        """
        pass

    @abstractmethod
    async def download_bytes(self, path: str) -> bytes:
        """
        Download an entire object as bytes.

        Raises:
            StorageException: If not found or download fails
        """
        pass

    @abstractmethod
    async def delete(self, path: str) -> bool:
        """
        Delete an object from storage.

        Returns:
            True if deleted successfully, False if it didn't exist

        Raises:
            StorageException: If deletion fails for other reasons
        """
        pass

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Check if an object exists in storage."""
        pass
