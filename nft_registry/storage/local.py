"""
Local filesystem storage backend.
Stores snapshots on the local filesystem for development and single-node deployments.
"""

from pathlib import Path

import aiofiles
import aiofiles.os

from nft_registry.config import get_settings
from nft_registry.core.exceptions import StorageException
from nft_registry.storage.base import StorageBackend

settings = get_settings()


class LocalStorageBackend(StorageBackend):
    """
    Local filesystem storage implementation.

    Files are stored under the configured LOCAL_STORAGE_PATH directory.
    """

    def __init__(self, base_path: str | None = None):
        self.base_path = Path(base_path or settings.LOCAL_STORAGE_PATH)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _get_full_path(self, path: str) -> Path:
        return self.base_path / path

    async def upload_bytes(self, data: bytes, path: str, content_type: str) -> str:
        """Write bytes via a temporary file so a crash never leaves a partial snapshot."""
        full_path = self._get_full_path(path)
        tmp_path = full_path.with_name(full_path.name + ".tmp")

        try:
            full_path.parent.mkdir(parents=True, exist_ok=True)

            async with aiofiles.open(tmp_path, "wb") as f:
                await f.write(data)
            await aiofiles.os.replace(tmp_path, full_path)

            return path

        except OSError as e:
            raise StorageException(
                message=f"Failed to write {path}: {str(e)}",
                details={"path": path},
            )

    async def download_bytes(self, path: str) -> bytes:
        full_path = self._get_full_path(path)

        if not full_path.exists():
            raise StorageException(
                message=f"File not found: {path}",
                details={"path": path},
            )

        try:
            async with aiofiles.open(full_path, "rb") as f:
                return await f.read()

        except OSError as e:
            raise StorageException(
                message=f"Failed to read {path}: {str(e)}",
                details={"path": path},
            )

    async def delete(self, path: str) -> bool:
        full_path = self._get_full_path(path)

        if not full_path.exists():
            return False

        try:
            await aiofiles.os.remove(full_path)
            return True

        except OSError as e:
            raise StorageException(
                message=f"Failed to delete {path}: {str(e)}",
                details={"path": path},
            )

    async def exists(self, path: str) -> bool:
        return self._get_full_path(path).exists()
