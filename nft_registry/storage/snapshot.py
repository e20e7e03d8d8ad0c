"""
Durable storage for registry snapshots.

A snapshot is the list of (principal id, record) pairs drained from a
registry at shutdown. It is stored as JSON, one object per registry.
"""

import logging

from pydantic import ConfigDict, TypeAdapter, ValidationError

from nft_registry.config import get_settings
from nft_registry.core.exceptions import StorageException
from nft_registry.models.canister import CanisterInfo
from nft_registry.services.registry import SnapshotEntry
from nft_registry.storage.base import StorageBackend

logger = logging.getLogger(__name__)
settings = get_settings()

_snapshot_adapter = TypeAdapter(
    list[tuple[str, CanisterInfo]],
    config=ConfigDict(ser_json_inf_nan="constants"),
)


class SnapshotStore:
    """Saves and loads registry snapshots through a storage backend."""

    def __init__(self, backend: StorageBackend, prefix: str | None = None):
        self.backend = backend
        self.prefix = (prefix or settings.SNAPSHOT_PREFIX).strip("/")

    def path_for(self, registry_key: str) -> str:
        return f"{self.prefix}/{registry_key}.json"

    async def save(self, registry_key: str, entries: list[SnapshotEntry]) -> str:
        """
        Persist a snapshot, replacing any previous one for the registry.

        Returns:
            Storage path of the snapshot
        """
        data = _snapshot_adapter.dump_json(entries)
        path = await self.backend.upload_bytes(data, self.path_for(registry_key), "application/json")
        logger.info(f"Saved snapshot of {len(entries)} records to {path}")
        return path

    async def load(self, registry_key: str) -> list[SnapshotEntry] | None:
        """
        Load the stored snapshot for a registry.

        Returns:
            The stored entries, or None if no snapshot was ever saved

        Raises:
            StorageException: If the stored snapshot cannot be decoded
        """
        path = self.path_for(registry_key)
        if not await self.backend.exists(path):
            return None

        data = await self.backend.download_bytes(path)
        try:
            return _snapshot_adapter.validate_json(data)
        except ValidationError as e:
            raise StorageException(
                message=f"Corrupt snapshot at {path}",
                details={"path": path, "errors": e.error_count()},
            )

    async def discard(self, registry_key: str) -> bool:
        return await self.backend.delete(self.path_for(registry_key))
