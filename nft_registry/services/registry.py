"""
In-memory registry of canister records keyed by principal id.
"""

from collections.abc import Iterable

from nft_registry.core.exceptions import NonExistentItem, SnapshotInvariantError
from nft_registry.models.canister import CanisterInfo

SnapshotEntry = tuple[str, CanisterInfo]


class Registry:
    """Map of principal id to record. Inserting an existing key overwrites it."""

    def __init__(self) -> None:
        self._records: dict[str, CanisterInfo] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, principal_id: object) -> bool:
        return principal_id in self._records

    def insert(self, canister: CanisterInfo) -> None:
        """Insert or replace the record stored under its principal id."""
        self._records[canister.principal_id] = canister

    def remove(self, principal_id: str) -> None:
        """
        Remove the record stored under a principal id.

        Raises:
            NonExistentItem: If nothing is registered under the id
        """
        if self._records.pop(principal_id, None) is None:
            raise NonExistentItem(principal_id)

    def lookup(self, principal_id: str) -> CanisterInfo | None:
        return self._records.get(principal_id)

    def list_all(self) -> list[CanisterInfo]:
        return list(self._records.values())

    def export_snapshot(self) -> list[SnapshotEntry]:
        """
        Drain the registry and return its former contents.

        The registry is empty afterwards.
        """
        records, self._records = self._records, {}
        return list(records.items())

    def import_snapshot(self, entries: Iterable[SnapshotEntry]) -> None:
        """
        Load previously exported entries into an empty registry.

        Raises:
            SnapshotInvariantError: If the registry already holds records
        """
        if self._records:
            raise SnapshotInvariantError(
                f"Cannot import snapshot into a registry holding {len(self._records)} records"
            )
        self._records = dict(entries)
