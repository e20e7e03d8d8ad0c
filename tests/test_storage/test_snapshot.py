"""
Tests for snapshot persistence.
"""

import math

import pytest

from nft_registry.core.exceptions import StorageException
from nft_registry.models import FloatValue, PrincipalValue, SliceValue, VecValue
from nft_registry.storage import SnapshotStore


class TestSnapshotStore:
    """Tests for saving and loading registry snapshots."""

    @pytest.mark.asyncio
    async def test_load_missing(self, snapshot_store: SnapshotStore):
        """No stored snapshot loads as None."""
        assert await snapshot_store.load("nft") is None

    @pytest.mark.asyncio
    async def test_save_and_load(self, snapshot_store: SnapshotStore, canister_factory):
        """Stored entries come back equal, including nested and binary details."""
        details = (("standard", VecValue(value=(
            PrincipalValue(value="aaaaa-aa"),
            SliceValue(value=b"\x00\x01\xfe"),
        ))),)
        entries = [
            ("p1", canister_factory("p1")),
            ("p2", canister_factory("p2", frontend="https://p2.example.org", details=details)),
        ]

        path = await snapshot_store.save("nft", entries)
        loaded = await snapshot_store.load("nft")

        assert path == "snapshots/nft.json"
        assert loaded == entries

    @pytest.mark.asyncio
    async def test_save_empty(self, snapshot_store: SnapshotStore):
        """An empty registry still produces a snapshot."""
        await snapshot_store.save("tokens", [])

        assert await snapshot_store.load("tokens") == []

    @pytest.mark.asyncio
    async def test_registries_are_separate(self, snapshot_store: SnapshotStore, canister_factory):
        await snapshot_store.save("nft", [("p1", canister_factory("p1"))])

        assert await snapshot_store.load("tokens") is None

    @pytest.mark.asyncio
    async def test_corrupt_snapshot(self, snapshot_store: SnapshotStore, test_storage):
        await test_storage.upload_bytes(b'{"not": "a list"}', "snapshots/nft.json", "application/json")

        with pytest.raises(StorageException):
            await snapshot_store.load("nft")

    @pytest.mark.asyncio
    async def test_discard(self, snapshot_store: SnapshotStore):
        await snapshot_store.save("nft", [])

        assert await snapshot_store.discard("nft") is True
        assert await snapshot_store.load("nft") is None

    @pytest.mark.asyncio
    async def test_non_finite_floats(self, snapshot_store: SnapshotStore, canister_factory, test_storage):
        """Infinities and NaN are stored as JSON constants and read back."""
        entries = [
            (key, canister_factory(key, details=(("standard", FloatValue(value=value)),)))
            for key, value in [("pos", math.inf), ("neg", -math.inf), ("nan", math.nan)]
        ]

        await snapshot_store.save("nft", entries)
        raw = await test_storage.download_bytes("snapshots/nft.json")
        loaded = dict(await snapshot_store.load("nft"))

        assert b"null" not in raw
        assert loaded["pos"].details[0][1].value == math.inf
        assert loaded["neg"].details[0][1].value == -math.inf
        assert math.isnan(loaded["nan"].details[0][1].value)
