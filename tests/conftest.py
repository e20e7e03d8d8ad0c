"""
Pytest configuration and fixtures for NFT Registry API tests.
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from nft_registry.main import app
from nft_registry.models import CanisterInfo, TextValue
from nft_registry.services import RegistryService, get_registry_services
from nft_registry.storage import LocalStorageBackend, SnapshotStore

CONTROLLER_ID = "controller-alice"
STRANGER_ID = "stranger-bob"


@pytest.fixture
def controller_id() -> str:
    return CONTROLLER_ID


@pytest.fixture
def stranger_id() -> str:
    return STRANGER_ID


@pytest.fixture
def registry_services() -> dict[str, RegistryService]:
    """Fresh, initialized registry services."""
    services = {
        "nft": RegistryService("NFT Registry Canister"),
        "tokens": RegistryService("Token Registry Canister"),
    }
    for service in services.values():
        service.initialize(CONTROLLER_ID)
    return services


@pytest.fixture
def nft_service(registry_services) -> RegistryService:
    return registry_services["nft"]


@pytest_asyncio.fixture(scope="function")
async def client(registry_services) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client backed by the fixture services."""
    app.dependency_overrides[get_registry_services] = lambda: registry_services

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def test_storage(tmp_path) -> LocalStorageBackend:
    """Create a test storage backend."""
    return LocalStorageBackend(base_path=str(tmp_path / "storage"))


@pytest.fixture
def snapshot_store(test_storage) -> SnapshotStore:
    return SnapshotStore(test_storage, prefix="snapshots")


def _build_canister(principal_id: str = "xtc-principal", **overrides: Any) -> CanisterInfo:
    """Build a valid record, overriding any field."""
    fields: dict[str, Any] = {
        "name": "xtc",
        "description": "XTC is your cycles wallet.",
        "thumbnail": "https://google.com",
        "frontend": None,
        "principal_id": principal_id,
        "details": (("standard", TextValue(value="Dank")),),
    }
    fields.update(overrides)
    return CanisterInfo(**fields)


@pytest.fixture
def canister_factory():
    """Factory for valid records with per-test overrides."""
    return _build_canister


@pytest.fixture
def sample_canister() -> CanisterInfo:
    return _build_canister()


@pytest.fixture
def sample_canister_data() -> dict[str, Any]:
    """Sample record as sent over the wire."""
    return {
        "name": "xtc",
        "description": "XTC is your cycles wallet.",
        "thumbnail": "https://google.com",
        "frontend": "https://xtc.example.org",
        "principal_id": "xtc-principal",
        "details": [["standard", {"kind": "text", "value": "Dank"}]],
    }


@pytest.fixture
def controller_headers() -> dict[str, str]:
    """Headers identifying the controller (dev mode)."""
    return {"X-Caller-Id": CONTROLLER_ID}


@pytest.fixture
def stranger_headers() -> dict[str, str]:
    """Headers identifying a caller who is not the controller."""
    return {"X-Caller-Id": STRANGER_ID}
