"""
Tests for registry endpoints.
"""

import json
import math

import pytest
from httpx import AsyncClient

BASE = "/api/v1/nft"


@pytest.mark.asyncio
async def test_registry_name(client: AsyncClient):
    """Each hosted registry reports its display name."""
    nft = await client.get("/api/v1/nft/name")
    tokens = await client.get("/api/v1/tokens/name")

    assert nft.json() == {"name": "NFT Registry Canister"}
    assert tokens.json() == {"name": "Token Registry Canister"}


@pytest.mark.asyncio
async def test_unknown_registry(client: AsyncClient):
    response = await client.get("/api/v1/nope/canisters")

    assert response.status_code == 404
    assert response.json()["error"] == "non_existent_item"


@pytest.mark.asyncio
async def test_list_empty(client: AsyncClient):
    response = await client.get(f"{BASE}/canisters")

    assert response.status_code == 200
    assert response.json() == {"items": [], "total": 0}


@pytest.mark.asyncio
async def test_add_and_get(
    client: AsyncClient,
    sample_canister_data: dict,
    controller_headers: dict,
):
    """The controller adds a record; anyone can read it back."""
    response = await client.post(
        f"{BASE}/canisters",
        json=sample_canister_data,
        headers=controller_headers,
    )

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}

    response = await client.get(f"{BASE}/canisters/xtc-principal")

    assert response.status_code == 200
    assert response.json() == sample_canister_data


@pytest.mark.asyncio
async def test_get_missing(client: AsyncClient):
    response = await client.get(f"{BASE}/canisters/missing")

    assert response.status_code == 404
    assert response.json()["error"] == "non_existent_item"


@pytest.mark.asyncio
async def test_add_by_stranger(
    client: AsyncClient,
    sample_canister_data: dict,
    stranger_headers: dict,
):
    response = await client.post(
        f"{BASE}/canisters",
        json=sample_canister_data,
        headers=stranger_headers,
    )

    assert response.status_code == 403
    assert response.json()["error"] == "not_authorized"


@pytest.mark.asyncio
async def test_stranger_never_sees_validation_error(
    client: AsyncClient,
    sample_canister_data: dict,
    stranger_headers: dict,
):
    """Authorization is reported even when the record is also invalid."""
    sample_canister_data["details"] = []

    response = await client.post(
        f"{BASE}/canisters",
        json=sample_canister_data,
        headers=stranger_headers,
    )

    assert response.status_code == 403


@pytest.mark.asyncio
@pytest.mark.parametrize("field,value", [
    ("thumbnail", "not-a-url"),
    ("frontend", "also not a url"),
    ("details", []),
    ("details", [["kind", {"kind": "true"}]]),
    ("name", "n" * 121),
    ("description", "d" * 1201),
])
async def test_add_invalid(
    client: AsyncClient,
    sample_canister_data: dict,
    controller_headers: dict,
    field: str,
    value,
):
    sample_canister_data[field] = value

    response = await client.post(
        f"{BASE}/canisters",
        json=sample_canister_data,
        headers=controller_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"] == "bad_parameters"

    listing = await client.get(f"{BASE}/canisters")
    assert listing.json()["total"] == 0


@pytest.mark.asyncio
async def test_add_undecodable(client: AsyncClient, controller_headers: dict):
    """Structurally broken bodies are bad parameters too."""
    response = await client.post(
        f"{BASE}/canisters",
        json={"name": "x", "details": [["standard", {"kind": "u64", "value": -1}]]},
        headers=controller_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"] == "bad_parameters"


@pytest.mark.asyncio
async def test_remove(
    client: AsyncClient,
    sample_canister_data: dict,
    controller_headers: dict,
):
    await client.post(f"{BASE}/canisters", json=sample_canister_data, headers=controller_headers)

    response = await client.delete(f"{BASE}/canisters/xtc-principal", headers=controller_headers)

    assert response.status_code == 204
    assert (await client.get(f"{BASE}/canisters/xtc-principal")).status_code == 404


@pytest.mark.asyncio
async def test_remove_missing(client: AsyncClient, controller_headers: dict):
    response = await client.delete(f"{BASE}/canisters/missing", headers=controller_headers)

    assert response.status_code == 404
    assert response.json()["error"] == "non_existent_item"


@pytest.mark.asyncio
async def test_remove_by_stranger(
    client: AsyncClient,
    sample_canister_data: dict,
    controller_headers: dict,
    stranger_headers: dict,
):
    await client.post(f"{BASE}/canisters", json=sample_canister_data, headers=controller_headers)

    response = await client.delete(f"{BASE}/canisters/xtc-principal", headers=stranger_headers)

    assert response.status_code == 403
    assert (await client.get(f"{BASE}/canisters/xtc-principal")).status_code == 200


@pytest.mark.asyncio
async def test_controller_handover(
    client: AsyncClient,
    sample_canister_data: dict,
    controller_headers: dict,
    stranger_headers: dict,
):
    """After handover only the new controller may update."""
    response = await client.put(
        f"{BASE}/controller",
        json={"controller": stranger_headers["X-Caller-Id"]},
        headers=controller_headers,
    )
    assert response.status_code == 200

    old = await client.post(f"{BASE}/canisters", json=sample_canister_data, headers=controller_headers)
    new = await client.post(f"{BASE}/canisters", json=sample_canister_data, headers=stranger_headers)

    assert old.status_code == 403
    assert new.status_code == 200


@pytest.mark.asyncio
async def test_controller_handover_by_stranger(client: AsyncClient, stranger_headers: dict):
    response = await client.put(
        f"{BASE}/controller",
        json={"controller": stranger_headers["X-Caller-Id"]},
        headers=stranger_headers,
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_registries_are_independent(
    client: AsyncClient,
    sample_canister_data: dict,
    controller_headers: dict,
):
    await client.post(f"{BASE}/canisters", json=sample_canister_data, headers=controller_headers)

    tokens = await client.get("/api/v1/tokens/canisters")

    assert tokens.json()["total"] == 0


@pytest.mark.asyncio
async def test_list_after_adds(
    client: AsyncClient,
    sample_canister_data: dict,
    controller_headers: dict,
):
    for i in range(3):
        data = {**sample_canister_data, "principal_id": f"p{i}"}
        await client.post(f"{BASE}/canisters", json=data, headers=controller_headers)

    response = await client.get(f"{BASE}/canisters")

    data = response.json()
    assert data["total"] == 3
    assert {item["principal_id"] for item in data["items"]} == {"p0", "p1", "p2"}


@pytest.mark.asyncio
async def test_stranger_never_sees_decoding_error(client: AsyncClient, stranger_headers: dict):
    """Authority is checked before the body is decoded."""
    response = await client.post(
        f"{BASE}/canisters",
        json={"name": "x", "details": [["standard", {"kind": "u64", "value": -1}]]},
        headers=stranger_headers,
    )

    assert response.status_code == 403
    assert response.json()["error"] == "not_authorized"


@pytest.mark.asyncio
async def test_non_finite_float_detail(
    client: AsyncClient,
    sample_canister_data: dict,
    controller_headers: dict,
    nft_service,
):
    """Infinite float details are accepted, stored and read back."""
    sample_canister_data["details"] = [["standard", {"kind": "float", "value": math.inf}]]

    response = await client.post(
        f"{BASE}/canisters",
        content=json.dumps(sample_canister_data),
        headers={**controller_headers, "Content-Type": "application/json"},
    )

    assert response.status_code == 200
    assert nft_service.get("xtc-principal").details[0][1].value == math.inf

    fetched = await client.get(f"{BASE}/canisters/xtc-principal")
    listing = await client.get(f"{BASE}/canisters")

    assert fetched.status_code == 200
    assert fetched.json()["details"][0][1]["value"] == math.inf
    assert listing.json()["items"][0]["details"][0][1]["value"] == math.inf
