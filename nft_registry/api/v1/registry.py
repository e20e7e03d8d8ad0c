"""
Registry endpoints.

Queries (name, get, list) need no caller identity. Updates (add, remove,
controller handover) require the registry controller, checked before the
request body is decoded.
"""

from fastapi import APIRouter, Response
from pydantic import BaseModel

from nft_registry.core.exceptions import NonExistentItem
from nft_registry.dependencies import Controller, Service
from nft_registry.models.canister import CanisterInfo
from nft_registry.schemas.canister import (
    CanisterListResponse,
    ControllerUpdate,
    OperationResponse,
    RegistryNameResponse,
)
from nft_registry.schemas.error import ErrorResponse

router = APIRouter()

_update_errors = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
}


def _json_response(model: BaseModel) -> Response:
    """Render through pydantic so non-finite float details survive."""
    return Response(content=model.model_dump_json(), media_type="application/json")


@router.get("/{registry}/name", response_model=RegistryNameResponse)
async def get_registry_name(service: Service):
    """Display name of the registry."""
    return RegistryNameResponse(name=service.name())


@router.get("/{registry}/canisters", response_model=CanisterListResponse)
async def list_canisters(service: Service):
    """
    List every registered record.

    Order is unspecified and may differ between calls.
    """
    items = service.get_all()
    return _json_response(CanisterListResponse(items=items, total=len(items)))


@router.get(
    "/{registry}/canisters/{principal_id}",
    response_model=CanisterInfo,
    responses={404: {"model": ErrorResponse}},
)
async def get_canister(principal_id: str, service: Service):
    """Get the record registered under a principal id."""
    canister = service.get(principal_id)
    if canister is None:
        raise NonExistentItem(principal_id)
    return _json_response(canister)


@router.post(
    "/{registry}/canisters",
    response_model=OperationResponse,
    responses=_update_errors,
)
async def add_canister(canister: CanisterInfo, service: Service, caller: Controller):
    """
    Register a record, replacing any record with the same principal id.
    Controller only.

    The record must carry a valid thumbnail URL (and frontend URL if set),
    exactly one "standard" detail, a name of at most 120 characters and a
    description of at most 1200 characters.
    """
    service.add(caller, canister)
    return OperationResponse()


@router.delete(
    "/{registry}/canisters/{principal_id}",
    status_code=204,
    responses={**_update_errors, 404: {"model": ErrorResponse}},
)
async def remove_canister(principal_id: str, service: Service, caller: Controller):
    """Remove a registered record. Controller only."""
    service.remove(caller, principal_id)
    return Response(status_code=204)


@router.put(
    "/{registry}/controller",
    response_model=OperationResponse,
    responses=_update_errors,
)
async def set_controller(data: ControllerUpdate, service: Service, caller: Controller):
    """Hand control of the registry to another identifier. Controller only."""
    service.replace_controller(caller, data.controller)
    return OperationResponse()
