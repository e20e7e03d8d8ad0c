"""
Pydantic schemas for registry request/response bodies.
Records themselves travel as ``CanisterInfo``.
"""

from pydantic import BaseModel, ConfigDict, Field

from nft_registry.models.canister import CanisterInfo


# ===================
# Request Schemas
# ===================

class ControllerUpdate(BaseModel):
    """Schema for handing over control (PUT /{registry}/controller)."""

    controller: str = Field(
        ...,
        min_length=1,
        description="Identifier of the new controller",
    )


# ===================
# Response Schemas
# ===================

class OperationResponse(BaseModel):
    """Successful update result."""

    status: str = "ok"


class RegistryNameResponse(BaseModel):
    """Display name of a registry."""

    name: str


class CanisterListResponse(BaseModel):
    """All records of a registry, in no particular order."""

    model_config = ConfigDict(ser_json_inf_nan="constants")

    items: list[CanisterInfo]
    total: int
