"""
Pydantic schemas for request/response validation.
"""

from nft_registry.schemas.canister import (
    CanisterListResponse,
    ControllerUpdate,
    OperationResponse,
    RegistryNameResponse,
)
from nft_registry.schemas.error import ErrorResponse

__all__ = [
    "CanisterListResponse",
    "ControllerUpdate",
    "OperationResponse",
    "RegistryNameResponse",
    "ErrorResponse",
]
