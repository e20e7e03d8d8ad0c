"""
Authentication and authorization for the NFT Registry API.
Caller identity comes from JWT bearer tokens; authority is a single controller.
"""

from nft_registry.auth.jwt import validate_token, extract_caller, fetch_jwks
from nft_registry.auth.guard import AccessGuard, ControllerState
from nft_registry.auth.dependencies import get_caller, Caller

__all__ = [
    # JWT functions
    "validate_token",
    "extract_caller",
    "fetch_jwks",
    # Controller authority
    "AccessGuard",
    "ControllerState",
    # Dependencies
    "get_caller",
    "Caller",
]
